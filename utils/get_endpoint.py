from typing import Any
from urllib.parse import quote

from core.config import get_config  # type: ignore
from core.errors import ConfigError


def get_endpoint(key: str) -> str:
    """Return the base path configured under `api_paths.<key>` (e.g. /sell/fulfillment/v1)."""
    _cfg = get_config() or {}
    path = (_cfg.get("api_paths") or {}).get(key)
    if not path:
        raise ConfigError(f"Missing API path for key '{key}' in config.yaml under 'api_paths'")
    return "/" + path.strip("/")


def api_path(base: str, *segments: Any) -> str:
    """Join `base` with path segments, quoting each so ids containing '/' or spaces stay one segment."""
    parts = [base.rstrip("/")]
    parts.extend(quote(str(segment), safe="") for segment in segments)
    return "/".join(parts)


def query_params(**params: Any) -> dict[str, Any] | None:
    """Drop parameters that were not supplied; None when nothing is left."""
    present = {key: value for key, value in params.items() if value is not None}
    return present or None
