import copy
import os
from dataclasses import dataclass, field

import yaml

from core.errors import ConfigError

ENVIRONMENTS = ("sandbox", "production")

DEFAULT_CONFIG = {
    "environments": {
        "sandbox": {
            "api_url": "https://api.sandbox.ebay.com",
            "auth_url": "https://api.sandbox.ebay.com/identity/v1/oauth2/token",
        },
        "production": {
            "api_url": "https://api.ebay.com",
            "auth_url": "https://api.ebay.com/identity/v1/oauth2/token",
        },
    },
    "oauth_scope": "https://api.ebay.com/oauth/api_scope",
    "request_timeout": 30.0,
    "token_safety_margin": 60,
    "api_status_feed_url": "https://developer.ebay.com/rss/api-status",
    "log_level": "INFO",
    "api_paths": {},
}


@dataclass(frozen=True)
class Credentials:
    client_id: str
    client_secret: str = field(repr=False)
    environment: str = "sandbox"


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads configuration from YAML file on first instantiation.
        """
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._load_config()
        return cls._instance

    @classmethod
    def _load_config(cls):
        """
        Load config.yaml (or the file named by EBAY_MCP_CONFIG) over the built-in defaults.
        """
        config_path = os.environ.get("EBAY_MCP_CONFIG") or os.path.join(os.path.dirname(__file__), "..", "config.yaml")
        config_path = os.path.abspath(config_path)
        config = copy.deepcopy(DEFAULT_CONFIG)
        if os.path.exists(config_path):
            with open(config_path, "r") as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ConfigError(f"{config_path} must contain a mapping at the top level")
            _merge(config, loaded)
        elif os.environ.get("EBAY_MCP_CONFIG"):
            raise ConfigError(f"Config file not found: {config_path}")
        cls._config = config

    @classmethod
    def reset(cls):
        """Forget the loaded configuration so the next access re-reads it."""
        cls._instance = None
        cls._config = None

    def get_config(self):
        """
        Return the loaded configuration dictionary.
        """
        return self._config


def _merge(base: dict, override: dict) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


def get_config():
    """
    Helper function to get the singleton configuration instance's config dictionary.
    """
    return ConfigLoader().get_config()


def get_environment_settings(environment: str) -> dict:
    """Return the `api_url` / `auth_url` pair configured for `environment`."""
    settings = (get_config().get("environments") or {}).get(environment)
    if environment not in ENVIRONMENTS or not settings:
        raise ConfigError(f"Unknown eBay environment '{environment}', expected one of {', '.join(ENVIRONMENTS)}")
    return settings


def get_credentials() -> Credentials:
    """Read client credentials from EBAY_CLIENT_ID / EBAY_CLIENT_SECRET / EBAY_ENVIRONMENT."""
    client_id = os.environ.get("EBAY_CLIENT_ID", "").strip()
    client_secret = os.environ.get("EBAY_CLIENT_SECRET", "").strip()
    environment = os.environ.get("EBAY_ENVIRONMENT", "sandbox").strip().lower() or "sandbox"

    missing = [name for name, value in (("EBAY_CLIENT_ID", client_id), ("EBAY_CLIENT_SECRET", client_secret)) if not value]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")
    if environment not in ENVIRONMENTS:
        raise ConfigError(f"EBAY_ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got '{environment}'")
    return Credentials(client_id=client_id, client_secret=client_secret, environment=environment)
