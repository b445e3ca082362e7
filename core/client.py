"""Authenticated request dispatcher for the eBay REST APIs."""
import logging
from typing import Any

import httpx

from core.auth import TokenManager
from core.config import Credentials, get_config, get_credentials, get_environment_settings
from core.errors import ApiError, AuthError
from utils.response_utils import extract_error_message, robust_parse_text

logger = logging.getLogger(__name__)


class ApiClient:
    """Sends one request per call with a bearer token and normalizes eBay error bodies.

    There is no retry: 401 raises AuthError (and drops the cached token so the
    next call re-authenticates), other non-2xx statuses raise ApiError, and
    transport errors propagate as raised by httpx.
    """

    def __init__(self, base_url: str, token_manager: TokenManager, http_client: httpx.AsyncClient, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.token_manager = token_manager
        self.http = http_client
        self.timeout = timeout

    @classmethod
    def from_config(cls, credentials: Credentials | None = None, http_client: httpx.AsyncClient | None = None) -> "ApiClient":
        """Build the client, its token manager and a shared httpx client from config.yaml and the environment."""
        cfg = get_config()
        credentials = credentials or get_credentials()
        settings = get_environment_settings(credentials.environment)
        timeout = float(cfg.get("request_timeout", 30.0))
        http_client = http_client or httpx.AsyncClient(timeout=timeout)
        token_manager = TokenManager(
            credentials,
            auth_url=settings["auth_url"],
            scope=cfg.get("oauth_scope", ""),
            http_client=http_client,
            safety_margin=float(cfg.get("token_safety_margin", 60)),
            timeout=timeout,
        )
        return cls(settings["api_url"], token_manager, http_client, timeout=timeout)

    async def call(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        token = await self.token_manager.get_token()
        request_headers = {"Authorization": f"Bearer {token}", "Accept": "application/json"}
        if body is not None:
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, path, params)
        response = await self.http.request(
            method,
            url,
            params=params or None,
            json=body,
            headers=request_headers,
            timeout=self.timeout,
        )

        if response.is_error:
            self._raise_for_response(method, path, response)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Failed to decode JSON from {path}: {e}; returning parsed fallback (raw/ndjson/first-chunk)")
            return robust_parse_text(response.text)

    def _raise_for_response(self, method: str, path: str, response: httpx.Response) -> None:
        try:
            body = response.json()
        except ValueError:
            body = None
        message = extract_error_message(body)
        if not message:
            text = response.text.strip()
            message = f"HTTP {response.status_code}: {text[:200] if text else response.reason_phrase}"

        logger.warning("%s %s failed with status %s: %s", method, path, response.status_code, message)
        if response.status_code == 401:
            self.token_manager.clear_token()
            raise AuthError(message, status_code=401)
        errors = body.get("errors") if isinstance(body, dict) and isinstance(body.get("errors"), list) else []
        raise ApiError(message, response.status_code, errors)

    async def get(self, path: str, params: dict[str, Any] | None = None, headers: dict[str, str] | None = None) -> Any:
        return await self.call("GET", path, params=params, headers=headers)

    async def post(self, path: str, body: Any = None, params: dict[str, Any] | None = None, headers: dict[str, str] | None = None) -> Any:
        return await self.call("POST", path, params=params, body=body, headers=headers)

    async def put(self, path: str, body: Any = None, headers: dict[str, str] | None = None) -> Any:
        return await self.call("PUT", path, body=body, headers=headers)

    async def delete(self, path: str) -> Any:
        return await self.call("DELETE", path)

    def is_authenticated(self) -> bool:
        return self.token_manager.is_authenticated()

    async def aclose(self) -> None:
        await self.http.aclose()
