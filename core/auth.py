"""OAuth2 client-credentials token cache for the eBay REST APIs."""
import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable

import httpx

from core.config import Credentials
from core.errors import AuthError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessToken:
    value: str
    expires_at: float


class TokenManager:
    """Exchanges client credentials for a bearer token and caches it until near-expiry.

    Refresh is single-flight: concurrent callers that find the cache stale wait on
    one lock and reuse whatever token the first of them obtained.
    """

    def __init__(
        self,
        credentials: Credentials,
        auth_url: str,
        scope: str,
        http_client: httpx.AsyncClient,
        safety_margin: float = 60,
        timeout: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.credentials = credentials
        self.auth_url = auth_url
        self.scope = scope
        self.safety_margin = safety_margin
        self.timeout = timeout
        self._http = http_client
        self._clock = clock
        self._token: AccessToken | None = None
        self._lock = asyncio.Lock()

    def _valid_token(self) -> AccessToken | None:
        token = self._token
        if token is not None and self._clock() < token.expires_at:
            return token
        return None

    async def get_token(self) -> str:
        token = self._valid_token()
        if token is not None:
            return token.value
        async with self._lock:
            # another caller may have refreshed while we waited
            token = self._valid_token()
            if token is None:
                token = await self._exchange()
                self._token = token
            return token.value

    async def _exchange(self) -> AccessToken:
        logger.info("Requesting new eBay access token (%s)", self.credentials.environment)
        try:
            response = await self._http.post(
                self.auth_url,
                data={"grant_type": "client_credentials", "scope": self.scope},
                auth=(self.credentials.client_id, self.credentials.client_secret),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise AuthError(f"eBay authentication failed: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if response.is_error:
            detail = payload.get("error_description") or payload.get("error") or f"HTTP {response.status_code}"
            logger.warning("eBay token exchange rejected with status %s", response.status_code)
            raise AuthError(f"eBay authentication failed: {detail}", status_code=response.status_code)

        value = payload.get("access_token")
        if not value:
            raise AuthError("eBay authentication failed: response did not contain an access_token")
        try:
            expires_in = float(payload.get("expires_in", 0))
        except (TypeError, ValueError):
            expires_in = 0.0

        token = AccessToken(value=value, expires_at=self._clock() + expires_in - self.safety_margin)
        logger.info("Obtained eBay access token valid for %ss", int(expires_in))
        return token

    def is_authenticated(self) -> bool:
        return self._valid_token() is not None

    def clear_token(self) -> None:
        self._token = None

    def status(self) -> dict:
        token = self._valid_token()
        return {
            "authenticated": token is not None,
            "environment": self.credentials.environment,
            "expires_in_seconds": int(token.expires_at - self._clock()) if token else 0,
        }
