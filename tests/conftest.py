"""Pytest configuration shared across the suite."""

import os
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

_DEFAULT_ENV_VARS: dict[str, str] = {
    "EBAY_CLIENT_ID": "test-client-id",
    "EBAY_CLIENT_SECRET": "test-client-secret",
    "EBAY_ENVIRONMENT": "sandbox",
}

for key, value in _DEFAULT_ENV_VARS.items():
    os.environ.setdefault(key, value)

from api import SellerApi  # noqa: E402
from core.auth import TokenManager  # noqa: E402
from core.client import ApiClient  # noqa: E402
from core.config import ConfigLoader, Credentials  # noqa: E402
from tools.registry import build_registry  # noqa: E402

SANDBOX_API = "https://api.sandbox.ebay.com"
SANDBOX_AUTH = "https://api.sandbox.ebay.com/identity/v1/oauth2/token"
TOKEN_PATH = "/identity/v1/oauth2/token"


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeEbay:
    """In-memory stand-in for the eBay token endpoint and REST APIs, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_calls = 0
        self.token_ttl = 7200
        self.token_status = 200
        self.token_body: dict[str, Any] | None = None
        self.token_exception: Exception | None = None
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def route(self, method: str, path: str, status: int = 200, json: Any = None, text: str | None = None) -> None:
        def _respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            if json is None:
                return httpx.Response(status)
            return httpx.Response(status, json=json)

        self._routes[(method, path)] = _respond

    def route_raising(self, method: str, path: str, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)

        self._routes[(method, path)] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.split(b"?")[0].decode("ascii")
        if path == TOKEN_PATH:
            self.token_calls += 1
            if self.token_exception is not None:
                raise self.token_exception
            body = self.token_body
            if body is None:
                body = {
                    "access_token": f"token-{self.token_calls}",
                    "expires_in": self.token_ttl,
                    "token_type": "Application Access Token",
                }
            return httpx.Response(self.token_status, json=body)
        respond = self._routes.get((request.method, path))
        if respond is None:
            return httpx.Response(404, json={"errors": [{"errorId": 404, "message": f"No fake route for {request.method} {path}"}]})
        return respond(request)

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != TOKEN_PATH]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Reload config.yaml for every test so env overrides never leak between tests."""
    monkeypatch.delenv("EBAY_MCP_CONFIG", raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_ebay() -> FakeEbay:
    return FakeEbay()


@pytest.fixture
def http_client(fake_ebay: FakeEbay) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_ebay.handler))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="client", client_secret="secret", environment="sandbox")


@pytest.fixture
def token_manager(credentials, http_client, clock) -> TokenManager:
    return TokenManager(
        credentials,
        auth_url=SANDBOX_AUTH,
        scope="https://api.ebay.com/oauth/api_scope",
        http_client=http_client,
        safety_margin=60,
        clock=clock,
    )


@pytest.fixture
def api_client(token_manager, http_client) -> ApiClient:
    return ApiClient(SANDBOX_API, token_manager, http_client, timeout=5.0)


@pytest.fixture
def seller_api(api_client) -> SellerApi:
    return SellerApi(api_client)


@pytest.fixture
def registry(seller_api):
    return build_registry(seller_api)
