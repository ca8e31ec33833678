"""Shared test fixtures."""

from collections.abc import Callable

import httpx
import pytest
from agora.config import ApiConfig, Config, ServerConfig, ShellConfig

Handler = Callable[[httpx.Request], httpx.Response]

USERS_PAYLOAD = {
    "users": [
        {"id": "1", "name": "Alice", "email": "alice@example.com"},
        {"id": "2", "name": "Bob", "email": "bob@example.com"},
    ]
}


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration with default sections."""
    return Config(
        server=ServerConfig(),
        api=ApiConfig(base_url="http://backend.test/api"),
        shell=ShellConfig(app_name="Agora", breakpoint=768),
    )


@pytest.fixture
def users_payload() -> dict:
    return {"users": [dict(user) for user in USERS_PAYLOAD["users"]]}


@pytest.fixture
def mock_http() -> Callable[[Handler], httpx.AsyncClient]:
    """Return a factory for AsyncClients backed by a request handler."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
