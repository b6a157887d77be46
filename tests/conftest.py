# tests/conftest.py
from collections.abc import Callable, Generator

import httpx
import pytest

from jwtgen import commands
from jwtgen.client.http import build_http_client
from jwtgen.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(LOG_LEVEL="WARNING")


@pytest.fixture
def coordinator() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """
    Build a fake coordinator. `routes` maps (method, path) to a response
    factory; every request seen is appended to the returned list.
    """

    def make(routes: dict) -> tuple[httpx.MockTransport, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            route = routes.get((request.method, request.url.path))
            if route is None:
                return httpx.Response(404, text="not found")
            return route(request)

        return httpx.MockTransport(handler), seen

    return make


@pytest.fixture
def patch_client(monkeypatch: pytest.MonkeyPatch) -> Callable[[httpx.MockTransport], None]:
    """Route the commands' HTTP client through a mock transport."""

    def install(transport: httpx.MockTransport) -> None:
        monkeypatch.setattr(
            commands, "build_http_client", lambda s: build_http_client(s, transport)
        )

    return install
