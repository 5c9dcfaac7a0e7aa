"""Pytest configuration and fixtures."""

from typing import AsyncGenerator, Callable, Dict

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from async_demo.api.dependencies import get_shared_http_client
from async_demo.core.config import ProductSettings, RemoteSettings
from async_demo.core.http_client import build_http_client, close_http_client
from async_demo.main import app

REMOTE_BASE_URL = "http://remote.test"


@pytest.fixture
def sample_todo() -> dict:
    """Todo body as returned by the external JSON API for id 1."""
    return {
        "userId": 1,
        "id": 1,
        "title": "delectus aut autem",
        "completed": False,
    }


@pytest.fixture
def todo_store(sample_todo) -> Dict[int, dict]:
    """Todos served by the stub remote API, keyed by id."""
    return {
        1: sample_todo,
        2: {"userId": 1, "id": 2, "title": "quis ut nam facilis et officia qui", "completed": False},
    }


@pytest.fixture
def remote_handler(todo_store) -> Callable[[httpx.Request], httpx.Response]:
    """Default stub handler: serve /todos/{id} from todo_store, 404 otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        parts = request.url.path.strip("/").split("/")
        if len(parts) == 2 and parts[0] == "todos" and parts[1].isdigit():
            todo = todo_store.get(int(parts[1]))
            if todo is not None:
                return httpx.Response(200, json=todo)
        return httpx.Response(404, json={})

    return handler


@pytest.fixture
def remote_settings() -> RemoteSettings:
    return RemoteSettings(base_url=REMOTE_BASE_URL, timeout_seconds=5)


@pytest.fixture
def instant_product_settings() -> ProductSettings:
    """Product settings with no simulated delay."""
    return ProductSettings(lookup_delay_ms=0)


@pytest_asyncio.fixture
async def http_client(remote_settings, remote_handler) -> AsyncGenerator[httpx.AsyncClient, None]:
    """AsyncClient whose requests are answered by remote_handler."""
    client = build_http_client(remote_settings, transport=httpx.MockTransport(remote_handler))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def client(http_client) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client wired to the stub remote API."""
    app.dependency_overrides[get_shared_http_client] = lambda: http_client
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await close_http_client()
