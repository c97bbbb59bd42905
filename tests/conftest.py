"""Pytest configuration and fixtures for neo-storage-client tests."""

import base64
import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest
import pytest_asyncio

from neo_storage_client.client import StorageClient
from neo_storage_client.config.settings import ClientSettings
from neo_storage_client.platform.session.infrastructure.token_storage import MemoryTokenStorage
from neo_storage_client.ui.memory_view import MemoryView

API_BASE = "http://api.test"

Route = Union[httpx.Response, Callable[[httpx.Request], Any]]


class ManualClock:
    """Clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.value = start

    def now(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


class FakeStorageService:
    """Routes MockTransport requests by method and path and records them."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, route: Route) -> None:
        self.routes[(method.upper(), path)] = route

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method.upper() and r.url.path == path]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        if isinstance(route, httpx.Response):
            return httpx.Response(route.status_code, headers=route.headers, content=route.content)
        result = route(request)
        if hasattr(result, "__await__"):
            result = await result
        return result


def make_token(claims: Optional[Dict[str, Any]] = None) -> str:
    """Unsigned three-segment token carrying ``claims``."""

    def encode(value: Dict[str, Any]) -> str:
        raw = json.dumps(value).encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

    return ".".join([encode({"alg": "HS256", "typ": "JWT"}), encode(claims or {"sub": "user-1"}), "signature"])


def file_json(
    file_id: int,
    name: str = "notes.txt",
    content_type: str = "text/plain",
    thumbnail_name: Optional[str] = None,
    size: int = 10,
) -> Dict[str, Any]:
    return {
        "id": file_id,
        "display_name": name,
        "size": size,
        "content_type": content_type,
        "created_at": "2024-01-01T00:00:00Z",
        "thumbnail_name": thumbnail_name,
    }


def page_json(count: int, total: int, start: int = 1, **kwargs) -> Dict[str, Any]:
    return {
        "items": [file_json(i, name=f"file-{i}.txt", **kwargs) for i in range(start, start + count)],
        "total": total,
    }


@pytest.fixture
def settings(tmp_path):
    return ClientSettings(
        api_base=API_BASE,
        max_file_size_bytes=1024,
        unauthorized_cooldown_seconds=0.5,
        token_store_path=tmp_path / "session.json",
        download_dir=tmp_path / "downloads",
    )


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def view():
    return MemoryView()


@pytest.fixture
def service():
    return FakeStorageService()


@pytest.fixture
def token():
    return make_token({"sub": "user-1"})


@pytest.fixture
def token_storage():
    return MemoryTokenStorage()


@pytest_asyncio.fixture
async def http_client(service):
    async with httpx.AsyncClient(transport=httpx.MockTransport(service)) as client:
        yield client


@pytest_asyncio.fixture
async def storage_client(settings, view, http_client, token_storage, clock):
    client = StorageClient(
        settings=settings,
        view=view,
        http_client=http_client,
        token_storage=token_storage,
        clock=clock,
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def logged_in_client(storage_client, token):
    storage_client.session_store.set_session(token)
    return storage_client


@pytest.fixture(name="make_token")
def make_token_fixture():
    return make_token


@pytest.fixture(name="file_json")
def file_json_fixture():
    return file_json


@pytest.fixture(name="page_json")
def page_json_fixture():
    return page_json
