"""Shared fixtures: settings, session context and a mocked REST backend."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from foodtrace.context import LayoutContext
from foodtrace.core.config import ApiSettings, AuthSettings, Settings, get_settings
from foodtrace.pages import INVENTORY_ENDPOINT
from foodtrace.toast import ToastBuffer, ToastRef
from foodtrace.transport.http import AsyncHTTPTransport

TEST_TOKEN = "test-token"
TEST_BASE_URL = "http://mock-server:8000"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Auto-clear the settings LRU cache after each test to prevent pollution."""
    yield
    get_settings.cache_clear()


# --- Configuration Fixtures ---


@pytest.fixture
def api_settings() -> ApiSettings:
    return ApiSettings(base_url=TEST_BASE_URL)


@pytest.fixture
def settings(api_settings: ApiSettings) -> Settings:
    """Settings for unit tests (no real server)."""
    return Settings(
        app_name="Food Trace Test",
        api=api_settings,
        auth=AuthSettings(token=TEST_TOKEN),
    )


@pytest.fixture
def context() -> LayoutContext:
    return LayoutContext(access_token=TEST_TOKEN)


@pytest.fixture
def toasts() -> ToastBuffer:
    return ToastBuffer()


@pytest.fixture
def toast_ref(toasts: ToastBuffer) -> ToastRef:
    return ToastRef(current=toasts)


# --- Mock Backend ---


class FakeBackend:
    """In-memory inventory trace API served through ``httpx.MockTransport``.

    ``fail(method, path, status, body)`` makes the next matching request answer
    with the given status and JSON body instead.
    """

    def __init__(self) -> None:
        self.records: dict[int, dict[str, Any]] = {}
        self.next_id = 1
        self.requests: list[httpx.Request] = []
        self._failures: dict[tuple[str, str], tuple[int, Any]] = {}

    def seed(self, *records: dict[str, Any]) -> None:
        for record in records:
            record_id = record.get("id") or self.next_id
            self.records[record_id] = {**record, "id": record_id}
            self.next_id = max(self.next_id, record_id + 1)

    def fail(self, method: str, path: str, status: int, body: Any = None) -> None:
        self._failures[(method, path)] = (status, body)

    def calls(self, method: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        failure = self._failures.pop((request.method, path), None)
        if failure is not None:
            status, body = failure
            return httpx.Response(status, json=body)

        if path == INVENTORY_ENDPOINT and request.method == "GET":
            size = int(request.url.params.get("size", "10"))
            items = sorted(self.records.values(), key=lambda r: -r["id"])[:size]
            return httpx.Response(200, json={"items": items, "total": len(self.records)})

        if path == INVENTORY_ENDPOINT and request.method == "POST":
            payload = json.loads(request.content)
            record = {**payload, "id": self.next_id}
            self.records[self.next_id] = record
            self.next_id += 1
            return httpx.Response(201, json=record)

        prefix = INVENTORY_ENDPOINT + "/"
        if path.startswith(prefix):
            record_id = int(path[len(prefix):])
            if record_id not in self.records:
                return httpx.Response(404, json={"message": "not found"})
            if request.method == "PUT":
                payload = json.loads(request.content)
                self.records[record_id] = {**payload, "id": record_id}
                return httpx.Response(
                    200, json={**self.records[record_id], "message": "Record updated"}
                )
            if request.method == "DELETE":
                del self.records[record_id]
                return httpx.Response(200, json={"message": "deleted"})

        return httpx.Response(404, json={"message": f"no route for {request.method} {path}"})


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture
async def transport(
    api_settings: ApiSettings, backend: FakeBackend
) -> AsyncGenerator[AsyncHTTPTransport, None]:
    """Transport wired to the fake backend."""
    transport = AsyncHTTPTransport(api_settings, http_transport=httpx.MockTransport(backend.handler))
    yield transport
    await transport.close()


# --- Mock Response Helpers ---


def _make_record(
    id: int | None = None,
    food_ingredient_id: int = 3,
    quantity: float = 10,
    total_amount: float = 25.5,
    supplier_id: int = 7,
) -> dict[str, Any]:
    """Create an inventory trace record payload."""
    record: dict[str, Any] = {
        "food_ingredient_id": food_ingredient_id,
        "quantity": quantity,
        "total_amount": total_amount,
        "supplier_id": supplier_id,
    }
    if id is not None:
        record["id"] = id
    return record


@pytest.fixture
def make_record():
    """Factory for inventory trace record payloads."""
    return _make_record
