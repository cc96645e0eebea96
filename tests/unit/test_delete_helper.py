"""Tests for delete_record."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from foodtrace.core.config import ApiSettings
from foodtrace.helpers import delete_record
from foodtrace.pages import INVENTORY_ENDPOINT
from foodtrace.toast import ToastBuffer, ToastRef
from foodtrace.transport.http import AsyncHTTPTransport


@pytest.mark.asyncio
async def test_successful_delete_notifies_and_refetches_once(
    transport: AsyncHTTPTransport,
    backend,
    make_record,
    toast_ref: ToastRef,
    toasts: ToastBuffer,
) -> None:
    backend.seed(make_record(id=5))
    refetch = MagicMock()

    await delete_record(
        id=5,
        endpoint=INVENTORY_ENDPOINT,
        name="Inventory Record",
        toast_ref=toast_ref,
        token="test-token",
        refetch=refetch,
        transport=transport,
    )

    refetch.assert_called_once_with()
    [message] = toasts.messages
    assert message.severity == "success"
    assert message.detail == "Inventory Record deleted successfully"
    [request] = backend.calls("DELETE")
    assert request.url.path == f"{INVENTORY_ENDPOINT}/5"
    assert request.headers["Authorization"] == "Bearer test-token"
    assert 5 not in backend.records


@pytest.mark.asyncio
async def test_failed_delete_notifies_without_refetch(
    transport: AsyncHTTPTransport,
    toast_ref: ToastRef,
    toasts: ToastBuffer,
) -> None:
    refetch = MagicMock()

    await delete_record(
        id=5,
        endpoint=INVENTORY_ENDPOINT,
        name="Inventory Record",
        toast_ref=toast_ref,
        token="test-token",
        refetch=refetch,
        transport=transport,
    )

    refetch.assert_not_called()
    [message] = toasts.messages
    assert message.severity == "error"
    assert message.detail == "not found"


@pytest.mark.asyncio
async def test_network_failure_notifies_without_refetch(
    api_settings: ApiSettings, toast_ref: ToastRef, toasts: ToastBuffer
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    transport = AsyncHTTPTransport(api_settings, http_transport=httpx.MockTransport(handler))
    refetch = MagicMock()
    await delete_record(
        id=5,
        endpoint=INVENTORY_ENDPOINT,
        name="Inventory Record",
        toast_ref=toast_ref,
        token="test-token",
        refetch=refetch,
        transport=transport,
    )
    await transport.close()

    refetch.assert_not_called()
    [message] = toasts.messages
    assert message.severity == "error"
    assert "Connection refused" in message.detail


@pytest.mark.asyncio
async def test_async_refetch_is_awaited(
    transport: AsyncHTTPTransport, backend, make_record
) -> None:
    backend.seed(make_record(id=5))
    refetch = AsyncMock()
    await delete_record(
        id=5,
        endpoint=INVENTORY_ENDPOINT,
        name="Inventory Record",
        toast_ref=None,
        token="test-token",
        refetch=refetch,
        transport=transport,
    )
    refetch.assert_awaited_once()


@pytest.mark.asyncio
async def test_deleting_twice_reports_backend_result(
    transport: AsyncHTTPTransport,
    backend,
    make_record,
    toast_ref: ToastRef,
    toasts: ToastBuffer,
) -> None:
    backend.seed(make_record(id=5))
    refetch = MagicMock()
    for _ in range(2):
        await delete_record(
            id=5,
            endpoint=INVENTORY_ENDPOINT,
            name="Inventory Record",
            toast_ref=toast_ref,
            token="test-token",
            refetch=refetch,
            transport=transport,
        )
    assert refetch.call_count == 1
    assert [m.severity for m in toasts.messages] == ["success", "error"]


@pytest.mark.asyncio
async def test_unexpected_error_notifies_without_refetch(
    toast_ref: ToastRef, toasts: ToastBuffer
) -> None:
    transport = AsyncMock()
    transport.request.side_effect = RuntimeError("event loop is closed")
    refetch = MagicMock()

    await delete_record(
        id=5,
        endpoint=INVENTORY_ENDPOINT,
        name="Inventory Record",
        toast_ref=toast_ref,
        token="test-token",
        refetch=refetch,
        transport=transport,
    )

    refetch.assert_not_called()
    assert [(m.severity, m.detail) for m in toasts.messages] == [
        ("error", "event loop is closed")
    ]
