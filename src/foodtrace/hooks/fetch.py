"""GET hook: loads an endpoint and re-runs when its dependencies change."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

import structlog

from ..context import LayoutContext
from ..core.exceptions import FoodTraceError
from ..transport.http import AsyncHTTPTransport

logger = structlog.get_logger()


def deps_changed(previous: Sequence[Any], current: Sequence[Any]) -> bool:
    """Shallow comparison of two dependency lists."""
    if len(previous) != len(current):
        return True
    return any(old is not new and old != new for old, new in zip(previous, current))


class FetchHook:
    """Holds ``data`` and ``loading`` for one endpoint.

    Every issued GET gets a sequence number. A response is applied only if no
    newer GET has been issued since, so a slow superseded request can never
    overwrite fresher data. Requests are never cancelled; superseded results
    are dropped on arrival. Failures keep the previous ``data``.
    """

    def __init__(
        self,
        context: LayoutContext,
        transport: AsyncHTTPTransport,
        endpoint: str,
    ) -> None:
        self._context = context
        self._transport = transport
        self.endpoint = endpoint
        self.data: Any = None
        self.loading = False
        self._deps: tuple[Any, ...] | None = None
        self._issued = 0
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def mounted(self) -> bool:
        return self._deps is not None

    def use(self, deps: Sequence[Any]) -> asyncio.Task[None] | None:
        """Schedule a GET on first use and whenever ``deps`` changed.

        Must be called from a running event loop. Returns the scheduled task,
        or ``None`` when the dependencies are unchanged.
        """
        deps = tuple(deps)
        if self._deps is not None and not deps_changed(self._deps, deps):
            return None
        self._deps = deps
        return self.refresh()

    def mount(self, deps: Sequence[Any]) -> asyncio.Task[None]:
        """Record ``deps`` and schedule a GET, as a freshly shown screen does."""
        self._deps = tuple(deps)
        return self.refresh()

    def refresh(self) -> asyncio.Task[None]:
        """Schedule a GET regardless of dependencies."""
        self._issued += 1
        self.loading = True
        task = asyncio.create_task(self._load(self._issued))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def settle(self) -> None:
        """Wait for every GET still in flight."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight))

    async def _load(self, seq: int) -> None:
        try:
            data = await self._transport.request(
                "GET", self.endpoint, token=self._context.access_token
            )
        except FoodTraceError as e:
            logger.warning(
                "fetch_failed",
                endpoint=self.endpoint,
                status_code=e.status_code,
                error=e.message,
            )
        except Exception as e:
            logger.warning(
                "fetch_failed", endpoint=self.endpoint, error=str(e) or type(e).__name__
            )
        else:
            if seq == self._issued:
                self.data = data
            else:
                logger.debug(
                    "fetch_result_stale", endpoint=self.endpoint, seq=seq, latest=self._issued
                )
        finally:
            if seq == self._issued:
                self.loading = False
