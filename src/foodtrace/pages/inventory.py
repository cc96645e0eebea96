"""Food ingredient inventory screen: table plus add/edit dialog."""

from __future__ import annotations

import math
import re
from typing import Any
from urllib.parse import urlencode

import structlog
from pydantic import ValidationError

from ..context import LayoutContext
from ..helpers import delete_record
from ..hooks import FetchHook, SubmitHook, SubmitOptions
from ..models import (
    FLOAT_FIELDS,
    INTEGER_FIELDS,
    InventoryRecord,
    empty_record,
    inventory_list_adapter,
)
from ..toast import ToastBuffer, ToastRef
from ..transport.http import AsyncHTTPTransport

logger = structlog.get_logger()

INVENTORY_ENDPOINT = "/api/food_ingredient_inventory_trace"

_INT_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(raw: str) -> int:
    """Leading integer of ``raw`` (``0x`` prefix means hex), or 0 when there is none."""
    match = _INT_PREFIX.match(raw)
    if not match:
        return 0
    sign, hex_digits, digits = match.groups()
    value = int(hex_digits, 16) if hex_digits else int(digits)
    return -value if sign == "-" else value


def parse_float(raw: str) -> float:
    """Leading decimal number of ``raw``, or 0 when there is none or it is not finite."""
    match = _FLOAT_PREFIX.match(raw)
    if not match:
        return 0.0
    value = float(match.group(1))
    return value if math.isfinite(value) else 0.0


class InventoryPage:
    title = "Food Ingredient Inventory"
    record_name = "Inventory Record"

    def __init__(
        self,
        context: LayoutContext,
        transport: AsyncHTTPTransport,
        *,
        page: int = 0,
        size: int = 10,
        sort: str = "-id",
    ) -> None:
        self.context = context
        self._transport = transport
        self.toasts = ToastBuffer()
        self.toast = ToastRef()
        self.toast.attach(self.toasts)

        self.inventory: list[InventoryRecord] = []
        # Flipped after every successful mutation; the fetch hook depends on it.
        self.update = False
        self.show_form = False
        self.is_edit = False
        self.current_record: InventoryRecord | None = None

        query = urlencode({"page": page, "size": size, "sort": sort})
        self.fetch = FetchHook(context, transport, f"{INVENTORY_ENDPOINT}?{query}")
        self.submit = SubmitHook(context, transport)

    @property
    def table_loading(self) -> bool:
        return self.fetch.loading or self.submit.loading

    async def load(self) -> None:
        """Show the screen: issue a fresh GET, wait for it and copy the items into the table."""
        self.fetch.mount([self.update])
        await self.fetch.settle()
        self.sync_inventory()

    def sync_inventory(self) -> None:
        data = self.fetch.data
        if not isinstance(data, dict) or data.get("items") is None:
            return
        try:
            self.inventory = inventory_list_adapter.validate_python(data["items"])
        except ValidationError as e:
            logger.warning("inventory_items_invalid", errors=e.error_count())

    def refetch(self) -> None:
        self.update = not self.update
        self.fetch.use([self.update])

    def find(self, record_id: int) -> InventoryRecord | None:
        return next((r for r in self.inventory if r.id == record_id), None)

    def handle_add(self) -> None:
        self.is_edit = False
        self.current_record = empty_record()
        self.show_form = True

    def handle_edit(self, record: InventoryRecord) -> None:
        self.is_edit = True
        self.current_record = record.model_copy()
        self.show_form = True

    def close_form(self) -> None:
        self.show_form = False

    def set_field(self, name: str, raw: str) -> None:
        """Apply one form input to the record being edited."""
        if name in INTEGER_FIELDS:
            value: float = parse_int(raw)
        elif name in FLOAT_FIELDS:
            value = parse_float(raw)
        else:
            raise KeyError(f"unknown inventory field: {name}")
        current = self.current_record or empty_record()
        self.current_record = current.model_copy(update={name: value})

    async def handle_save(self) -> Any:
        record = self.current_record or empty_record()
        if self.is_edit:
            url = f"{INVENTORY_ENDPOINT}/{record.id}"
            options = SubmitOptions(method="PUT", body=record.model_dump(mode="json"))
        else:
            url = INVENTORY_ENDPOINT
            options = SubmitOptions(
                method="POST", body=record.model_dump(mode="json", exclude_none=True)
            )

        result = await self.submit.submit_request(url, options, self.toast)
        if result is not None:
            self.show_form = False
            self.refetch()
        return result

    async def handle_delete(self, record: InventoryRecord) -> None:
        if record.id is None:
            raise ValueError("cannot delete a record that has no id yet")
        await delete_record(
            id=record.id,
            endpoint=INVENTORY_ENDPOINT,
            name=self.record_name,
            toast_ref=self.toast,
            token=self.context.access_token,
            refetch=self.refetch,
            transport=self._transport,
        )
