"""Domain records exchanged with the REST backend."""

from .inventory import (
    EMPTY_RECORD,
    FLOAT_FIELDS,
    INTEGER_FIELDS,
    InventoryRecord,
    empty_record,
    inventory_list_adapter,
)

__all__ = [
    "EMPTY_RECORD",
    "FLOAT_FIELDS",
    "INTEGER_FIELDS",
    "InventoryRecord",
    "empty_record",
    "inventory_list_adapter",
]
