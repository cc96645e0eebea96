"""Pydantic schema for food ingredient inventory trace records."""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class InventoryRecord(BaseModel):
    """One inventory trace row. ``id`` stays ``None`` until the server assigns it."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    food_ingredient_id: int
    quantity: float
    total_amount: float
    supplier_id: int


# Single source of form defaults; copy before mutating.
EMPTY_RECORD = InventoryRecord(
    food_ingredient_id=0,
    quantity=0,
    total_amount=0,
    supplier_id=0,
)

INTEGER_FIELDS = ("food_ingredient_id", "supplier_id")
FLOAT_FIELDS = ("quantity", "total_amount")

inventory_list_adapter = TypeAdapter(list[InventoryRecord])


def empty_record() -> InventoryRecord:
    return EMPTY_RECORD.model_copy()
