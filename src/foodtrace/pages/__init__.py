"""Page controllers composed from the hooks."""

from .inventory import INVENTORY_ENDPOINT, InventoryPage, parse_float, parse_int
from .placeholder import EmployeeAwardPage, FoodWastePage, PlaceholderPage

__all__ = [
    "INVENTORY_ENDPOINT",
    "EmployeeAwardPage",
    "FoodWastePage",
    "InventoryPage",
    "PlaceholderPage",
    "parse_float",
    "parse_int",
]
