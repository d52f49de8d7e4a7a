"""Per-account merch inventory."""

from .models import InventoryItem
from .repository import InventoryRepository

__all__ = ["InventoryItem", "InventoryRepository"]
