"""Repository protocol for inventory counters."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import InventoryItem


class InventoryRepository(Protocol):
    async def add_item(self, account_id: int, item_name: str, quantity: int = 1) -> InventoryItem:
        """Create the line at ``quantity`` or increment the existing one."""
        ...

    async def list_items(self, account_id: int) -> Sequence[InventoryItem]:
        ...
