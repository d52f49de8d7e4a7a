"""Domain models for inventory lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class InventoryItem:
    item_name: str
    quantity: int
