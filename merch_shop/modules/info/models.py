"""Domain models for the account summary."""

from __future__ import annotations

from dataclasses import dataclass, field

from merch_shop.modules.inventory.models import InventoryItem


@dataclass(slots=True, frozen=True)
class ReceivedCoins:
    from_user: str
    amount: int


@dataclass(slots=True, frozen=True)
class SentCoins:
    to_user: str
    amount: int


@dataclass(slots=True)
class AccountSummary:
    coins: int
    inventory: list[InventoryItem] = field(default_factory=list)
    received: list[ReceivedCoins] = field(default_factory=list)
    sent: list[SentCoins] = field(default_factory=list)
