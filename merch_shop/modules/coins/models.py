"""Results of completed coin movements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class TransferReceipt:
    entry_id: int
    from_user_id: int
    to_user_id: int
    amount: int


@dataclass(slots=True, frozen=True)
class PurchaseReceipt:
    account_id: int
    item_name: str
    price: int
    quantity: int
