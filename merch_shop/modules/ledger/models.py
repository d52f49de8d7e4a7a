"""Domain models for ledger records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True, frozen=True)
class LedgerEntry:
    id: int
    from_user_id: int
    to_user_id: int
    amount: int
    created_at: Optional[datetime]


@dataclass(slots=True, frozen=True)
class PurchaseRecord:
    id: int
    account_id: int
    item_name: str
    price: int
    created_at: Optional[datetime]
