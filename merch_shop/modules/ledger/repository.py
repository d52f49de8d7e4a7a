"""Repository protocol for the append-only ledger."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import LedgerEntry, PurchaseRecord


class LedgerRepository(Protocol):
    async def append_transfer(self, *, from_user_id: int, to_user_id: int, amount: int) -> LedgerEntry:
        ...

    async def append_purchase(self, *, account_id: int, item_name: str, price: int) -> PurchaseRecord:
        ...

    async def list_sent(self, account_id: int, limit: int) -> Sequence[LedgerEntry]:
        ...

    async def list_received(self, account_id: int, limit: int) -> Sequence[LedgerEntry]:
        ...
