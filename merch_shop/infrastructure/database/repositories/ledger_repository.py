"""SQLAlchemy implementation for the coin ledger"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import desc, select

from merch_shop.infrastructure.database.models import CoinTransaction, MerchPurchase
from merch_shop.modules.ledger.models import LedgerEntry, PurchaseRecord

from .base import AsyncRepository


class SqlLedgerRepository(AsyncRepository):
    async def append_transfer(self, *, from_user_id: int, to_user_id: int, amount: int) -> LedgerEntry:
        tx = CoinTransaction(from_user_id=from_user_id, to_user_id=to_user_id, amount=amount)
        self.session.add(tx)
        await self.session.flush()
        await self.session.refresh(tx)
        return self._to_entry(tx)

    async def append_purchase(self, *, account_id: int, item_name: str, price: int) -> PurchaseRecord:
        record = MerchPurchase(account_id=account_id, item_name=item_name, price=price)
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return PurchaseRecord(
            id=record.id,
            account_id=record.account_id,
            item_name=record.item_name,
            price=record.price,
            created_at=record.created_at,
        )

    async def list_sent(self, account_id: int, limit: int) -> Sequence[LedgerEntry]:
        stmt = (
            select(CoinTransaction)
            .where(CoinTransaction.from_user_id == account_id)
            .order_by(desc(CoinTransaction.created_at), desc(CoinTransaction.id))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_entry(row) for row in result.scalars().all()]

    async def list_received(self, account_id: int, limit: int) -> Sequence[LedgerEntry]:
        stmt = (
            select(CoinTransaction)
            .where(CoinTransaction.to_user_id == account_id)
            .order_by(desc(CoinTransaction.created_at), desc(CoinTransaction.id))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_entry(row) for row in result.scalars().all()]

    @staticmethod
    def _to_entry(model: CoinTransaction) -> LedgerEntry:
        return LedgerEntry(
            id=model.id,
            from_user_id=model.from_user_id,
            to_user_id=model.to_user_id,
            amount=model.amount,
            created_at=model.created_at,
        )
