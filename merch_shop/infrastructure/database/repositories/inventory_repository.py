"""SQLAlchemy implementation for inventory counters"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from merch_shop.infrastructure.database.models import InventoryLine
from merch_shop.modules.inventory.models import InventoryItem

from .base import AsyncRepository


class SqlInventoryRepository(AsyncRepository):
    async def add_item(self, account_id: int, item_name: str, quantity: int = 1) -> InventoryItem:
        insert = pg_insert if self.dialect_name == "postgresql" else sqlite_insert
        stmt = insert(InventoryLine).values(user_id=account_id, item_name=item_name, quantity=quantity)
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "item_name"],
            set_={"quantity": InventoryLine.quantity + stmt.excluded.quantity},
        ).returning(InventoryLine.item_name, InventoryLine.quantity)
        result = await self.session.execute(stmt)
        row = result.one()
        return InventoryItem(item_name=row.item_name, quantity=row.quantity)

    async def list_items(self, account_id: int) -> Sequence[InventoryItem]:
        stmt = (
            select(InventoryLine.item_name, InventoryLine.quantity)
            .where(InventoryLine.user_id == account_id)
            .order_by(InventoryLine.item_name)
        )
        result = await self.session.execute(stmt)
        return [InventoryItem(item_name=row.item_name, quantity=row.quantity) for row in result]
