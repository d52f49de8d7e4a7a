from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from merch_shop.infrastructure.database import Database
from merch_shop.infrastructure.database.models import Account, CoinTransaction, InventoryLine, MerchPurchase

STRONG_PASSWORD = "Strong@Pass123"


async def fetch_balance(database: Database, account_id: int) -> int:
    async with database.session_factory() as session:
        return await session.scalar(select(Account.coins).where(Account.id == account_id))


async def fetch_quantity(database: Database, account_id: int, item_name: str) -> int:
    async with database.session_factory() as session:
        quantity = await session.scalar(
            select(InventoryLine.quantity).where(
                InventoryLine.user_id == account_id,
                InventoryLine.item_name == item_name,
            )
        )
    return quantity or 0


async def count_transfers(database: Database) -> int:
    async with database.session_factory() as session:
        return await session.scalar(select(func.count()).select_from(CoinTransaction))


async def count_purchases(database: Database) -> int:
    async with database.session_factory() as session:
        return await session.scalar(select(func.count()).select_from(MerchPurchase))


class BrokenLedger:
    """Ledger whose writes fail as if the database went away mid-transaction."""

    async def append_transfer(self, **kwargs):
        raise OperationalError("INSERT INTO coin_transactions", {}, Exception("disk I/O error"))

    async def append_purchase(self, **kwargs):
        raise OperationalError("INSERT INTO merch_purchases", {}, Exception("disk I/O error"))

    async def list_sent(self, account_id, limit):
        return []

    async def list_received(self, account_id, limit):
        return []
