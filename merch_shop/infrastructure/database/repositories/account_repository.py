"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from merch_shop.infrastructure.database.models import Account as AccountModel
from merch_shop.modules.accounts.exceptions import AccountAlreadyExistsError
from merch_shop.modules.accounts.models import MAX_COINS, Account, BalanceChange

from .base import AsyncRepository


class SqlAccountRepository(AsyncRepository):
    """Account repository backed by SQLAlchemy models."""

    async def get_by_id(self, account_id: int) -> Account | None:
        stmt = (
            select(AccountModel)
            .where(AccountModel.id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_username(self, username: str) -> Account | None:
        stmt = (
            select(AccountModel)
            .where(AccountModel.username == username)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_usernames(self, account_ids: Iterable[int]) -> dict[int, str]:
        ids = set(account_ids)
        if not ids:
            return {}
        stmt = select(AccountModel.id, AccountModel.username).where(AccountModel.id.in_(ids))
        result = await self.session.execute(stmt)
        return {row.id: row.username for row in result}

    async def create_account(self, *, username: str, password_hash: str, coins: int) -> Account:
        model = AccountModel(username=username, password_hash=password_hash, coins=coins)
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise AccountAlreadyExistsError(f"username already exists: {username}") from exc
        await self.session.refresh(model)
        return self._to_domain(model)

    async def debit_if_sufficient(self, account_id: int, amount: int) -> BalanceChange:
        if amount > MAX_COINS:
            # larger than any storable balance
            return await self._shortfall(account_id)
        # check-and-set in one statement; the row lock serialises concurrent debits
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id, AccountModel.coins >= amount)
            .values(coins=AccountModel.coins - amount)
            .execution_options(synchronize_session="fetch")
            .returning(AccountModel.coins)
        )
        result = await self.session.execute(stmt)
        if result.first() is not None:
            return BalanceChange.APPLIED
        return await self._shortfall(account_id)

    async def credit(self, account_id: int, amount: int) -> BalanceChange:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(coins=AccountModel.coins + amount)
            .execution_options(synchronize_session="fetch")
            .returning(AccountModel.coins)
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            return BalanceChange.NOT_FOUND
        return BalanceChange.APPLIED

    async def _shortfall(self, account_id: int) -> BalanceChange:
        if await self._exists(account_id):
            return BalanceChange.INSUFFICIENT_FUNDS
        return BalanceChange.NOT_FOUND

    async def _exists(self, account_id: int) -> bool:
        stmt = select(AccountModel.id).where(AccountModel.id == account_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=model.id,
            username=model.username,
            coins=model.coins,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )
