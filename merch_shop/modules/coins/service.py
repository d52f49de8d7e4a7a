"""Coin movement service: transfers between accounts and merch purchases.

Every mutation runs as a single database transaction. The balance check and
the decrement happen in one conditional ``UPDATE`` so two concurrent debits of
the same account are serialised by the store; the credit, ledger append and
inventory upsert join the same transaction and roll back with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from merch_shop.infrastructure.database.repositories import (
    SqlAccountRepository,
    SqlInventoryRepository,
    SqlLedgerRepository,
)
from merch_shop.modules import catalog
from merch_shop.modules.accounts.exceptions import AccountNotFoundError
from merch_shop.modules.accounts.models import BalanceChange
from merch_shop.modules.accounts.repository import AccountRepository
from merch_shop.modules.common.transaction import atomic, store_errors
from merch_shop.modules.inventory.repository import InventoryRepository
from merch_shop.modules.ledger.repository import LedgerRepository

from .exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    RecipientNotFoundError,
    SelfTransferError,
)
from .models import PurchaseReceipt, TransferReceipt

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CoinService:
    session: AsyncSession
    accounts: AccountRepository
    ledger: LedgerRepository
    inventory: InventoryRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CoinService":
        return cls(
            session=session,
            accounts=SqlAccountRepository(session),
            ledger=SqlLedgerRepository(session),
            inventory=SqlInventoryRepository(session),
        )

    async def transfer(self, source_id: int, destination_username: str, amount: int) -> TransferReceipt:
        """Move ``amount`` coins from ``source_id`` to the account named ``destination_username``."""
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidAmountError("amount must be greater than zero")

        async with store_errors("transfer lookup"):
            source = await self.accounts.get_by_id(source_id)
            destination = await self.accounts.get_by_username(destination_username)
        if source is None:
            raise AccountNotFoundError("sender user not found")
        if destination is None:
            raise RecipientNotFoundError("recipient user not found")
        if source.id == destination.id:
            raise SelfTransferError("cannot send coins to the same user")

        async with atomic(self.session, "coin transfer"):
            debit = await self.accounts.debit_if_sufficient(source.id, amount)
            if debit is BalanceChange.INSUFFICIENT_FUNDS:
                logger.info("Rejected transfer of %s coins from %s: not enough coins", amount, source.username)
                raise InsufficientFundsError("not enough coins")
            if debit is BalanceChange.NOT_FOUND:
                raise AccountNotFoundError("sender user not found")
            if await self.accounts.credit(destination.id, amount) is BalanceChange.NOT_FOUND:
                raise RecipientNotFoundError("recipient user not found")
            entry = await self.ledger.append_transfer(
                from_user_id=source.id,
                to_user_id=destination.id,
                amount=amount,
            )

        logger.info("Transferred %s coins from %s to %s (entry %s)", amount, source.username, destination.username, entry.id)
        return TransferReceipt(
            entry_id=entry.id,
            from_user_id=entry.from_user_id,
            to_user_id=entry.to_user_id,
            amount=entry.amount,
        )

    async def purchase(self, account_id: int, item_name: str) -> PurchaseReceipt:
        """Buy one ``item_name`` from the catalog for ``account_id``."""
        price = catalog.get_price(item_name)

        async with store_errors("purchase lookup"):
            account = await self.accounts.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError("user not found")

        async with atomic(self.session, "merch purchase"):
            debit = await self.accounts.debit_if_sufficient(account.id, price)
            if debit is BalanceChange.INSUFFICIENT_FUNDS:
                logger.info("Rejected purchase of %s by %s: not enough coins", item_name, account.username)
                raise InsufficientFundsError("not enough coins")
            if debit is BalanceChange.NOT_FOUND:
                raise AccountNotFoundError("user not found")
            line = await self.inventory.add_item(account.id, item_name)
            await self.ledger.append_purchase(account_id=account.id, item_name=item_name, price=price)

        logger.info("Account %s bought %s for %s coins (now holds %s)", account.username, item_name, price, line.quantity)
        return PurchaseReceipt(
            account_id=account.id,
            item_name=item_name,
            price=price,
            quantity=line.quantity,
        )
