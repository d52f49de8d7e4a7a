"""Info service composing balance, inventory and coin history."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from merch_shop.core.config import Settings
from merch_shop.infrastructure.database.repositories import (
    SqlAccountRepository,
    SqlInventoryRepository,
    SqlLedgerRepository,
)
from merch_shop.modules.accounts.exceptions import AccountNotFoundError
from merch_shop.modules.accounts.repository import AccountRepository
from merch_shop.modules.common.transaction import store_errors
from merch_shop.modules.inventory.repository import InventoryRepository
from merch_shop.modules.ledger.repository import LedgerRepository

from .models import AccountSummary, ReceivedCoins, SentCoins

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 100


@dataclass(slots=True)
class InfoService:
    accounts: AccountRepository
    ledger: LedgerRepository
    inventory: InventoryRepository
    history_limit: int = DEFAULT_HISTORY_LIMIT

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Settings | None = None) -> "InfoService":
        return cls(
            accounts=SqlAccountRepository(session),
            ledger=SqlLedgerRepository(session),
            inventory=SqlInventoryRepository(session),
            history_limit=settings.history_limit if settings else DEFAULT_HISTORY_LIMIT,
        )

    async def get_summary(self, account_id: int) -> AccountSummary:
        """Best-effort view of one account.

        The balance, inventory and history are separate reads and may be
        slightly out of step with each other. History entries whose
        counterpart account cannot be resolved are left out.
        """
        async with store_errors("account summary"):
            account = await self.accounts.get_by_id(account_id)
            if account is None:
                raise AccountNotFoundError("user not found")

            inventory = await self.inventory.list_items(account_id)
            received = await self.ledger.list_received(account_id, self.history_limit)
            sent = await self.ledger.list_sent(account_id, self.history_limit)
            usernames = await self.accounts.get_usernames(
                [entry.from_user_id for entry in received] + [entry.to_user_id for entry in sent]
            )

        summary = AccountSummary(coins=account.coins, inventory=list(inventory))
        for entry in received:
            sender = usernames.get(entry.from_user_id)
            if sender is None:
                logger.warning("Skipping ledger entry %s: sender %s not found", entry.id, entry.from_user_id)
                continue
            summary.received.append(ReceivedCoins(from_user=sender, amount=entry.amount))
        for entry in sent:
            recipient = usernames.get(entry.to_user_id)
            if recipient is None:
                logger.warning("Skipping ledger entry %s: recipient %s not found", entry.id, entry.to_user_id)
                continue
            summary.sent.append(SentCoins(to_user=recipient, amount=entry.amount))
        return summary
