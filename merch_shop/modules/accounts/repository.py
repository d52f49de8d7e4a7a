"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Iterable, Protocol

from .models import Account, BalanceChange


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def get_by_id(self, account_id: int) -> Account | None:
        ...

    async def get_by_username(self, username: str) -> Account | None:
        ...

    async def get_usernames(self, account_ids: Iterable[int]) -> dict[int, str]:
        ...

    async def create_account(self, *, username: str, password_hash: str, coins: int) -> Account:
        ...

    async def debit_if_sufficient(self, account_id: int, amount: int) -> BalanceChange:
        """Decrement the balance only if it covers ``amount``, in one statement."""
        ...

    async def credit(self, account_id: int, amount: int) -> BalanceChange:
        ...
