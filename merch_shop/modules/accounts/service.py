"""Domain services for account management."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from merch_shop.core.config import Settings
from merch_shop.core.crypto import DEFAULT_ROUNDS, hash_password, verify_password
from merch_shop.modules.common.transaction import atomic, store_errors

from .exceptions import AccountAlreadyExistsError, InvalidCredentialsError, WeakPasswordError
from .models import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
PASSWORD_RULES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"\d"),
    re.compile(r"[@$!%*?&]"),
)
WEAK_PASSWORD_MESSAGE = (
    "password does not meet security requirements: minimum 8 characters, at least one "
    "uppercase letter, one lowercase letter, one digit, and one special character"
)


def validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise WeakPasswordError(WEAK_PASSWORD_MESSAGE)
    for rule in PASSWORD_RULES:
        if rule.search(password) is None:
            raise WeakPasswordError(WEAK_PASSWORD_MESSAGE)


@dataclass(slots=True)
class AccountService:
    """Encapsulates sign-in and sign-up of shop users."""

    session: AsyncSession
    repository: AccountRepository
    starting_balance: int = 1000
    bcrypt_rounds: int = DEFAULT_ROUNDS

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Settings) -> "AccountService":
        # deferred: the SQL repository imports this package's models
        from merch_shop.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(
            session=session,
            repository=SqlAccountRepository(session),
            starting_balance=settings.starting_balance,
            bcrypt_rounds=settings.security.bcrypt_rounds,
        )

    async def register_or_authenticate(self, username: str, password: str) -> Account:
        """Return the account for ``username``, creating it on first sign-in."""
        async with store_errors("account lookup"):
            account = await self.repository.get_by_username(username)
        if account is not None:
            return self._check_password(account, password)

        validate_password(password)
        password_hash = hash_password(password, rounds=self.bcrypt_rounds)
        try:
            async with atomic(self.session, "account registration"):
                account = await self.repository.create_account(
                    username=username,
                    password_hash=password_hash,
                    coins=self.starting_balance,
                )
        except AccountAlreadyExistsError:
            # lost a registration race; the winner's row decides
            async with store_errors("account lookup"):
                account = await self.repository.get_by_username(username)
            if account is None:
                raise
            return self._check_password(account, password)

        logger.info("Registered account %s (id=%s) with %s coins", account.username, account.id, account.coins)
        return account

    @staticmethod
    def _check_password(account: Account, password: str) -> Account:
        if not verify_password(password, account.password_hash):
            logger.info("Rejected sign-in for %s: invalid credentials", account.username)
            raise InvalidCredentialsError("invalid username or password")
        return account
