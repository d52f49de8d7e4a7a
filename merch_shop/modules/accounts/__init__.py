"""Account domain services and models."""

from .models import MAX_COINS, Account, BalanceChange
from .service import AccountService, validate_password
from .exceptions import (
    AccountError,
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InvalidCredentialsError,
    WeakPasswordError,
)

__all__ = [
    "MAX_COINS",
    "Account",
    "BalanceChange",
    "AccountService",
    "validate_password",
    "AccountError",
    "AccountAlreadyExistsError",
    "AccountNotFoundError",
    "InvalidCredentialsError",
    "WeakPasswordError",
]
