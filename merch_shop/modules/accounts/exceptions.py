"""Account domain specific exceptions."""

from merch_shop.modules.common.exceptions import ShopError


class AccountError(ShopError):
    """Base class for account domain errors."""


class AccountAlreadyExistsError(AccountError):
    """Raised when attempting to create an account with duplicate username."""


class AccountNotFoundError(AccountError):
    """Raised when the requested account cannot be found."""


class InvalidCredentialsError(AccountError):
    """Raised when the password does not match the stored hash."""


class WeakPasswordError(AccountError):
    """Raised when a new account's password fails the password policy."""
