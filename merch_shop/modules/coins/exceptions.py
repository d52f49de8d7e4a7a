"""Errors raised by coin transfers and purchases."""

from merch_shop.modules.common.exceptions import ShopError


class CoinError(ShopError):
    """Base class for coin movement errors."""


class InvalidAmountError(CoinError):
    """Raised when a transfer amount is not a positive integer."""


class RecipientNotFoundError(CoinError):
    """Raised when the transfer destination does not resolve to an account."""


class SelfTransferError(CoinError):
    """Raised when the source and destination of a transfer are the same account."""


class InsufficientFundsError(CoinError):
    """Raised when the balance does not cover the debit; nothing was changed."""
