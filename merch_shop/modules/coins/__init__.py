"""Coin transfers and merch purchases."""

from .exceptions import (
    CoinError,
    InsufficientFundsError,
    InvalidAmountError,
    RecipientNotFoundError,
    SelfTransferError,
)
from .models import PurchaseReceipt, TransferReceipt
from .service import CoinService

__all__ = [
    "CoinError",
    "CoinService",
    "InsufficientFundsError",
    "InvalidAmountError",
    "PurchaseReceipt",
    "RecipientNotFoundError",
    "SelfTransferError",
    "TransferReceipt",
]
