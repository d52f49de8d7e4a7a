"""Coin transfer ledger and purchase journal."""

from .models import LedgerEntry, PurchaseRecord
from .repository import LedgerRepository

__all__ = ["LedgerEntry", "PurchaseRecord", "LedgerRepository"]
