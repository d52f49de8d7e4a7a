"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .inventory_repository import SqlInventoryRepository
from .ledger_repository import SqlLedgerRepository

__all__ = [
    "SqlAccountRepository",
    "SqlInventoryRepository",
    "SqlLedgerRepository",
]
