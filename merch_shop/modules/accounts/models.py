"""Domain models for accounts."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# upper bound of the INTEGER coins column; no balance can exceed it
MAX_COINS = 2**31 - 1


@dataclass(slots=True)
class Account:
    id: int
    username: str
    coins: int
    password_hash: str = field(repr=False)
    created_at: Optional[datetime] = None


class BalanceChange(enum.Enum):
    """Outcome of a conditional balance update."""

    APPLIED = "applied"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    NOT_FOUND = "not_found"
