"""Read-side summary of a user's coins, inventory and history."""

from .models import AccountSummary, ReceivedCoins, SentCoins
from .service import InfoService

__all__ = ["AccountSummary", "InfoService", "ReceivedCoins", "SentCoins"]
