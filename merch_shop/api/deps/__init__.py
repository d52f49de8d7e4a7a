"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .services import get_account_service, get_app_settings, get_coin_service, get_info_service

__all__ = [
    "get_db_session",
    "get_app_settings",
    "get_account_service",
    "get_coin_service",
    "get_info_service",
]
