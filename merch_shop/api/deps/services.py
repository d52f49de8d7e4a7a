"""Service dependency providers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from merch_shop.core.config import Settings
from merch_shop.modules.accounts.service import AccountService
from merch_shop.modules.coins.service import CoinService
from merch_shop.modules.info.service import InfoService

from .database import get_db_session


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_account_service(
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> AccountService:
    return AccountService.with_session(db, settings)


def get_coin_service(db: AsyncSession = Depends(get_db_session)) -> CoinService:
    return CoinService.with_session(db)


def get_info_service(
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> InfoService:
    return InfoService.with_session(db, settings)


__all__ = [
    "get_app_settings",
    "get_account_service",
    "get_coin_service",
    "get_info_service",
]
