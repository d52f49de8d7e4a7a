"""Transaction boundaries for service-level units of work."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import StoreError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def atomic(session: AsyncSession, action: str) -> AsyncIterator[AsyncSession]:
    """Run the block as one commit-or-rollback unit.

    Domain errors raised inside the block roll back and propagate unchanged;
    database errors roll back and surface as :class:`StoreError`.
    """
    try:
        yield session
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("%s failed, transaction rolled back", action)
        raise StoreError(f"{action} failed") from exc
    except BaseException:
        await session.rollback()
        raise


@asynccontextmanager
async def store_errors(action: str) -> AsyncIterator[None]:
    """Translate database errors on read paths into :class:`StoreError`."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s failed", action)
        raise StoreError(f"{action} failed") from exc


__all__ = ["atomic", "store_errors"]
