"""Repository base class exposing the SQLAlchemy session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


class AsyncRepository:
    """Base repository holding the session shared by one unit of work."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def dialect_name(self) -> str:
        return self._session.get_bind().dialect.name
