from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from merch_shop.core.config import DatabaseSettings, SecuritySettings, Settings
from merch_shop.infrastructure.database import Database
from merch_shop.modules.accounts import Account, AccountService
from merch_shop.modules.coins import CoinService
from merch_shop.modules.info import InfoService
from tests.helpers import STRONG_PASSWORD


@pytest.fixture(scope="function")
def settings(tmp_path: Path) -> Settings:
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}"),
        security=SecuritySettings(secret_key="test-secret-key", bcrypt_rounds=4),
    )


@pytest.fixture(scope="function")
async def database(settings: Settings) -> AsyncIterator[Database]:
    database = Database(settings.database)
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture(scope="function")
async def session(database: Database) -> AsyncIterator[AsyncSession]:
    async with database.session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def account_service(session: AsyncSession, settings: Settings) -> AccountService:
    return AccountService.with_session(session, settings)


@pytest.fixture(scope="function")
def coin_service(session: AsyncSession) -> CoinService:
    return CoinService.with_session(session)


@pytest.fixture(scope="function")
def info_service(session: AsyncSession, settings: Settings) -> InfoService:
    return InfoService.with_session(session, settings)


@pytest.fixture(scope="function")
def register(account_service: AccountService) -> Callable[..., Awaitable[Account]]:
    async def _register(username: str, password: str = STRONG_PASSWORD) -> Account:
        return await account_service.register_or_authenticate(username, password)

    return _register
