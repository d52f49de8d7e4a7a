from collections.abc import Awaitable, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from merch_shop.infrastructure.database import Database
from merch_shop.infrastructure.database.repositories import SqlAccountRepository, SqlInventoryRepository
from merch_shop.modules.accounts import MAX_COINS, Account, AccountNotFoundError, BalanceChange
from merch_shop.modules.coins import (
    CoinService,
    InsufficientFundsError,
    InvalidAmountError,
    RecipientNotFoundError,
    SelfTransferError,
)
from merch_shop.modules.common import StoreError
from tests.helpers import BrokenLedger, count_transfers, fetch_balance


@pytest.fixture()
async def ziyo(register: Callable[..., Awaitable[Account]]) -> Account:
    return await register("Ziyo")


@pytest.fixture()
async def ali(register: Callable[..., Awaitable[Account]]) -> Account:
    return await register("Ali")


async def test_transfer_moves_coins_and_records_entry(
    coin_service: CoinService, database: Database, ziyo: Account, ali: Account
) -> None:
    receipt = await coin_service.transfer(ziyo.id, "Ali", 100)

    assert receipt.from_user_id == ziyo.id
    assert receipt.to_user_id == ali.id
    assert receipt.amount == 100
    assert await fetch_balance(database, ziyo.id) == 900
    assert await fetch_balance(database, ali.id) == 1100
    assert await count_transfers(database) == 1


async def test_transfer_whole_balance(
    coin_service: CoinService, database: Database, ziyo: Account, ali: Account
) -> None:
    await coin_service.transfer(ziyo.id, "Ali", 1000)

    assert await fetch_balance(database, ziyo.id) == 0
    assert await fetch_balance(database, ali.id) == 2000


async def test_insufficient_funds_changes_nothing(
    coin_service: CoinService, database: Database, ziyo: Account, ali: Account
) -> None:
    with pytest.raises(InsufficientFundsError):
        await coin_service.transfer(ziyo.id, "Ali", 1001)

    assert await fetch_balance(database, ziyo.id) == 1000
    assert await fetch_balance(database, ali.id) == 1000
    assert await count_transfers(database) == 0


@pytest.mark.parametrize("amount", [MAX_COINS + 1, 10**20])
async def test_amount_beyond_column_range_is_insufficient(
    coin_service: CoinService, database: Database, ziyo: Account, ali: Account, amount: int
) -> None:
    with pytest.raises(InsufficientFundsError):
        await coin_service.transfer(ziyo.id, "Ali", amount)

    assert await fetch_balance(database, ziyo.id) == 1000
    assert await fetch_balance(database, ali.id) == 1000
    assert await count_transfers(database) == 0


async def test_huge_debit_of_missing_account_is_not_found(session: AsyncSession) -> None:
    repository = SqlAccountRepository(session)

    assert await repository.debit_if_sufficient(999, 10**20) is BalanceChange.NOT_FOUND


@pytest.mark.parametrize("amount", [0, -5])
async def test_non_positive_amount_rejected(
    coin_service: CoinService, database: Database, ziyo: Account, ali: Account, amount: int
) -> None:
    with pytest.raises(InvalidAmountError):
        await coin_service.transfer(ziyo.id, "Ali", amount)

    assert await fetch_balance(database, ziyo.id) == 1000
    assert await count_transfers(database) == 0


@pytest.mark.parametrize("amount", [1, 500, 5000])
async def test_self_transfer_rejected_regardless_of_balance(
    coin_service: CoinService, database: Database, ziyo: Account, amount: int
) -> None:
    with pytest.raises(SelfTransferError):
        await coin_service.transfer(ziyo.id, "Ziyo", amount)

    assert await fetch_balance(database, ziyo.id) == 1000
    assert await count_transfers(database) == 0


async def test_unknown_recipient_rejected(coin_service: CoinService, database: Database, ziyo: Account) -> None:
    with pytest.raises(RecipientNotFoundError):
        await coin_service.transfer(ziyo.id, "Nobody", 10)

    assert await fetch_balance(database, ziyo.id) == 1000


async def test_unknown_sender_rejected(coin_service: CoinService, ali: Account) -> None:
    with pytest.raises(AccountNotFoundError):
        await coin_service.transfer(9999, "Ali", 10)


async def test_store_failure_after_debit_rolls_back(
    session: AsyncSession, database: Database, ziyo: Account, ali: Account
) -> None:
    service = CoinService(
        session=session,
        accounts=SqlAccountRepository(session),
        ledger=BrokenLedger(),
        inventory=SqlInventoryRepository(session),
    )

    with pytest.raises(StoreError):
        await service.transfer(ziyo.id, "Ali", 100)

    assert await fetch_balance(database, ziyo.id) == 1000
    assert await fetch_balance(database, ali.id) == 1000
    assert await count_transfers(database) == 0
