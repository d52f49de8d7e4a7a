from collections.abc import Awaitable, Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from merch_shop.infrastructure.database import Database
from merch_shop.infrastructure.database.models import CoinTransaction
from merch_shop.modules.accounts import Account, AccountNotFoundError
from merch_shop.modules.coins import CoinService
from merch_shop.modules.info import InfoService, ReceivedCoins, SentCoins
from merch_shop.modules.inventory import InventoryItem


async def test_end_to_end_scenario(
    register: Callable[..., Awaitable[Account]],
    coin_service: CoinService,
    info_service: InfoService,
) -> None:
    ziyo = await register("Ziyo")
    ali = await register("Ali")

    await coin_service.purchase(ziyo.id, "book")
    await coin_service.transfer(ziyo.id, "Ali", 100)

    ziyo_summary = await info_service.get_summary(ziyo.id)
    assert ziyo_summary.coins == 850
    assert ziyo_summary.inventory == [InventoryItem(item_name="book", quantity=1)]
    assert ziyo_summary.sent == [SentCoins(to_user="Ali", amount=100)]
    assert ziyo_summary.received == []

    ali_summary = await info_service.get_summary(ali.id)
    assert ali_summary.coins == 1100
    assert ali_summary.received == [ReceivedCoins(from_user="Ziyo", amount=100)]
    assert ali_summary.inventory == []


async def test_inventory_sorted_by_item_name(
    register: Callable[..., Awaitable[Account]], coin_service: CoinService, info_service: InfoService
) -> None:
    ziyo = await register("Ziyo")
    for item in ("umbrella", "cup", "pen", "cup"):
        await coin_service.purchase(ziyo.id, item)

    summary = await info_service.get_summary(ziyo.id)

    assert summary.inventory == [
        InventoryItem(item_name="cup", quantity=2),
        InventoryItem(item_name="pen", quantity=1),
        InventoryItem(item_name="umbrella", quantity=1),
    ]


async def test_history_newest_first_and_limited(
    register: Callable[..., Awaitable[Account]], coin_service: CoinService, session: AsyncSession
) -> None:
    ziyo = await register("Ziyo")
    await register("Ali")
    for amount in (1, 2, 3, 4):
        await coin_service.transfer(ziyo.id, "Ali", amount)

    service = InfoService.with_session(session)
    service.history_limit = 3
    summary = await service.get_summary(ziyo.id)

    assert [entry.amount for entry in summary.sent] == [4, 3, 2]


async def test_unresolvable_counterpart_is_omitted(
    register: Callable[..., Awaitable[Account]], coin_service: CoinService, info_service: InfoService, database: Database
) -> None:
    ziyo = await register("Ziyo")
    await register("Ali")
    await coin_service.transfer(ziyo.id, "Ali", 10)
    # SQLite does not enforce foreign keys by default, so a dangling entry can be planted
    async with database.session_factory() as other:
        other.add(CoinTransaction(from_user_id=ziyo.id, to_user_id=4242, amount=5))
        other.add(CoinTransaction(from_user_id=4343, to_user_id=ziyo.id, amount=7))
        await other.commit()

    summary = await info_service.get_summary(ziyo.id)

    assert summary.sent == [SentCoins(to_user="Ali", amount=10)]
    assert summary.received == []


async def test_missing_account_raises(info_service: InfoService) -> None:
    with pytest.raises(AccountNotFoundError):
        await info_service.get_summary(9999)
