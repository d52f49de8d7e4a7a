"""Coin balance, transfer and merch purchase endpoints."""
from fastapi import APIRouter, Depends, Path

from merch_shop.api.deps import get_coin_service, get_info_service
from merch_shop.core.security import get_current_account_id
from merch_shop.modules.coins import CoinService
from merch_shop.modules.info import AccountSummary, InfoService
from merch_shop.schemas import (
    CoinHistoryResponse,
    InfoResponse,
    InventoryItemResponse,
    ReceivedCoinsResponse,
    SendCoinRequest,
    SentCoinsResponse,
    StatusResponse,
)

router = APIRouter()


def _to_info_response(summary: AccountSummary) -> InfoResponse:
    return InfoResponse(
        coins=summary.coins,
        inventory=[
            InventoryItemResponse(type=item.item_name, quantity=item.quantity)
            for item in summary.inventory
        ],
        coin_history=CoinHistoryResponse(
            received=[
                ReceivedCoinsResponse(from_user=entry.from_user, amount=entry.amount)
                for entry in summary.received
            ],
            sent=[
                SentCoinsResponse(to_user=entry.to_user, amount=entry.amount)
                for entry in summary.sent
            ],
        ),
    )


@router.get("/info", response_model=InfoResponse, summary="Coins, inventory and coin history")
async def get_info(
    account_id: int = Depends(get_current_account_id),
    info_service: InfoService = Depends(get_info_service),
) -> InfoResponse:
    summary = await info_service.get_summary(account_id)
    return _to_info_response(summary)


@router.post("/sendCoin", response_model=StatusResponse, summary="Send coins to another user")
async def send_coin(
    payload: SendCoinRequest,
    account_id: int = Depends(get_current_account_id),
    coin_service: CoinService = Depends(get_coin_service),
) -> StatusResponse:
    await coin_service.transfer(account_id, payload.to_user, payload.amount)
    return StatusResponse()


@router.get("/buy/{item}", response_model=StatusResponse, summary="Buy one merch item")
async def buy_item(
    item: str = Path(..., min_length=1),
    account_id: int = Depends(get_current_account_id),
    coin_service: CoinService = Depends(get_coin_service),
) -> StatusResponse:
    await coin_service.purchase(account_id, item)
    return StatusResponse()
