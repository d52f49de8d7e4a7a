"""Pydantic schemas used across the project."""
from pydantic import BaseModel, ConfigDict, Field


class AuthRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    token: str


class TokenData(BaseModel):
    account_id: int
    username: str


class SendCoinRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to_user: str = Field(..., alias="toUser", min_length=1)
    amount: int


class StatusResponse(BaseModel):
    status: str = "ok"


class InventoryItemResponse(BaseModel):
    type: str
    quantity: int


class ReceivedCoinsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_user: str = Field(..., alias="fromUser")
    amount: int


class SentCoinsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to_user: str = Field(..., alias="toUser")
    amount: int


class CoinHistoryResponse(BaseModel):
    received: list[ReceivedCoinsResponse] = Field(default_factory=list)
    sent: list[SentCoinsResponse] = Field(default_factory=list)


class InfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    coins: int
    inventory: list[InventoryItemResponse] = Field(default_factory=list)
    coin_history: CoinHistoryResponse = Field(default_factory=CoinHistoryResponse, alias="coinHistory")
