"""JWT helpers and the bearer-token dependency."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from merch_shop.core.config import SecuritySettings
from merch_shop.modules.common.exceptions import ShopError
from merch_shop.schemas import TokenData

security = HTTPBearer(auto_error=False)


class InvalidTokenError(ShopError):
    """Raised when a bearer token is missing, malformed or expired."""


@dataclass(slots=True, frozen=True)
class TokenCodec:
    """Issues and verifies access tokens with an explicitly supplied secret."""

    secret_key: str
    algorithm: str = "HS256"
    expire_minutes: int = 60 * 24

    @classmethod
    def from_settings(cls, settings: SecuritySettings) -> "TokenCodec":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )

    def create_access_token(
        self,
        account_id: int,
        username: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        expire_delta = expires_delta or timedelta(minutes=self.expire_minutes)
        payload = {
            "sub": str(account_id),
            "username": username,
            "exp": datetime.now(timezone.utc) + expire_delta,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> TokenData:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError("unauthorized") from exc

        subject = payload.get("sub")
        username = payload.get("username")
        if not subject or not username:
            raise InvalidTokenError("unauthorized")
        try:
            account_id = int(subject)
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError("unauthorized") from exc
        return TokenData(account_id=account_id, username=username)


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


async def get_current_account_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    codec: TokenCodec = Depends(get_token_codec),
) -> int:
    if credentials is None:
        raise InvalidTokenError("unauthorized")
    return codec.decode_access_token(credentials.credentials).account_id
