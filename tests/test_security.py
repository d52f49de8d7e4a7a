from datetime import timedelta

import pytest

from merch_shop.core.config import SecuritySettings
from merch_shop.core.security import InvalidTokenError, TokenCodec


@pytest.fixture()
def codec() -> TokenCodec:
    return TokenCodec.from_settings(SecuritySettings(secret_key="unit-test-secret"))


def test_token_round_trip(codec: TokenCodec) -> None:
    token = codec.create_access_token(7, "Ziyo")

    data = codec.decode_access_token(token)

    assert data.account_id == 7
    assert data.username == "Ziyo"


def test_expired_token_rejected(codec: TokenCodec) -> None:
    token = codec.create_access_token(7, "Ziyo", expires_delta=timedelta(seconds=-5))

    with pytest.raises(InvalidTokenError):
        codec.decode_access_token(token)


def test_token_signed_with_other_secret_rejected(codec: TokenCodec) -> None:
    foreign = TokenCodec(secret_key="another-secret-key").create_access_token(7, "Ziyo")

    with pytest.raises(InvalidTokenError):
        codec.decode_access_token(foreign)


def test_garbage_token_rejected(codec: TokenCodec) -> None:
    with pytest.raises(InvalidTokenError):
        codec.decode_access_token("not-a-jwt")
