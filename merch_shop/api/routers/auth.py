"""Sign-in endpoint; the first sign-in of a username registers it."""
from fastapi import APIRouter, Depends

from merch_shop.api.deps import get_account_service
from merch_shop.core.security import TokenCodec, get_token_codec
from merch_shop.modules.accounts import AccountService
from merch_shop.schemas import AuthRequest, AuthResponse

router = APIRouter()


@router.post("/auth", response_model=AuthResponse, summary="Sign in or register")
async def auth(
    payload: AuthRequest,
    account_service: AccountService = Depends(get_account_service),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthResponse:
    account = await account_service.register_or_authenticate(payload.username, payload.password)
    return AuthResponse(token=codec.create_access_token(account.id, account.username))
