from fastapi import APIRouter

from merch_shop.api.routers import auth, shop


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, tags=["auth"])
    router.include_router(shop.router, tags=["shop"])
    return router


__all__ = [
    "create_api_router",
]
