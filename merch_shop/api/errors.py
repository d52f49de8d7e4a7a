"""Translate domain exceptions into JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from merch_shop.core.security import InvalidTokenError
from merch_shop.modules.accounts.exceptions import InvalidCredentialsError
from merch_shop.modules.common.exceptions import ShopError, StoreError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[ShopError], int] = {
    InvalidTokenError: status.HTTP_401_UNAUTHORIZED,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errors": message})


def status_for(exc: ShopError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def handle_shop_error(request: Request, exc: ShopError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _error_response(status_code, "internal error")
    return _error_response(status_code, str(exc) or "bad request")


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Malformed request to %s: %s", request.url.path, exc.errors())
    return _error_response(status.HTTP_400_BAD_REQUEST, "bad request")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShopError, handle_shop_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)


__all__ = ["register_exception_handlers", "status_for"]
