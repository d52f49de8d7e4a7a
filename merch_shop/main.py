import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from merch_shop import __version__
from merch_shop.api import create_api_router
from merch_shop.api.errors import register_exception_handlers
from merch_shop.core.config import Settings, get_settings
from merch_shop.core.logging import configure_logging
from merch_shop.core.security import TokenCodec
from merch_shop.infrastructure.database import Database

logger = logging.getLogger(__name__)

LANDING_PAGE = """
<html>
<head>
  <title>Merch Shop</title>
</head>
<body style="font-family: sans-serif;">
  <h1>Merch Shop</h1>
  <ul>
    <li>Sign in / register: <strong>POST {prefix}/auth</strong></li>
    <li>Coins, inventory and history: <strong>GET {prefix}/info</strong></li>
    <li>Send coins to another user: <strong>POST {prefix}/sendCoin</strong></li>
    <li>Buy merch: <strong>GET {prefix}/buy/{{item}}</strong></li>
  </ul>
  <p>Protected endpoints expect <code>Authorization: Bearer &lt;token&gt;</code>.</p>
</body>
</html>
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    await database.create_all()
    yield
    await database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Virtual coin ledger for the merch shop",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database, debug=settings.debug)
    app.state.token_codec = TokenCodec.from_settings(settings.security)

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def homepage() -> str:
        return LANDING_PAGE.format(prefix=settings.api_prefix)

    return app
