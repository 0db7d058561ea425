"""HTTP application factory."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from localdeals import __version__
from localdeals.config.settings import Settings, load_settings
from localdeals.errors import LocalDealsError, RateLimited
from localdeals.handlers import error_body
from localdeals.logging import get_logger
from localdeals.security.rate_limit import RateLimiter
from localdeals.server.router_map import register_routers
from localdeals.storage.mongo import (
    DEALS_COLLECTION,
    OFFERS_COLLECTION,
    ORDERS_COLLECTION,
    MongoDatabase,
)
from localdeals.storage.mongo_listing_repo import MongoDealRepository, MongoOfferRepository
from localdeals.storage.mongo_order_repo import MongoOrderRepository

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect the Geo Store and rate limiter for the lifetime of the app."""
    settings: Settings = app.state.settings

    db = MongoDatabase(settings)
    await db.connect()
    await db.ensure_indexes()

    app.state.db = db
    app.state.offer_repo = MongoOfferRepository(db.collection(OFFERS_COLLECTION))
    app.state.deal_repo = MongoDealRepository(db.collection(DEALS_COLLECTION))
    app.state.order_repo = MongoOrderRepository(db.collection(ORDERS_COLLECTION))

    rate_limiter: Optional[RateLimiter] = None
    if settings.rate_limit_enabled:
        rate_limiter = RateLimiter(
            settings.redis_url,
            max_requests=settings.rate_limit_max_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )
        await rate_limiter.connect()
    app.state.rate_limiter = rate_limiter

    logger.info("application_started", environment=settings.environment)

    try:
        yield
    finally:
        logger.info("application_stopping")
        if rate_limiter is not None:
            await rate_limiter.disconnect()
        await db.disconnect()


def _validation_message(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Invalid request: " + "; ".join(problems)


def register_exception_handlers(app: FastAPI) -> None:
    """Map the error taxonomy onto ``{message}`` JSON responses."""

    @app.exception_handler(LocalDealsError)
    async def handle_domain_error(request: Request, exc: LocalDealsError) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "request_failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=exc.message,
        )
        headers = None
        if isinstance(exc, RateLimited) and exc.retry_after is not None:
            headers = {"Retry-After": str(exc.retry_after)}
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.warning("request_invalid", path=request.url.path, error=message)
        return JSONResponse(status_code=400, content=error_body(message))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = "Route not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content=error_body(message))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("request_crashed", path=request.url.path, error_type=type(exc).__name__)
        return JSONResponse(status_code=500, content=error_body("Server error"))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the HTTP application.

    Store and limiter handles live on ``app.state`` and are filled in by the
    lifespan; callers that drive the app without a lifespan set them directly.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="Local Deals API",
        description="Location-tagged offers, deals and orders.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = None
    app.state.rate_limiter = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routers(app)

    return app
