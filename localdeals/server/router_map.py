"""Router registration for the HTTP application."""

from fastapi import FastAPI

from localdeals.handlers.discovery import router as discovery_router
from localdeals.handlers.orders import router as orders_router
from localdeals.handlers.posting import router as posting_router
from localdeals.handlers.system.health import router as health_router
from localdeals.logging import get_logger

logger = get_logger(__name__)

# Mobile clients built against the first backend call /api/...
LEGACY_PREFIX = "/api"


def register_routers(app: FastAPI) -> None:
    """Mount every feature router at the root and under the legacy prefix."""
    feature_routers = [discovery_router, posting_router, orders_router]

    for router in feature_routers:
        app.include_router(router)
        app.include_router(router, prefix=LEGACY_PREFIX, include_in_schema=False)

    app.include_router(health_router)

    @app.get("/", tags=["System"], summary="Liveness")
    async def read_root() -> dict[str, str]:
        return {"message": "Server is running"}

    logger.info("routers_registered", count=len(feature_routers) + 1)
