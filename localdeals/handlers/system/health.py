"""Health check endpoint for deployment monitoring.

``GET /health`` reports the Geo Store (MongoDB) and Redis dependencies.
Overall status is "healthy" when every dependency answers, "degraded" when
some do, and "unhealthy" (HTTP 503) when none do.
"""

import os
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

import redis.asyncio as redis
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from localdeals import __version__
from localdeals.logging import get_logger
from localdeals.storage.mongo import MongoDatabase

logger = get_logger(__name__)

# Track application start time for uptime calculation
_start_time: float = time.time()

APP_VERSION: str = os.environ.get("APP_VERSION", __version__)

router = APIRouter(tags=["System"])


@dataclass
class DependencyHealth:
    """Health status for a single dependency."""

    status: str  # "healthy" or "unhealthy"
    response_time_ms: int | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": self.status}
        if self.response_time_ms is not None:
            result["response_time_ms"] = self.response_time_ms
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class HealthCheckResult:
    """Complete health check response."""

    status: str  # "healthy", "degraded", or "unhealthy"
    version: str
    uptime_seconds: int
    timestamp: str
    dependencies: dict[str, DependencyHealth] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "status": self.status,
            "version": self.version,
            "uptime_seconds": self.uptime_seconds,
            "timestamp": self.timestamp,
            "dependencies": {name: dep.to_dict() for name, dep in self.dependencies.items()},
        }
        if self.warnings:
            result["warnings"] = self.warnings
        if self.errors:
            result["errors"] = self.errors
        return result


async def check_mongo_health(db: MongoDatabase) -> DependencyHealth:
    """Check MongoDB health with a ping round-trip."""
    start = time.perf_counter()
    try:
        await db.ping()
        response_time = int((time.perf_counter() - start) * 1000)
        return DependencyHealth(status="healthy", response_time_ms=response_time)
    except Exception as e:
        logger.error("mongo_health_check_failed", error=str(e))
        return DependencyHealth(status="unhealthy", error=f"Connection failed: {str(e)[:100]}")


async def check_redis_health(redis_url: str) -> DependencyHealth:
    """Check Redis health with a ping round-trip."""
    start = time.perf_counter()
    client = None
    try:
        client = redis.from_url(redis_url, socket_timeout=5.0)
        await client.ping()
        response_time = int((time.perf_counter() - start) * 1000)
        return DependencyHealth(status="healthy", response_time_ms=response_time)
    except Exception as e:
        logger.error("redis_health_check_failed", error=str(e))
        return DependencyHealth(status="unhealthy", error=f"Connection failed: {str(e)[:100]}")
    finally:
        if client:
            await client.aclose()


async def perform_health_check(
    db: Optional[MongoDatabase] = None,
    redis_url: Optional[str] = None,
) -> HealthCheckResult:
    """Check every configured dependency and derive the overall status."""
    result = HealthCheckResult(
        status="healthy",
        version=APP_VERSION,
        uptime_seconds=int(time.time() - _start_time),
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )

    if db is not None:
        result.dependencies["mongodb"] = await check_mongo_health(db)
    else:
        result.dependencies["mongodb"] = DependencyHealth(
            status="unhealthy", error="Database not connected"
        )
        result.warnings.append("Database check skipped - not connected")

    # Redis only backs rate limiting; skip it entirely when that is off
    if redis_url:
        result.dependencies["redis"] = await check_redis_health(redis_url)

    unhealthy_deps = [
        name for name, dep in result.dependencies.items() if dep.status == "unhealthy"
    ]

    if len(unhealthy_deps) == len(result.dependencies):
        result.status = "unhealthy"
        result.errors = [f"Critical: {dep} connection failed" for dep in unhealthy_deps]
    elif unhealthy_deps:
        result.status = "degraded"
        for dep in unhealthy_deps:
            result.warnings.append(f"{dep.capitalize()} unavailable")

    return result


def get_http_status_code(health_status: str) -> int:
    """503 for unhealthy, 200 otherwise."""
    if health_status == "unhealthy":
        return 503
    return 200


@router.get("/health", summary="Dependency health")
async def health(request: Request) -> JSONResponse:
    settings = request.app.state.settings
    redis_url = settings.redis_url if settings.rate_limit_enabled else None

    result = await perform_health_check(request.app.state.db, redis_url)

    return JSONResponse(
        status_code=get_http_status_code(result.status),
        content=result.to_dict(),
        headers={"Cache-Control": "no-cache"},
    )


def reset_start_time() -> None:
    """Reset start time for testing purposes."""
    global _start_time
    _start_time = time.time()
