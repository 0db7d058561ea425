"""FastAPI dependencies wiring handlers to services on ``app.state``."""

from typing import Awaitable, Callable, Optional

from fastapi import Request
from redis.exceptions import RedisError

from localdeals.config.settings import Settings
from localdeals.errors import RateLimited, StoreUnavailable
from localdeals.handlers import client_address
from localdeals.logging import get_logger
from localdeals.logging.audit import AuditLogger
from localdeals.models.deal import Deal
from localdeals.models.offer import Offer
from localdeals.security.rate_limit import RateLimiter
from localdeals.services.listing_posting import ListingPostingService
from localdeals.services.nearby_query import NearbyQueryService
from localdeals.services.order_flow import OrderFlowService
from localdeals.storage.mongo_listing_repo import MongoDealRepository

logger = get_logger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_offer_query_service(request: Request) -> NearbyQueryService[Offer]:
    settings = get_settings(request)
    return NearbyQueryService(
        request.app.state.offer_repo,
        default_radius_km=settings.default_radius_km,
        max_results=settings.max_nearby_results,
    )


def get_deal_query_service(request: Request) -> NearbyQueryService[Deal]:
    settings = get_settings(request)
    return NearbyQueryService(
        request.app.state.deal_repo,
        default_radius_km=settings.default_radius_km,
        max_results=settings.max_nearby_results,
    )


def get_offer_posting_service(request: Request) -> ListingPostingService[Offer]:
    return ListingPostingService(request.app.state.offer_repo, resource_type="offer")


def get_deal_posting_service(request: Request) -> ListingPostingService[Deal]:
    return ListingPostingService(request.app.state.deal_repo, resource_type="deal")


def get_deal_repository(request: Request) -> MongoDealRepository:
    return request.app.state.deal_repo


def get_order_flow_service(request: Request) -> OrderFlowService:
    return OrderFlowService(request.app.state.order_repo)


def write_rate_limit(action: str) -> Callable[[Request], Awaitable[None]]:
    """Dependency factory throttling a write action per client address."""

    async def enforce(request: Request) -> None:
        limiter: Optional[RateLimiter] = request.app.state.rate_limiter
        if limiter is None:
            return

        client_id = client_address(request)
        try:
            allowed, retry_after = await limiter.check_rate_limit(client_id, action)
        except RedisError as e:
            logger.error("rate_limit_check_failed", action=action, error=str(e))
            raise StoreUnavailable("Store unavailable: rate limit check failed") from e

        if not allowed:
            AuditLogger.log_rate_limit_exceeded(
                actor=client_id,
                action=action,
                limit=limiter.max_requests,
                window_seconds=limiter.window_seconds,
            )
            raise RateLimited(
                f"Too many requests. Please wait {retry_after} seconds before trying again.",
                retry_after=retry_after,
            )

    return enforce

