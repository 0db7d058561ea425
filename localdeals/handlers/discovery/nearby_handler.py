"""Nearby offers and deals.

``GET /offers/nearby?lat=&lng=&radius=`` and the same for deals. Query values
are passed through raw so the query service owns validation; radius is in
kilometers and defaults to 5.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from localdeals.config.settings import Settings
from localdeals.handlers.dependencies import (
    get_deal_query_service,
    get_deal_repository,
    get_offer_query_service,
    get_settings,
)
from localdeals.logging import get_logger
from localdeals.services.nearby_query import NearbyQueryService
from localdeals.storage.mongo_listing_repo import MongoDealRepository

logger = get_logger(__name__)

router = APIRouter(tags=["Discovery"])


@router.get("/offers/nearby", summary="Offers within a radius of a point")
async def nearby_offers(
    lat: Optional[str] = Query(None, description="Latitude of the search center"),
    lng: Optional[str] = Query(None, description="Longitude of the search center"),
    radius: Optional[str] = Query(None, description="Search radius in km (default 5)"),
    service: NearbyQueryService = Depends(get_offer_query_service),
) -> list[dict[str, Any]]:
    offers = await service.find_nearby(lat, lng, radius)
    return [offer.to_wire() for offer in offers]


@router.get("/deals/nearby", summary="Deals within a radius of a point")
async def nearby_deals(
    lat: Optional[str] = Query(None, description="Latitude of the search center"),
    lng: Optional[str] = Query(None, description="Longitude of the search center"),
    radius: Optional[str] = Query(None, description="Search radius in km (default 5)"),
    service: NearbyQueryService = Depends(get_deal_query_service),
) -> list[dict[str, Any]]:
    deals = await service.find_nearby(lat, lng, radius)
    return [deal.to_wire() for deal in deals]


@router.get("/deals", summary="All deals, newest first")
async def list_deals(
    repo: MongoDealRepository = Depends(get_deal_repository),
    settings: Settings = Depends(get_settings),
) -> list[dict[str, Any]]:
    deals = await repo.list_all(limit=settings.max_nearby_results)
    logger.info("deals_listed", count=len(deals))
    return [deal.to_wire() for deal in deals]
