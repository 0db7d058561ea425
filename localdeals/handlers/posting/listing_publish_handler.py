"""Listing publish handlers.

``POST /offers`` takes ``{title, description, lat, lng}``; ``POST /deals``
additionally accepts ``discount`` and ``expiry``. Both answer 201 with the
stored document, whose ``location`` is a ``[lng, lat]`` GeoJSON point.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, status

from localdeals.handlers import client_address
from localdeals.handlers.dependencies import (
    get_deal_posting_service,
    get_offer_posting_service,
    write_rate_limit,
)
from localdeals.logging import get_logger
from localdeals.models.deal import DealInput
from localdeals.models.offer import OfferInput
from localdeals.services.listing_posting import ListingPostingService

logger = get_logger(__name__)

router = APIRouter(tags=["Posting"])


@router.post(
    "/offers",
    status_code=status.HTTP_201_CREATED,
    summary="Post a location-tagged offer",
    dependencies=[Depends(write_rate_limit("post_offer"))],
)
async def post_offer(
    offer_input: OfferInput,
    request: Request,
    service: ListingPostingService = Depends(get_offer_posting_service),
) -> dict[str, Any]:
    offer = await service.post(offer_input, actor=client_address(request))
    return offer.to_wire()


@router.post(
    "/deals",
    status_code=status.HTTP_201_CREATED,
    summary="Post a location-tagged deal",
    dependencies=[Depends(write_rate_limit("post_deal"))],
)
async def post_deal(
    deal_input: DealInput,
    request: Request,
    service: ListingPostingService = Depends(get_deal_posting_service),
) -> dict[str, Any]:
    deal = await service.post(deal_input, actor=client_address(request))
    return deal.to_wire()
