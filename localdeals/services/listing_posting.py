"""Posting flow for vendor offers and deals."""

from typing import Generic, TypeVar

from localdeals.logging import get_logger
from localdeals.logging.audit import AuditLogger
from localdeals.models.offer import ListingInput, Offer
from localdeals.storage.repository_base import GeoRepository

logger = get_logger(__name__)

ListingT = TypeVar("ListingT", bound=Offer)


class ListingPostingService(Generic[ListingT]):
    """Persists a validated listing and records it in the audit trail."""

    def __init__(self, repository: GeoRepository[ListingT], resource_type: str):
        self.repository = repository
        self.resource_type = resource_type

    async def post(self, listing: ListingInput, actor: str) -> ListingT:
        """Store a listing; its lat/lng become a ``[lng, lat]`` GeoJSON point."""
        created = await self.repository.create(listing)

        AuditLogger.log_listing_posted(
            actor=actor,
            resource_type=self.resource_type,
            resource_id=created.id,
            title=created.title,
            latitude=listing.lat,
            longitude=listing.lng,
        )

        return created
