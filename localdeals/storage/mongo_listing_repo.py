"""MongoDB repositories for location-tagged listings (offers and deals)."""

from datetime import datetime, timezone
from typing import Any, ClassVar, Optional, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

from localdeals.logging import get_logger
from localdeals.models.deal import Deal, DealInput
from localdeals.models.geo import Coordinates
from localdeals.models.offer import ListingInput, Offer, OfferInput
from localdeals.storage.geo_query import build_near_query
from localdeals.storage.mongo import translate_store_errors
from localdeals.storage.repository_base import GeoRepository

logger = get_logger(__name__)

ListingT = TypeVar("ListingT", bound=Offer)


def parse_object_id(id: str) -> Optional[ObjectId]:
    """Parse a store id; malformed ids match nothing."""
    try:
        return ObjectId(id)
    except (InvalidId, TypeError):
        return None


class MongoListingRepository(GeoRepository[ListingT]):
    """Listing repository using a MongoDB collection with a 2dsphere index."""

    model: ClassVar[type[Offer]] = Offer
    resource_type: ClassVar[str] = "listing"

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialize repository with its collection."""
        self.collection = collection

    async def get_by_id(self, id: str) -> Optional[ListingT]:
        """Retrieve listing by ID."""
        object_id = parse_object_id(id)
        if object_id is None:
            return None

        with translate_store_errors(f"get_{self.resource_type}"):
            document = await self.collection.find_one({"_id": object_id})

        if not document:
            return None

        return self._to_domain_model(document)

    async def create(self, entity: ListingInput) -> ListingT:
        """Insert a new listing; the store assigns id and creation time."""
        document = entity.to_document(created_at=datetime.now(timezone.utc))

        with translate_store_errors(f"create_{self.resource_type}"):
            result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id

        logger.info(
            f"{self.resource_type}_created",
            id=str(result.inserted_id),
            coordinates=document["location"]["coordinates"],
        )

        return self._to_domain_model(document)

    async def find_near(self, center: Coordinates, radius_km: float, limit: int) -> list[ListingT]:
        """Radius query answered by the spatial index, nearest first."""
        query = build_near_query(center, radius_km)

        with translate_store_errors(f"find_near_{self.resource_type}s"):
            cursor = self.collection.find(query).limit(limit)
            documents = await cursor.to_list(length=limit)

        return [self._to_domain_model(document) for document in documents]

    async def list_all(self, limit: int) -> list[ListingT]:
        """All listings, newest first."""
        with translate_store_errors(f"list_{self.resource_type}s"):
            cursor = self.collection.find().sort("createdAt", DESCENDING).limit(limit)
            documents = await cursor.to_list(length=limit)

        return [self._to_domain_model(document) for document in documents]

    def _to_domain_model(self, document: dict[str, Any]) -> ListingT:
        """Convert stored document to domain model."""
        return self.model.model_validate(document)  # type: ignore[return-value]


class MongoOfferRepository(MongoListingRepository[Offer]):
    """Offer repository using MongoDB."""

    model = Offer
    resource_type = "offer"

    async def create(self, entity: OfferInput) -> Offer:
        return await super().create(entity)


class MongoDealRepository(MongoListingRepository[Deal]):
    """Deal repository using MongoDB."""

    model = Deal
    resource_type = "deal"

    async def create(self, entity: DealInput) -> Deal:
        return await super().create(entity)
