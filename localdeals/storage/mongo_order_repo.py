"""MongoDB repository for Order entities."""

from datetime import datetime, timezone
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument

from localdeals.logging import get_logger
from localdeals.models.order import Order, OrderInput, OrderStatus
from localdeals.storage.mongo import translate_store_errors
from localdeals.storage.mongo_listing_repo import parse_object_id
from localdeals.storage.repository_base import RepositoryBase

logger = get_logger(__name__)


class MongoOrderRepository(RepositoryBase[Order]):
    """Order repository using MongoDB."""

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialize repository with its collection."""
        self.collection = collection

    async def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve order by ID."""
        object_id = parse_object_id(id)
        if object_id is None:
            return None

        with translate_store_errors("get_order"):
            document = await self.collection.find_one({"_id": object_id})

        if not document:
            return None

        return self._to_domain_model(document)

    async def create(self, entity: OrderInput) -> Order:
        """Create new order in pending state."""
        document = entity.to_document(now=datetime.now(timezone.utc))

        with translate_store_errors("create_order"):
            result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id

        logger.info("order_created", order_id=str(result.inserted_id), deal_id=entity.deal_id)

        return self._to_domain_model(document)

    async def list_all(self) -> list[Order]:
        """All orders, most recent first."""
        return await self._find({})

    async def list_by_customer(self, customer_email: str) -> list[Order]:
        """A customer's orders, most recent first."""
        return await self._find({"customerEmail": customer_email})

    async def update_status(self, id: str, status: OrderStatus) -> Optional[Order]:
        """Set order status; returns None when the order does not exist."""
        object_id = parse_object_id(id)
        if object_id is None:
            return None

        with translate_store_errors("update_order_status"):
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": {"status": status.value, "updatedAt": datetime.now(timezone.utc)}},
                return_document=ReturnDocument.AFTER,
            )

        if not document:
            return None

        logger.info("order_status_updated", order_id=id, status=status.value)

        return self._to_domain_model(document)

    async def _find(self, query: dict[str, Any]) -> list[Order]:
        with translate_store_errors("list_orders"):
            cursor = self.collection.find(query).sort("createdAt", DESCENDING)
            documents = await cursor.to_list(length=None)

        return [self._to_domain_model(document) for document in documents]

    def _to_domain_model(self, document: dict[str, Any]) -> Order:
        """Convert stored document to domain model."""
        return Order.model_validate(document)
