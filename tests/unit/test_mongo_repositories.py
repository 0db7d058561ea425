"""Unit tests for the MongoDB repositories against a mocked collection."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from localdeals.errors import StoreUnavailable
from localdeals.models.deal import Deal, DealInput
from localdeals.models.geo import Coordinates
from localdeals.models.offer import Offer, OfferInput
from localdeals.models.order import OrderInput, OrderStatus
from localdeals.storage.mongo_listing_repo import (
    MongoDealRepository,
    MongoOfferRepository,
    parse_object_id,
)
from localdeals.storage.mongo_order_repo import MongoOrderRepository
from tests.fakes import order_payload


def stored_offer(**overrides):
    document = {
        "_id": ObjectId(),
        "title": "Pastry box",
        "description": "End of day",
        "location": {"type": "Point", "coordinates": [-75.0, 40.0]},
        "createdAt": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    document.update(overrides)
    return document


def mock_collection(documents=None):
    """Collection whose find() cursor yields ``documents``."""
    cursor = MagicMock()
    cursor.limit.return_value = cursor
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(return_value=documents or [])

    collection = MagicMock()
    collection.find.return_value = cursor
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock(return_value=None)
    return collection, cursor


class TestParseObjectId:
    def test_valid_id(self):
        object_id = ObjectId()
        assert parse_object_id(str(object_id)) == object_id

    @pytest.mark.parametrize("value", ["not-an-id", "", "65a1f0c2"])
    def test_malformed_id(self, value):
        assert parse_object_id(value) is None


class TestOfferRepository:
    @pytest.mark.asyncio
    async def test_find_near_issues_near_query_with_limit(self):
        collection, cursor = mock_collection([stored_offer()])
        repo = MongoOfferRepository(collection)

        offers = await repo.find_near(Coordinates(latitude=40.0, longitude=-75.0), 1, 500)

        query = collection.find.call_args.args[0]
        assert query["location"]["$near"]["$maxDistance"] == 1000.0
        assert query["location"]["$near"]["$geometry"]["coordinates"] == [-75.0, 40.0]
        cursor.limit.assert_called_once_with(500)
        assert len(offers) == 1
        assert isinstance(offers[0], Offer)
        assert offers[0].coordinates == Coordinates(latitude=40.0, longitude=-75.0)

    @pytest.mark.asyncio
    async def test_find_near_preserves_store_order(self):
        near = stored_offer(title="Near")
        far = stored_offer(title="Far", location={"type": "Point", "coordinates": [-75.0, 40.005]})
        collection, _ = mock_collection([near, far])
        repo = MongoOfferRepository(collection)

        offers = await repo.find_near(Coordinates(latitude=40.0, longitude=-75.0), 1, 500)

        assert [offer.title for offer in offers] == ["Near", "Far"]

    @pytest.mark.asyncio
    async def test_find_near_store_failure(self):
        collection, cursor = mock_collection()
        cursor.to_list.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoOfferRepository(collection)

        with pytest.raises(StoreUnavailable, match="find_near_offers"):
            await repo.find_near(Coordinates(latitude=40.0, longitude=-75.0), 5, 500)

    @pytest.mark.asyncio
    async def test_create_stores_geojson_and_returns_id(self):
        collection, _ = mock_collection()
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        repo = MongoOfferRepository(collection)

        offer = await repo.create(OfferInput(title="Coffee", description="2-for-1", lat=40.0, lng=-75.0))

        document = collection.insert_one.await_args.args[0]
        assert document["location"] == {"type": "Point", "coordinates": [-75.0, 40.0]}
        assert isinstance(document["createdAt"], datetime)
        assert offer.id == str(inserted_id)
        assert offer.created_at is not None

    @pytest.mark.asyncio
    async def test_create_store_failure(self):
        collection, _ = mock_collection()
        collection.insert_one.side_effect = ServerSelectionTimeoutError("no servers")
        repo = MongoOfferRepository(collection)

        with pytest.raises(StoreUnavailable):
            await repo.create(OfferInput(title="Coffee", lat=40.0, lng=-75.0))

    @pytest.mark.asyncio
    async def test_get_by_id_malformed_id_skips_store(self):
        collection, _ = mock_collection()
        repo = MongoOfferRepository(collection)

        assert await repo.get_by_id("nope") is None
        collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_by_id_found(self):
        document = stored_offer()
        collection, _ = mock_collection()
        collection.find_one.return_value = document
        repo = MongoOfferRepository(collection)

        offer = await repo.get_by_id(str(document["_id"]))

        assert offer.id == str(document["_id"])


class TestDealRepository:
    @pytest.mark.asyncio
    async def test_create_keeps_deal_terms(self):
        collection, _ = mock_collection()
        collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())
        repo = MongoDealRepository(collection)

        deal = await repo.create(DealInput(title="Pizza", lat=1.0, lng=2.0, discount=20))

        assert isinstance(deal, Deal)
        assert deal.discount == "20"
        assert collection.insert_one.await_args.args[0]["discount"] == "20"

    @pytest.mark.asyncio
    async def test_list_all_newest_first(self):
        collection, cursor = mock_collection([stored_offer(discount="10%")])
        repo = MongoDealRepository(collection)

        deals = await repo.list_all(limit=50)

        cursor.sort.assert_called_once_with("createdAt", -1)
        assert deals[0].discount == "10%"


class TestOrderRepository:
    @pytest.mark.asyncio
    async def test_create_sets_pending_status(self):
        collection, _ = mock_collection()
        collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())
        repo = MongoOrderRepository(collection)

        order = await repo.create(OrderInput.model_validate(order_payload()))

        document = collection.insert_one.await_args.args[0]
        assert document["status"] == "pending"
        assert document["customerEmail"] == "dana@example.com"
        assert order.status is OrderStatus.PENDING

    @pytest.mark.asyncio
    async def test_list_by_customer_filters_on_email(self):
        collection, _ = mock_collection()
        repo = MongoOrderRepository(collection)

        await repo.list_by_customer("dana@example.com")

        collection.find.assert_called_once_with({"customerEmail": "dana@example.com"})

    @pytest.mark.asyncio
    async def test_update_status_missing_order(self):
        collection, _ = mock_collection()
        repo = MongoOrderRepository(collection)

        assert await repo.update_status(str(ObjectId()), OrderStatus.CONFIRMED) is None

    @pytest.mark.asyncio
    async def test_update_status_sets_timestamp(self):
        collection, _ = mock_collection()
        updated = {**order_payload(), "_id": ObjectId(), "status": "confirmed"}
        collection.find_one_and_update.return_value = updated
        repo = MongoOrderRepository(collection)

        order = await repo.update_status(str(updated["_id"]), OrderStatus.CONFIRMED)

        _, update = collection.find_one_and_update.await_args.args
        assert update["$set"]["status"] == "confirmed"
        assert "updatedAt" in update["$set"]
        assert order.status is OrderStatus.CONFIRMED
