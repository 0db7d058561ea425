"""Unit tests for geographic models and listing inputs."""

import math
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from localdeals.models.deal import DealInput
from localdeals.models.geo import Coordinates, GeoPoint
from localdeals.models.offer import Offer, OfferInput


def test_coordinates_to_geojson_puts_longitude_first():
    """Test named coordinates become a [lng, lat] point."""
    point = Coordinates(latitude=40.0, longitude=-75.0).to_geojson()

    assert point.type == "Point"
    assert point.coordinates == (-75.0, 40.0)


def test_geojson_to_coordinates_reads_longitude_first():
    """Test a stored point converts back to the same named coordinates."""
    point = GeoPoint(coordinates=[-75.0, 40.0])
    coordinates = point.to_coordinates()

    assert coordinates.latitude == 40.0
    assert coordinates.longitude == -75.0


def test_from_device_keeps_latitude_first():
    """Test device fixes are read latitude first."""
    coordinates = Coordinates.from_device(51.5, -0.12)

    assert coordinates.latitude == 51.5
    assert coordinates.longitude == -0.12


@pytest.mark.parametrize(
    "latitude,longitude",
    [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
)
def test_coordinates_reject_out_of_range_or_non_finite(latitude, longitude):
    """Test latitude/longitude ranges and finiteness."""
    with pytest.raises(ValidationError):
        Coordinates(latitude=latitude, longitude=longitude)


def test_geopoint_rejects_swapped_pair():
    """Test a (lat, lng)-ordered pair with |lng| > 90 in latitude slot fails."""
    with pytest.raises(ValidationError, match="latitude"):
        GeoPoint(coordinates=[40.0, -120.0])


def test_offer_input_document_uses_geojson_order():
    """Test posted lat/lng are stored as a [lng, lat] GeoJSON point."""
    created_at = datetime(2025, 1, 1, tzinfo=timezone.utc)
    offer_input = OfferInput(title="Half-price pizza", description="Tonight only", lat=40.0, lng=-75.0)

    document = offer_input.to_document(created_at)

    assert document["location"] == {"type": "Point", "coordinates": [-75.0, 40.0]}
    assert document["createdAt"] == created_at
    assert document["title"] == "Half-price pizza"


def test_offer_input_zero_coordinates_are_valid():
    """Test the equator/prime meridian is a real position, not missing."""
    offer_input = OfferInput(title="Null Island", lat=0, lng=0)

    assert offer_input.coordinates == Coordinates(latitude=0.0, longitude=0.0)


def test_offer_input_requires_title():
    """Test blank titles are rejected."""
    with pytest.raises(ValidationError):
        OfferInput(title="   ", lat=40.0, lng=-75.0)

    with pytest.raises(ValidationError):
        OfferInput(lat=40.0, lng=-75.0)


def test_offer_input_requires_location():
    """Test lat and lng are both required."""
    with pytest.raises(ValidationError):
        OfferInput(title="Haircut", lat=40.0)


def test_offer_wire_shape():
    """Test the serialized offer matches the document wire shape."""
    offer = Offer.model_validate(
        {
            "_id": "65a1f0c2e4b0a1b2c3d4e5f6",
            "title": "Gym day pass",
            "description": "Free trial",
            "location": {"type": "Point", "coordinates": [-75.0, 40.0]},
            "createdAt": datetime(2025, 1, 1, tzinfo=timezone.utc),
        }
    )

    wire = offer.to_wire()

    assert set(wire) == {"_id", "title", "description", "location", "createdAt"}
    assert wire["location"]["coordinates"] == [-75.0, 40.0]
    assert offer.coordinates.latitude == 40.0


def test_deal_input_accepts_numeric_discount():
    """Test numeric discounts are kept as text."""
    deal_input = DealInput(title="Spa", lat=10.0, lng=20.0, discount=25)

    assert deal_input.discount == "25"
    assert deal_input.to_document(datetime.now(timezone.utc))["discount"] == "25"
