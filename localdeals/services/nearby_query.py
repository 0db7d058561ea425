"""Nearby query service.

Accepts raw ``lat``/``lng``/``radius`` values as they arrive from a query
string, validates them, and asks the Geo Store for every listing inside the
radius. No other filtering is applied.
"""

import math
from typing import Any, Generic, Optional, TypeVar

from localdeals.errors import InvalidArgument
from localdeals.logging import get_logger
from localdeals.models.geo import Coordinates
from localdeals.storage.repository_base import GeoRepository

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_RADIUS_KM = 5.0
DEFAULT_MAX_RESULTS = 500


def parse_coordinate(value: Any, name: str, limit: float) -> float:
    """Parse one axis; missing, non-numeric, non-finite or out-of-range fails."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgument(f"Latitude and longitude required: {name} is missing")

    try:
        parsed = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{name} must be a number, got {value!r}") from None

    if not math.isfinite(parsed):
        raise InvalidArgument(f"{name} must be a finite number, got {value!r}")
    if not -limit <= parsed <= limit:
        raise InvalidArgument(f"{name} must be within [-{limit:g}, {limit:g}], got {parsed:g}")

    return parsed


def parse_radius(value: Any, default_km: float = DEFAULT_RADIUS_KM) -> float:
    """Parse a radius in km; anything absent or unusable means the default."""
    if value is None:
        return default_km

    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default_km

    if not math.isfinite(parsed) or parsed <= 0:
        return default_km

    return parsed


class NearbyQueryService(Generic[T]):
    """Finds stored listings within a radius of a point."""

    def __init__(
        self,
        repository: GeoRepository[T],
        default_radius_km: float = DEFAULT_RADIUS_KM,
        max_results: int = DEFAULT_MAX_RESULTS,
    ):
        """Initialize with the repository to query and response bounds."""
        self.repository = repository
        self.default_radius_km = default_radius_km
        self.max_results = max_results

    def parse_center(self, lat: Any, lng: Any) -> Coordinates:
        """Validate raw query values into a position."""
        latitude = parse_coordinate(lat, "lat", 90)
        longitude = parse_coordinate(lng, "lng", 180)
        return Coordinates.from_device(latitude, longitude)

    async def find_nearby(self, lat: Any, lng: Any, radius_km: Optional[Any] = None) -> list[T]:
        """Return every listing within ``radius_km`` of ``(lat, lng)``.

        Raises:
            InvalidArgument: lat or lng missing or malformed
            StoreUnavailable: the Geo Store query failed
        """
        center = self.parse_center(lat, lng)
        radius = parse_radius(radius_km, self.default_radius_km)

        results = await self.repository.find_near(center, radius, self.max_results)

        logger.info(
            "nearby_query_executed",
            latitude=center.latitude,
            longitude=center.longitude,
            radius_km=radius,
            count=len(results),
        )

        return results
