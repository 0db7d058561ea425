"""Construction of radius queries against the Geo Store spatial index."""

import math
from typing import Any

from localdeals.errors import InvalidArgument
from localdeals.models.geo import Coordinates

METERS_PER_KM = 1000.0


def radius_to_meters(radius_km: float) -> float:
    """Convert a search radius to the unit $maxDistance expects."""
    if not math.isfinite(radius_km) or radius_km <= 0:
        raise InvalidArgument(f"Radius must be a positive number of kilometers, got {radius_km}")
    return radius_km * METERS_PER_KM


def build_near_query(center: Coordinates, radius_km: float, field: str = "location") -> dict[str, Any]:
    """Build a ``$near`` filter for documents within ``radius_km`` of ``center``.

    Results come back ordered nearest first, which is the only ordering the
    store guarantees for this operator. ``field`` must carry a 2dsphere index.
    """
    return {
        field: {
            "$near": {
                "$geometry": center.to_geojson().model_dump(mode="json"),
                "$maxDistance": radius_to_meters(radius_km),
            }
        }
    }
