"""Great-circle distance between coordinates."""

import math

from localdeals.models.geo import Coordinates

# Earth's mean radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine_km(origin: Coordinates, destination: Coordinates) -> float:
    """Calculate distance between two positions using the Haversine formula.

    Returns distance in kilometers.
    """
    lat1_rad = math.radians(origin.latitude)
    lat2_rad = math.radians(destination.latitude)

    dlat = math.radians(destination.latitude - origin.latitude)
    dlon = math.radians(destination.longitude - origin.longitude)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def is_within_radius(origin: Coordinates, destination: Coordinates, radius_km: float) -> bool:
    """Check if destination lies within radius_km of origin (inclusive)."""
    return haversine_km(origin, destination) <= radius_km
