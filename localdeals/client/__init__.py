"""Client package - the consumer side of the marketplace API."""

from .api_client import LocalDealsClient
from .distance_filter import filter_by_radius
from .location import LocationProvider, StaticLocationProvider, acquire_location
from .nearby import NearbyOffersController
from .radius import RADIUS_ALL_KM, RadiusBucket, RadiusSelection

__all__ = [
    "LocalDealsClient",
    "LocationProvider",
    "NearbyOffersController",
    "RADIUS_ALL_KM",
    "RadiusBucket",
    "RadiusSelection",
    "StaticLocationProvider",
    "acquire_location",
    "filter_by_radius",
]
