"""Client-side narrowing of fetched listings by distance.

Pure functions over already-fetched data, so the list can be re-filtered on
every radius or location change without another request.
"""

from typing import Optional, Sequence, TypeVar

from localdeals.models.geo import Coordinates
from localdeals.models.offer import Offer
from localdeals.services.distance import haversine_km, is_within_radius

from .radius import RADIUS_ALL_KM

ListingT = TypeVar("ListingT", bound=Offer)


def distance_to(listing: Offer, user_location: Coordinates) -> float:
    """Kilometers from the user to a listing's stored point."""
    return haversine_km(user_location, listing.coordinates)


def filter_by_radius(
    offers: Sequence[ListingT],
    user_location: Optional[Coordinates],
    radius_km: float,
) -> list[ListingT]:
    """Keep listings within ``radius_km`` of the user, in input order.

    Without a user location, or with the "all" radius, every listing is kept.
    Identical listings are not collapsed.
    """
    if user_location is None or radius_km == RADIUS_ALL_KM:
        return list(offers)

    return [offer for offer in offers if is_within_radius(user_location, offer.coordinates, radius_km)]
