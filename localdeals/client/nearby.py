"""Nearby offers screen state.

Fetches once with the "all" radius, then narrows locally whenever the user
picks another bucket. A failed refresh clears the list and notifies the user
exactly once; nothing is retried. Overlapping refreshes are not coordinated,
so whichever finishes last decides the list.
"""

from typing import Callable, Optional

from localdeals.errors import LocalDealsError
from localdeals.logging import get_logger
from localdeals.models.geo import Coordinates
from localdeals.models.offer import Offer

from .api_client import LocalDealsClient
from .distance_filter import filter_by_radius
from .location import LocationProvider, acquire_location
from .notifications import describe_error
from .radius import RADIUS_ALL_KM, RadiusBucket, RadiusSelection

logger = get_logger(__name__)

Notifier = Callable[[str, str], None]


class NearbyOffersController:
    """Owns offers, user location and the selected radius for one screen."""

    def __init__(
        self,
        client: LocalDealsClient,
        location_provider: LocationProvider,
        notify: Notifier,
        fetch_radius_km: float = RADIUS_ALL_KM,
        selection: Optional[RadiusSelection] = None,
    ):
        self.client = client
        self.location_provider = location_provider
        self.notify = notify
        self.fetch_radius_km = fetch_radius_km
        self.selection = selection or RadiusSelection()
        self.offers: list[Offer] = []
        self.user_location: Optional[Coordinates] = None
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        """True while any refresh is still running."""
        return self._in_flight > 0

    @property
    def visible_offers(self) -> list[Offer]:
        """Fetched offers narrowed to the selected radius."""
        return filter_by_radius(self.offers, self.user_location, self.selection.radius_km)

    async def refresh(self) -> list[Offer]:
        """Locate the user and reload offers; returns the visible list."""
        self._in_flight += 1
        try:
            location = await acquire_location(self.location_provider)
            self.user_location = location
            offers = await self.client.get_nearby_offers(location, self.fetch_radius_km)
        except LocalDealsError as e:
            self.offers = []
            title, message = describe_error(e)
            logger.warning("nearby_refresh_failed", error_type=type(e).__name__, error=e.message)
            self.notify(title, message)
            return []
        finally:
            self._in_flight -= 1

        self.offers = offers
        logger.info("nearby_offers_loaded", count=len(offers), visible=len(self.visible_offers))
        return self.visible_offers

    def select_radius(self, choice: RadiusBucket | float) -> list[Offer]:
        """Change the bucket and re-filter without a network call."""
        self.selection.select(choice)
        return self.visible_offers

    def empty_message(self) -> str:
        """Text shown when no offers are visible."""
        if self.selection.bucket is RadiusBucket.ALL:
            return "No offers found nearby."
        return f"No offers within {self.selection.label}. Try increasing the search radius."
