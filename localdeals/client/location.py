"""Device location acquisition."""

from abc import ABC, abstractmethod

from localdeals.errors import PermissionDenied
from localdeals.logging import get_logger
from localdeals.models.geo import Coordinates

logger = get_logger(__name__)


class LocationProvider(ABC):
    """Source of the user's current position."""

    @abstractmethod
    async def request_permission(self) -> bool:
        """Ask for foreground location access; True when granted."""
        pass

    @abstractmethod
    async def current_location(self) -> Coordinates:
        """Current position fix."""
        pass


class StaticLocationProvider(LocationProvider):
    """Provider with a fixed position, for tooling and tests."""

    def __init__(self, latitude: float, longitude: float, granted: bool = True):
        self._location = Coordinates.from_device(latitude, longitude)
        self._granted = granted

    async def request_permission(self) -> bool:
        return self._granted

    async def current_location(self) -> Coordinates:
        return self._location


async def acquire_location(provider: LocationProvider) -> Coordinates:
    """Request permission, then read the position.

    Raises:
        PermissionDenied: the user or OS refused location access
    """
    if not await provider.request_permission():
        logger.warning("location_permission_denied")
        raise PermissionDenied("Location access is required to find nearby offers.")

    location = await provider.current_location()
    logger.debug("location_acquired", latitude=location.latitude, longitude=location.longitude)
    return location
