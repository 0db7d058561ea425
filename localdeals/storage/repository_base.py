"""Repository base interfaces."""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from localdeals.models.geo import Coordinates

T = TypeVar("T")


class RepositoryBase(ABC, Generic[T]):
    """Base repository interface for stored documents."""

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve entity by ID."""
        pass

    @abstractmethod
    async def create(self, entity: Any) -> T:
        """Create new entity from its input model."""
        pass


class GeoRepository(RepositoryBase[T]):
    """Repository whose documents carry a location and a spatial index."""

    @abstractmethod
    async def find_near(self, center: Coordinates, radius_km: float, limit: int) -> list[T]:
        """Retrieve at most ``limit`` entities within ``radius_km`` of ``center``."""
        pass
