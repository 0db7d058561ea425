"""Geographic value objects.

The Geo Store and the wire format carry GeoJSON points ordered
``[lng, lat]``; devices and query strings speak ``(latitude, longitude)``.
``Coordinates.to_geojson`` and ``GeoPoint.to_coordinates`` are the only
places where one order is turned into the other.
"""

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinates(BaseModel):
    """A position with named latitude/longitude fields."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)

    @classmethod
    def from_device(cls, latitude: float, longitude: float) -> "Coordinates":
        """Build from a device fix, which reports latitude first."""
        return cls(latitude=latitude, longitude=longitude)

    def to_geojson(self) -> "GeoPoint":
        """Convert to the stored ``[lng, lat]`` representation."""
        return GeoPoint(coordinates=(self.longitude, self.latitude))


class GeoPoint(BaseModel):
    """GeoJSON Point as persisted in the Geo Store."""

    type: Literal["Point"] = "Point"
    coordinates: tuple[float, float] = Field(description="[longitude, latitude]")

    @field_validator("coordinates")
    @classmethod
    def validate_lng_lat(cls, v: tuple[float, float]) -> tuple[float, float]:
        """Ensure the pair is finite and in range for (lng, lat) order."""
        lng, lat = v
        if not (math.isfinite(lng) and math.isfinite(lat)):
            raise ValueError("coordinates must be finite numbers")
        if not -180 <= lng <= 180:
            raise ValueError("longitude must be within [-180, 180]")
        if not -90 <= lat <= 90:
            raise ValueError("latitude must be within [-90, 90]")
        return v

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]

    def to_coordinates(self) -> Coordinates:
        """Convert the stored pair back to named coordinates."""
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
