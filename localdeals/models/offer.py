"""Offer domain models."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .geo import Coordinates, GeoPoint


class ListingInput(BaseModel):
    """Fields shared by every location-tagged listing a vendor posts."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    lat: float = Field(ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(ge=-180, le=180, allow_inf_nan=False)

    @property
    def coordinates(self) -> Coordinates:
        """Posted position; the request body uses device order."""
        return Coordinates.from_device(self.lat, self.lng)

    def to_document(self, created_at: datetime) -> dict[str, Any]:
        """Build the Geo Store document for this listing."""
        return {
            "title": self.title,
            "description": self.description,
            "location": self.coordinates.to_geojson().model_dump(mode="json"),
            "createdAt": created_at,
        }


class OfferInput(ListingInput):
    """Input model for offer posting."""


class Offer(BaseModel):
    """Offer entity as stored and served."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    location: GeoPoint
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        """Store ids (ObjectId) are opaque strings outside the store."""
        return str(v)

    @property
    def coordinates(self) -> Coordinates:
        """Offer position with named fields."""
        return self.location.to_coordinates()

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON document shape clients expect."""
        return self.model_dump(by_alias=True, mode="json")
