"""Deal domain models."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from .offer import ListingInput, Offer


def _discount_as_text(v: Any) -> Any:
    # Vendors send either "20%" or a bare number
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


class DealInput(ListingInput):
    """Input model for deal posting."""

    discount: Optional[str] = Field(default=None, max_length=50)
    expiry: Optional[datetime] = None

    @field_validator("discount", mode="before")
    @classmethod
    def normalize_discount(cls, v: Any) -> Any:
        """Accept numeric discounts as text."""
        return _discount_as_text(v)

    def to_document(self, created_at: datetime) -> dict[str, Any]:
        """Build the Geo Store document, including deal terms."""
        document = super().to_document(created_at)
        document["discount"] = self.discount
        document["expiry"] = self.expiry
        return document


class Deal(Offer):
    """Deal entity: an offer with discount terms and an optional expiry."""

    discount: Optional[str] = None
    expiry: Optional[datetime] = None

    @field_validator("discount", mode="before")
    @classmethod
    def normalize_discount(cls, v: Any) -> Any:
        """Accept numeric discounts stored by older clients."""
        return _discount_as_text(v)
