"""Order domain models."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class OrderStatus(str, Enum):
    """Order lifecycle status."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderCategory(str, Enum):
    """Deal categories an order can belong to."""

    BEAUTY = "beauty"
    FOOD = "food"
    FITNESS = "fitness"
    SERVICES = "services"
    SHOPPING = "shopping"
    PIZZA = "pizza"
    COFFEE = "coffee"


class OrderInput(BaseModel):
    """Input model for placing an order."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    customer_name: str = Field(min_length=1, max_length=100)
    customer_email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$", max_length=254)
    customer_phone: str = Field(min_length=1, max_length=30)
    deal_id: str = Field(min_length=1)
    deal_title: str = Field(min_length=1, max_length=200)
    deal_description: str = ""
    original_price: float = Field(ge=0, allow_inf_nan=False)
    discount_price: float = Field(ge=0, allow_inf_nan=False)
    category: OrderCategory = OrderCategory.FOOD
    special_instructions: str = Field(default="", max_length=500)
    quantity: int = Field(default=1, gt=0)

    @field_validator("category", mode="before")
    @classmethod
    def lowercase_category(cls, v: Any) -> Any:
        """Category names are case-insensitive on input."""
        return v.lower() if isinstance(v, str) else v

    def to_document(self, now: datetime) -> dict[str, Any]:
        """Build the store document for a freshly placed order."""
        document = self.model_dump(by_alias=True, mode="json")
        document["status"] = OrderStatus.PENDING.value
        document["createdAt"] = now
        document["updatedAt"] = now
        return document


class Order(OrderInput):
    """Order entity as stored and served."""

    id: str = Field(alias="_id")
    status: OrderStatus = OrderStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str:
        """Store ids (ObjectId) are opaque strings outside the store."""
        return str(v)

    @field_validator("status", mode="before")
    @classmethod
    def lowercase_status(cls, v: Any) -> Any:
        """Older documents stored the status capitalized ("Pending")."""
        return v.lower() if isinstance(v, str) else v

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON document shape clients expect."""
        return self.model_dump(by_alias=True, mode="json")


class OrderStatusUpdate(BaseModel):
    """Body of a status change request."""

    status: OrderStatus

    @field_validator("status", mode="before")
    @classmethod
    def lowercase_status(cls, v: Any) -> Any:
        """Status names are case-insensitive on input."""
        return v.lower() if isinstance(v, str) else v
