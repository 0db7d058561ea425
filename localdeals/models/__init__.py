"""Models package - Pydantic domain models."""

from .deal import Deal, DealInput
from .geo import Coordinates, GeoPoint
from .offer import ListingInput, Offer, OfferInput
from .order import Order, OrderCategory, OrderInput, OrderStatus, OrderStatusUpdate

__all__ = [
    "Coordinates",
    "Deal",
    "DealInput",
    "GeoPoint",
    "ListingInput",
    "Offer",
    "OfferInput",
    "Order",
    "OrderCategory",
    "OrderInput",
    "OrderStatus",
    "OrderStatusUpdate",
]
