"""Order handlers - placing and tracking orders."""

from .order_handler import router

__all__ = ["router"]
