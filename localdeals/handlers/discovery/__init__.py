"""Discovery handlers - nearby lookup and listing browse."""

from .nearby_handler import router

__all__ = ["router"]
