"""Posting handlers - vendors publishing offers and deals."""

from .listing_publish_handler import router

__all__ = ["router"]
