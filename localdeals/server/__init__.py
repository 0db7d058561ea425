"""Server package - HTTP application assembly."""

from .app import create_app

__all__ = ["create_app"]
