"""Local deals marketplace: nearby offers, deals and orders."""

__version__ = "1.0.0"
