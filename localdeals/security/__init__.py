"""Security package - request throttling."""
