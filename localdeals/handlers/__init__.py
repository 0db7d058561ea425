"""Handlers package - HTTP route handlers grouped by feature."""

from typing import Any

from fastapi import Request


def error_body(message: str) -> dict[str, Any]:
    """JSON body for every error response: ``{"message": ...}``."""
    return {"message": message}


def client_address(request: Request) -> str:
    """Best-effort identity of the caller for throttling and audit."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",", 1)[0].strip()
    if request.client:
        return request.client.host
    return "unknown"
