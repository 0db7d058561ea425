"""Error taxonomy shared by the server and the client."""

from typing import Optional


class LocalDealsError(Exception):
    """Base exception for marketplace errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(LocalDealsError):
    """Raised when coordinates or request fields are missing or malformed."""

    status_code = 400


class NotFound(LocalDealsError):
    """Raised when a requested document does not exist."""

    status_code = 404


class RateLimited(LocalDealsError):
    """Raised when a client exceeds the write rate limit."""

    status_code = 429

    def __init__(self, message: str, retry_after: Optional[int] = None):
        super().__init__(message)
        self.retry_after = retry_after


class StoreUnavailable(LocalDealsError):
    """Raised when the Geo Store query or write fails."""

    status_code = 500


class PermissionDenied(LocalDealsError):
    """Raised when location access is refused by the user or OS."""

    status_code = 403


class NetworkError(LocalDealsError):
    """Raised when the client cannot reach the server."""

    status_code = 503
