"""User-facing error notifications."""

from localdeals.errors import (
    InvalidArgument,
    LocalDealsError,
    NetworkError,
    PermissionDenied,
    RateLimited,
    StoreUnavailable,
)


def format_error_message(emoji: str, problem: str, action: str) -> str:
    """
    Format error messages following the pattern: [emoji] [problem] [action].

    Args:
        emoji: Visual indicator (e.g., "❌", "⚠️", "📍")
        problem: Clear description of what went wrong
        action: Suggested next step for the user

    Returns:
        Formatted error message string

    Example:
        >>> format_error_message("📍", "Location access denied.", "Enable it in settings.")
        "📍 Location access denied.\n\nEnable it in settings."
    """
    return f"{emoji} {problem}\n\n{action}"


# Common error templates
ERROR_TEMPLATES = {
    "permission_denied": lambda: format_error_message(
        "📍",
        "Location access is required to find nearby offers.",
        "Allow location access in your settings, then refresh.",
    ),
    "network_error": lambda: format_error_message(
        "📡",
        "Failed to load nearby offers.",
        "Check your connection and pull to refresh.",
    ),
    "store_unavailable": lambda: format_error_message(
        "⚠️",
        "Offers are temporarily unavailable.",
        "Please try again in a moment.",
    ),
    "invalid_input": lambda detail: format_error_message(
        "❌",
        f"Invalid request: {detail}",
        "Check the details and try again.",
    ),
    "rate_limit": lambda seconds: format_error_message(
        "⏱️",
        "Too many requests.",
        f"Please wait {seconds} seconds before trying again.",
    ),
}

# Alert titles, one per failure kind
_TITLES = {
    PermissionDenied: "Permission denied",
    NetworkError: "Connection problem",
    StoreUnavailable: "Error",
    InvalidArgument: "Error",
    RateLimited: "Slow down",
}


def describe_error(error: LocalDealsError) -> tuple[str, str]:
    """Map a failure to the ``(title, message)`` pair shown to the user."""
    title = _TITLES.get(type(error), "Error")

    if isinstance(error, PermissionDenied):
        return title, ERROR_TEMPLATES["permission_denied"]()
    if isinstance(error, NetworkError):
        return title, ERROR_TEMPLATES["network_error"]()
    if isinstance(error, RateLimited):
        return title, ERROR_TEMPLATES["rate_limit"](error.retry_after or 60)
    if isinstance(error, InvalidArgument):
        return title, ERROR_TEMPLATES["invalid_input"](error.message)
    return title, ERROR_TEMPLATES["store_unavailable"]()
