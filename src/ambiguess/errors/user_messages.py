"""User-friendly error messages for ambiguess.

Maps error codes onto short explanations and recovery suggestions so the
CLI never has to print a raw traceback for an expected failure.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    "CONFIGURATION_ERROR": "There's a configuration issue.",
    "INVALID_TIMEZONE": "A configured time zone is not known to this system.",
    "CLASSIFICATION_ERROR": "Could not guess anything.",
    "INTERNAL_CONSISTENCY_ERROR": "A date that parsed once could not be parsed again.",
    "AMBIGUESS_ERROR": "An unexpected error occurred.",
    "UNKNOWN_ERROR": "Something went wrong.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    "CONFIGURATION_ERROR": "Check config: ambiguess config validate",
    "INVALID_TIMEZONE": "Use IANA names such as Europe/Berlin or America/New_York.",
    "CLASSIFICATION_ERROR": "Try a number, a date, or an IP address.",
    "INTERNAL_CONSISTENCY_ERROR": "Please report this input; it is a bug.",
    "AMBIGUESS_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "Re-run with --trace for details.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        User-friendly error message
    """
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error."""
    return RECOVERY_SUGGESTIONS.get(_error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"])


def format_error_for_user(error: Any) -> str:
    """Format error for CLI output.

    Args:
        error: The error to format

    Returns:
        Message, technical detail and recovery suggestion on separate lines
    """
    lines = [f"Error [{_error_code(error)}]: {get_user_message(error)}"]
    detail = getattr(error, "message", None)
    if detail:
        lines.append(f"  {detail}")
    lines.append(f"Suggestion: {get_recovery_suggestion(error)}")
    return "\n".join(lines)


__all__ = [
    "ERROR_MESSAGES",
    "RECOVERY_SUGGESTIONS",
    "get_user_message",
    "get_recovery_suggestion",
    "format_error_for_user",
]
