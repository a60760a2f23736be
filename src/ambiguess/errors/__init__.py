"""Centralized error definitions for ambiguess.

Per-strategy parse misses are never errors: a format that does not match
simply contributes no guesses. The exceptions below cover the remaining
cases, which the CLI maps onto distinct exit codes.

Usage:
    from ambiguess.errors import AmbiguessError, ConfigurationError

    try:
        config = resolve_config(settings)
    except ConfigurationError as e:
        print(e.user_message)
"""

from __future__ import annotations

from ambiguess.errors.user_messages import (
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class AmbiguessError(Exception):
    """Base exception for all ambiguess errors.

    Attributes:
        code: Error code for categorization
        user_message: User-friendly message (optional override)
        details: Additional error details for debugging
    """

    code: str = "AMBIGUESS_ERROR"
    default_message: str = "An unexpected error occurred"
    exit_code: int = 1

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Error payload for `ambiguess guess --json`."""
        return {
            "code": self.code,
            "exit_code": self.exit_code,
            "message": self.message,
            "user_message": self.user_message,
            "recovery_suggestion": self.recovery_suggestion,
            "details": self.details,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AmbiguessError):
    """Settings could not be loaded or validated."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"
    exit_code = 2


class InvalidTimezoneError(ConfigurationError):
    """A configured time zone name is unknown."""

    code = "INVALID_TIMEZONE"
    default_message = "Unknown time zone"

    def __init__(self, zone: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Cannot find time zone: {zone}",
            details={"zone": zone},
        )
        self.zone = zone


# =============================================================================
# Classification Errors
# =============================================================================


class ClassificationError(AmbiguessError):
    """No strategy produced a guess for the token."""

    code = "CLASSIFICATION_ERROR"
    default_message = "Could not classify this token"
    exit_code = 1


class InternalConsistencyError(AmbiguessError):
    """A parse that already succeeded failed when repeated.

    Raised by zone disambiguation when re-anchoring a string to a
    configured zone fails even though the same format accepted it a
    moment earlier. This is a bug, not a parse miss.
    """

    code = "INTERNAL_CONSISTENCY_ERROR"
    default_message = "Previously parsable date is no longer parsable"
    exit_code = 3


__all__ = [
    "AmbiguessError",
    "ConfigurationError",
    "InvalidTimezoneError",
    "ClassificationError",
    "InternalConsistencyError",
    "format_error_for_user",
    "get_recovery_suggestion",
    "get_user_message",
]
