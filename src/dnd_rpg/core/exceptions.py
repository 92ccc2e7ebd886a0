"""Custom exception hierarchy for the D&D RPG character manager.

Every error raised by the package inherits from DndRpgError so callers
(an API layer, a CLI, tests) can catch one type at the boundary while
still inspecting the domain-specific context carried in ``details``.

Example:
    >>> from dnd_rpg.core.exceptions import OutOfRangeError
    >>> raise OutOfRangeError("Level out of range", value=21, minimum=1, maximum=20)
"""

from __future__ import annotations

from typing import Any


class DndRpgError(Exception):
    """Base exception for all D&D RPG errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Progression Domain Exceptions
# =============================================================================


class ProgressionError(DndRpgError):
    """Base exception for progression engine errors.

    These always describe a caller contract violation. They are never
    transient, and retrying the same call fails the same way.
    """


class InvalidArgumentError(ProgressionError):
    """Raised when an argument can never be valid.

    Typical causes are a negative XP delta, a negative total XP, or a
    negative heal/damage amount.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid argument error with argument context.

        Args:
            message: Human-readable error description.
            argument: Name of the offending argument.
            value: The rejected value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if argument:
            combined_details["argument"] = argument
        if value is not None:
            combined_details["value"] = value
        super().__init__(message, details=combined_details)


class OutOfRangeError(ProgressionError):
    """Raised when a level falls outside the supported 1-20 range."""

    def __init__(
        self,
        message: str,
        *,
        value: int | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize out-of-range error with bounds context.

        Args:
            message: Human-readable error description.
            value: The rejected value.
            minimum: Lowest accepted value.
            maximum: Highest accepted value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if value is not None:
            combined_details["value"] = value
        if minimum is not None:
            combined_details["minimum"] = minimum
        if maximum is not None:
            combined_details["maximum"] = maximum
        super().__init__(message, details=combined_details)


# =============================================================================
# Storage Domain Exceptions
# =============================================================================


class StorageError(DndRpgError):
    """Base exception for persistence errors."""


class CharacterNotFoundError(StorageError):
    """Raised when a character id does not exist in the store."""

    def __init__(
        self,
        message: str,
        *,
        character_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not-found error with the missing id.

        Args:
            message: Human-readable error description.
            character_id: Id that was looked up.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if character_id is not None:
            combined_details["character_id"] = character_id
        super().__init__(message, details=combined_details)


class ConcurrencyConflictError(StorageError):
    """Raised when a version-checked write finds a newer row.

    The caller should reload the character and re-apply its change.
    """

    def __init__(
        self,
        message: str,
        *,
        character_id: int | None = None,
        expected_version: int | None = None,
        actual_version: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize conflict error with version context.

        Args:
            message: Human-readable error description.
            character_id: Id of the contested character.
            expected_version: Version the writer read.
            actual_version: Version currently stored.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if character_id is not None:
            combined_details["character_id"] = character_id
        if expected_version is not None:
            combined_details["expected_version"] = expected_version
        if actual_version is not None:
            combined_details["actual_version"] = actual_version
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(DndRpgError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(DndRpgError):
    """Raised when domain data fails validation.

    Used for rule tables and catalog data (e.g., malformed dice notation),
    not for pydantic model construction.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "DndRpgError",
    # Progression exceptions
    "ProgressionError",
    "InvalidArgumentError",
    "OutOfRangeError",
    # Storage exceptions
    "StorageError",
    "CharacterNotFoundError",
    "ConcurrencyConflictError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
]
