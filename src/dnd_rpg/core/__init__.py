"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DndRpgError: Base exception for all application errors.
        InvalidArgumentError / OutOfRangeError: Progression contract violations.
        CharacterNotFoundError / ConcurrencyConflictError: Storage errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        setup_logging: Configure logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
        bound_context: Bind context for a with-block only.
"""

from __future__ import annotations

from dnd_rpg.core.config import (
    ProgressionSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from dnd_rpg.core.exceptions import (
    CharacterNotFoundError,
    ConcurrencyConflictError,
    ConfigurationError,
    DndRpgError,
    InvalidArgumentError,
    OutOfRangeError,
    ProgressionError,
    StorageError,
    ValidationError,
)
from dnd_rpg.core.logging import (
    bind_context,
    bound_context,
    clear_context,
    configure_logging,
    get_logger,
    setup_logging,
)


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
    # Configuration
    "Settings",
    "ProgressionSettings",
    "StorageSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "bound_context",
]
