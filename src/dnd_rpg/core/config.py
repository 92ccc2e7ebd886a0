"""Configuration management for the D&D RPG character manager.

Settings are loaded with pydantic-settings from environment variables
and an optional ``.env`` file. The XP threshold table is rules data and
is not configurable; only tunable policy lives in settings.

Example:
    >>> from dnd_rpg.core.config import get_settings
    >>> get_settings().progression.fixed_per_level_hp
    5

Environment Variables:
    DND_RPG_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_RPG_JSON_LOGS: Emit JSON log lines instead of console output
    DND_RPG_LOG_FILE: Also write log lines to this file
    DND_RPG_DATABASE_PATH: Path to the SQLite character database
    DND_RPG_PROGRESSION_FIXED_PER_LEVEL_HP: Max HP granted per level by set_level
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_rpg.core.exceptions import ConfigurationError


class ProgressionSettings(BaseSettings):
    """Tunable progression policy.

    Attributes:
        fixed_per_level_hp: Flat max HP added per level by ``set_level``.
        set_level_hp_cap: Upper bound for ``fixed_per_level_hp``.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_RPG_PROGRESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fixed_per_level_hp: int = Field(
        default=5,
        ge=0,
        description="Flat max HP added per level gained through set_level",
    )
    set_level_hp_cap: int = Field(
        default=50,
        ge=1,
        description="Largest allowed fixed_per_level_hp",
    )

    @model_validator(mode="after")
    def validate_fixed_hp(self) -> "ProgressionSettings":
        """Ensure the flat per-level HP stays under its cap.

        Raises:
            ConfigurationError: If fixed_per_level_hp exceeds set_level_hp_cap.
        """
        if self.fixed_per_level_hp > self.set_level_hp_cap:
            raise ConfigurationError(
                f"fixed_per_level_hp ({self.fixed_per_level_hp}) must not exceed "
                f"set_level_hp_cap ({self.set_level_hp_cap})",
                config_key="fixed_per_level_hp",
            )
        return self


class StorageSettings(BaseSettings):
    """Configuration for the character database.

    Attributes:
        database_path: Path to the SQLite database file.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_RPG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_path: Path = Field(
        default=Path("data/dnd_rpg.db"),
        description="Path to SQLite database",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON log lines.
        log_file: Optional log file path.
        progression: Progression policy settings.
        storage: Database settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_RPG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="D&D RPG Character Manager",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that also receives log lines",
    )

    progression: ProgressionSettings = Field(default_factory=ProgressionSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    @property
    def is_production(self) -> bool:
        """True if not in debug mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "ProgressionSettings",
    "StorageSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
