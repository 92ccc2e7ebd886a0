"""Pytest configuration and shared fixtures.

This module provides common fixtures for the progression engine,
storage, and service tests.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dnd_rpg.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_RPG_DEBUG": "true",
        "DND_RPG_LOG_LEVEL": "DEBUG",
        "DND_RPG_PROGRESSION_FIXED_PER_LEVEL_HP": "8",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def fresh_snapshot() -> Any:
    """Level 1 character with 10/10 HP and CON +0."""
    from dnd_rpg.models.snapshot import CharacterSnapshot

    return CharacterSnapshot.starting(max_health=10, constitution_modifier=0)


@pytest.fixture
def veteran_snapshot() -> Any:
    """Level 5 character 1000 XP into the level, wounded."""
    from dnd_rpg.models.progression import xp_for_level
    from dnd_rpg.models.snapshot import CharacterSnapshot

    return CharacterSnapshot(
        level=5,
        total_experience=xp_for_level(5) + 1000,
        health=20,
        max_health=40,
        constitution_modifier=2,
    )


@pytest.fixture
def sample_monsters() -> list[Any]:
    """A small monster catalog spanning several challenge ratings."""
    from dnd_rpg.models.entities import Monster

    return [
        Monster(name="Kobold", challenge_rating=0.125, hit_points=5, armor_class=12,
                damage_dice="1d4+2", experience_points=25),
        Monster(name="Goblin", challenge_rating=0.25, hit_points=7, armor_class=15,
                damage_dice="1d6+2", experience_points=50),
        Monster(name="Orc", challenge_rating=0.5, hit_points=15, armor_class=13,
                damage_dice="1d12+3", experience_points=100),
        Monster(name="Bugbear", challenge_rating=1, hit_points=27, armor_class=16,
                damage_dice="2d8+2", experience_points=200),
        Monster(name="Ogre", challenge_rating=2, hit_points=59, armor_class=11,
                damage_dice="2d8+4", experience_points=450, monster_type="giant"),
        Monster(name="Troll", challenge_rating=5, hit_points=84, armor_class=15,
                damage_dice="2d6+4", experience_points=1800, monster_type="giant"),
    ]


# =============================================================================
# Engine & Storage Fixtures
# =============================================================================


@pytest.fixture
def seeded_rng() -> random.Random:
    """Random source with a fixed seed for reproducible picks."""
    return random.Random(42)


@pytest.fixture
def database(tmp_path: Path) -> Any:
    """Database backed by a temporary file."""
    from dnd_rpg.storage.database import Database

    return Database(tmp_path / "characters.db")


@pytest.fixture
def character_service(database: Any, seeded_rng: random.Random) -> Any:
    """CharacterService over the temporary database."""
    from dnd_rpg.services.characters import CharacterService

    return CharacterService(database, rng=seeded_rng)
