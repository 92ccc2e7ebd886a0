"""Application-wide constants for the D&D RPG character manager.

Rules constants that are fixed by the game (not tunable through settings).
"""

from __future__ import annotations

# =============================================================================
# Level Bounds
# =============================================================================

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level in D&D 5E."""

MAX_LEVEL_SPAN = 0
"""XP span reported for the final level, which has no next threshold."""

# =============================================================================
# Character Names
# =============================================================================

MIN_NAME_LENGTH = 2
"""Shortest allowed character name."""

MAX_NAME_LENGTH = 100
"""Longest allowed character name."""

# =============================================================================
# Hit Points
# =============================================================================

MIN_MAX_HEALTH = 1
"""Smallest allowed maximum health."""

MIN_LEVEL_UP_HP_GAIN = 1
"""Floor for the hit points gained per level through experience."""

# =============================================================================
# Encounters
# =============================================================================

MIN_ENCOUNTER_CR = 0.125
"""Lowest challenge rating offered to any character level."""

MIN_ENCOUNTER_MAX_CR = 0.25
"""Floor for the upper challenge rating bound."""


__all__ = [
    # Levels
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "MAX_LEVEL_SPAN",
    # Names
    "MIN_NAME_LENGTH",
    "MAX_NAME_LENGTH",
    # Hit points
    "MIN_MAX_HEALTH",
    "MIN_LEVEL_UP_HP_GAIN",
    # Encounters
    "MIN_ENCOUNTER_CR",
    "MIN_ENCOUNTER_MAX_CR",
]
