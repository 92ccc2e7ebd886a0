"""Progression engine for the D&D RPG character manager.

Pure, synchronous functions over CharacterSnapshot values. Nothing in
this package performs I/O; callers load a snapshot, call in, and
persist what comes back.

Submodules:
    calculator: XP gain and explicit level assignment.
    health: Heal/damage clamps.
    encounters: Challenge-rating windows and random monster picks.

Example:
    >>> from dnd_rpg.engine import apply_experience
    >>> from dnd_rpg.models import CharacterSnapshot
    >>> snap = CharacterSnapshot.starting(max_health=10)
    >>> apply_experience(snap, 300).level
    2
"""

from __future__ import annotations

from dnd_rpg.engine.calculator import (
    apply_experience,
    can_level_up,
    hp_gain_for_level_up,
    levels_gained,
    set_level,
)
from dnd_rpg.engine.encounters import (
    challenge_range_for_level,
    monsters_for_level,
    pick_random_monster,
)
from dnd_rpg.engine.health import damage, heal, health_percentage


__all__ = [
    # Calculator
    "apply_experience",
    "set_level",
    "hp_gain_for_level_up",
    "can_level_up",
    "levels_gained",
    # Health
    "heal",
    "damage",
    "health_percentage",
    # Encounters
    "challenge_range_for_level",
    "monsters_for_level",
    "pick_random_monster",
]
