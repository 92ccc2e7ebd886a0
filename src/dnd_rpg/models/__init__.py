"""Pydantic V2 schemas and rules tables for the D&D RPG character manager.

Submodules:
    enums: Enumeration types (CharacterClass).
    progression: XP threshold table and level lookups.
    snapshot: Immutable character progression snapshot.
    equipment: Starting kits and hit dice by class.
    entities: Monsters.
    character: Character naming rules.

Example:
    >>> from dnd_rpg.models import CharacterSnapshot, LEVEL_TABLE
    >>> snap = CharacterSnapshot.starting(max_health=10)
    >>> LEVEL_TABLE.xp_for_level(snap.level + 1)
    300
"""

from __future__ import annotations

from dnd_rpg.models.character import NAME_PATTERN, validate_character_name
from dnd_rpg.models.entities import Monster
from dnd_rpg.models.enums import CharacterClass
from dnd_rpg.models.equipment import (
    CLASS_KITS,
    ClassKit,
    calculate_modifier,
    get_class_kit,
    starting_max_health,
    validate_dice_notation,
)
from dnd_rpg.models.progression import (
    LEVEL_TABLE,
    XP_THRESHOLDS,
    LevelTable,
    level_for_total_xp,
    xp_for_level,
    xp_span_of_level,
)
from dnd_rpg.models.snapshot import CharacterSnapshot, snapshot_from_legacy


__all__ = [
    # Enumerations
    "CharacterClass",
    # Progression table
    "XP_THRESHOLDS",
    "LevelTable",
    "LEVEL_TABLE",
    "xp_for_level",
    "level_for_total_xp",
    "xp_span_of_level",
    # Snapshot
    "CharacterSnapshot",
    "snapshot_from_legacy",
    # Equipment
    "ClassKit",
    "CLASS_KITS",
    "calculate_modifier",
    "get_class_kit",
    "starting_max_health",
    "validate_dice_notation",
    # Entities
    "Monster",
    # Character names
    "NAME_PATTERN",
    "validate_character_name",
]
