"""D&D RPG - character progression engine.

Experience, leveling, and hit point rules for a D&D 5E character
manager, computed once in pure Python and shared by every caller.

ARCHITECTURE:
- models hold the rules tables and the immutable CharacterSnapshot
- engine transforms snapshots (no I/O)
- storage persists characters with version-checked writes
- services wire the engine to storage for an API layer

Example:
    >>> from dnd_rpg import CharacterSnapshot, apply_experience
    >>> hero = CharacterSnapshot.starting(max_health=10)
    >>> hero = apply_experience(hero, 300)
    >>> hero.level, hero.max_health
    (2, 11)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas and rules tables.
    engine: Progression calculator, health clamps, encounters.
    storage: SQLite persistence.
    services: Character operations for the API layer.
"""

from __future__ import annotations

# Core
from dnd_rpg.core.config import Settings, get_settings
from dnd_rpg.core.exceptions import (
    DndRpgError,
    InvalidArgumentError,
    OutOfRangeError,
)
from dnd_rpg.core.logging import configure_logging, get_logger, setup_logging

# Models
from dnd_rpg.models import (
    LEVEL_TABLE,
    CharacterClass,
    CharacterSnapshot,
    LevelTable,
    Monster,
)

# Engine
from dnd_rpg.engine import (
    apply_experience,
    damage,
    heal,
    set_level,
)

# Services
from dnd_rpg.services import CharacterService


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "DndRpgError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "Settings",
    "get_settings",
    "configure_logging",
    "setup_logging",
    "get_logger",
    # Models
    "LevelTable",
    "LEVEL_TABLE",
    "CharacterSnapshot",
    "CharacterClass",
    "Monster",
    # Engine
    "apply_experience",
    "set_level",
    "heal",
    "damage",
    # Services
    "CharacterService",
]
