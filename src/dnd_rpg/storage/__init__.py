"""Storage module for character persistence.

Provides SQLite-based storage for:
- Characters, with version-checked progression writes
- The monster catalog used for encounters
- Starter data for a fresh database
"""

from dnd_rpg.storage.database import (
    MAX_STORED_INTEGER,
    CharacterRecord,
    Database,
    get_database,
)
from dnd_rpg.storage.seed import (
    SEED_CHARACTERS,
    SEED_MONSTERS,
    seed_database,
)

__all__ = [
    "MAX_STORED_INTEGER",
    "CharacterRecord",
    "Database",
    "get_database",
    "SEED_CHARACTERS",
    "SEED_MONSTERS",
    "seed_database",
]
