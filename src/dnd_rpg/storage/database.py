"""SQLite persistence layer for characters and monsters.

Character rows carry a ``version`` counter. Every progression write is
version-checked: the caller passes the version it loaded, and the
update only lands if the row still has that version. Two requests that
both read version 3 cannot both write; the second one gets a
ConcurrencyConflictError and must reload.

Storage location: ``settings.storage.database_path`` (default data/dnd_rpg.db)
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Generator

from dnd_rpg.core.config import get_settings
from dnd_rpg.core.exceptions import (
    CharacterNotFoundError,
    ConcurrencyConflictError,
    InvalidArgumentError,
)
from dnd_rpg.core.logging import get_logger
from dnd_rpg.models.entities import Monster
from dnd_rpg.models.enums import CharacterClass
from dnd_rpg.models.equipment import calculate_modifier
from dnd_rpg.models.progression import LEVEL_TABLE
from dnd_rpg.models.snapshot import CharacterSnapshot

logger = get_logger(__name__)


_CHARACTER_COLUMNS = (
    "id, name, character_class, constitution, level, total_experience, "
    "health, max_health, version, created_at, updated_at"
)

MAX_STORED_INTEGER = 2**63 - 1
"""Largest value an SQLite INTEGER column can hold."""

_MONSTER_COLUMNS = (
    "name, challenge_rating, hit_points, armor_class, damage_dice, "
    "experience_points, monster_type"
)


def _check_storable(snapshot: CharacterSnapshot) -> None:
    """Reject snapshots whose integers would overflow an SQLite column.

    Experience accumulates without a cap past level 20, so this is the
    only upper bound on ``total_experience``.

    Raises:
        InvalidArgumentError: If a value exceeds MAX_STORED_INTEGER.
    """
    for field in ("total_experience", "health", "max_health"):
        value = getattr(snapshot, field)
        if value > MAX_STORED_INTEGER:
            raise InvalidArgumentError(
                f"{field} exceeds the storage limit of {MAX_STORED_INTEGER}",
                argument=field,
                value=value,
            )


def _monster_from_row(row: tuple[Any, ...]) -> Monster:
    return Monster(
        name=row[0],
        challenge_rating=row[1],
        hit_points=row[2],
        armor_class=row[3],
        damage_dice=row[4],
        experience_points=row[5],
        monster_type=row[6],
    )


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class CharacterRecord:
    """A stored character row.

    Attributes:
        id: Database id.
        name: Character name.
        character_class: Class of the character.
        constitution: Constitution score.
        level: Stored level.
        total_experience: Stored cumulative XP.
        health: Current hit points.
        max_health: Maximum hit points.
        version: Row version for optimistic concurrency.
        created_at: When the character was created.
        updated_at: When the character was last written.
    """

    id: int
    name: str
    character_class: CharacterClass
    constitution: int
    level: int
    total_experience: int
    health: int
    max_health: int
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> CharacterRecord:
        """Create from database row."""
        return cls(
            id=row[0],
            name=row[1],
            character_class=CharacterClass(row[2]),
            constitution=row[3],
            level=row[4],
            total_experience=row[5],
            health=row[6],
            max_health=row[7],
            version=row[8],
            created_at=datetime.fromisoformat(row[9]),
            updated_at=datetime.fromisoformat(row[10]),
        )

    @property
    def constitution_modifier(self) -> int:
        return calculate_modifier(self.constitution)

    def to_snapshot(self) -> CharacterSnapshot:
        """Hydrate the progression snapshot for this row."""
        return CharacterSnapshot(
            level=self.level,
            total_experience=self.total_experience,
            health=self.health,
            max_health=self.max_health,
            constitution_modifier=self.constitution_modifier,
        )


# =============================================================================
# Database Class
# =============================================================================


class Database:
    """SQLite database for characters and the monster catalog."""

    SCHEMA_VERSION = 1

    def __init__(self, db_path: str | Path | None = None) -> None:
        """Initialize database.

        Args:
            db_path: Path to database file. If None, uses the configured path.
        """
        if db_path is None:
            self.db_path = get_settings().storage.database_path
        else:
            self.db_path = Path(db_path)

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

        logger.info("Database initialized", path=str(self.db_path))

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection with proper cleanup."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_schema(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS characters (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    character_class TEXT NOT NULL,
                    constitution INTEGER NOT NULL,
                    level INTEGER NOT NULL,
                    total_experience INTEGER NOT NULL,
                    health INTEGER NOT NULL,
                    max_health INTEGER NOT NULL,
                    version INTEGER NOT NULL DEFAULT 1,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS monsters (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL UNIQUE,
                    challenge_rating REAL NOT NULL,
                    hit_points INTEGER NOT NULL,
                    armor_class INTEGER NOT NULL,
                    damage_dice TEXT NOT NULL,
                    experience_points INTEGER NOT NULL,
                    monster_type TEXT NOT NULL
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_monsters_cr
                ON monsters(challenge_rating)
            """)

            cursor.execute("""
                INSERT OR REPLACE INTO schema_version (version) VALUES (?)
            """, (self.SCHEMA_VERSION,))

    # =========================================================================
    # Character Operations
    # =========================================================================

    def create_character(
        self,
        name: str,
        character_class: CharacterClass,
        constitution: int,
        snapshot: CharacterSnapshot,
    ) -> CharacterRecord:
        """Insert a new character at version 1.

        Args:
            name: Character name.
            character_class: Character class.
            constitution: Constitution score.
            snapshot: Initial progression state.

        Returns:
            Created character record.

        Raises:
            InvalidArgumentError: If a snapshot value exceeds the storage limit.
        """
        _check_storable(snapshot)
        now = datetime.now()

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO characters
                (name, character_class, constitution, level, total_experience,
                 health, max_health, version, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, 1, ?, ?)
            """, (name, character_class.value, constitution, snapshot.level,
                  snapshot.total_experience, snapshot.health, snapshot.max_health,
                  now.isoformat(), now.isoformat()))
            character_id = cursor.lastrowid

        logger.info("Created character", character_id=character_id, name=name)

        return CharacterRecord(
            id=character_id,
            name=name,
            character_class=character_class,
            constitution=constitution,
            level=snapshot.level,
            total_experience=snapshot.total_experience,
            health=snapshot.health,
            max_health=snapshot.max_health,
            version=1,
            created_at=now,
            updated_at=now,
        )

    def get_character(self, character_id: int) -> CharacterRecord | None:
        """Get a character by id, or None if missing."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_CHARACTER_COLUMNS} FROM characters WHERE id = ?",
                (character_id,),
            )
            row = cursor.fetchone()

            if row:
                return CharacterRecord.from_row(tuple(row))
            return None

    def require_character(self, character_id: int) -> CharacterRecord:
        """Get a character by id.

        Raises:
            CharacterNotFoundError: If no such character exists.
        """
        record = self.get_character(character_id)
        if record is None:
            raise CharacterNotFoundError(
                f"Character with ID {character_id} not found",
                character_id=character_id,
            )
        return record

    def get_all_characters(self) -> list[CharacterRecord]:
        """Get all characters, ordered by name."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(f"SELECT {_CHARACTER_COLUMNS} FROM characters ORDER BY name")

            return [CharacterRecord.from_row(tuple(row)) for row in cursor.fetchall()]

    def get_characters_by_level_range(
        self,
        min_level: int,
        max_level: int,
    ) -> list[CharacterRecord]:
        """Get characters with ``min_level <= level <= max_level``.

        Results are ordered by level, then name.

        Raises:
            OutOfRangeError: If either bound is outside 1-20.
            InvalidArgumentError: If min_level is greater than max_level.
        """
        LEVEL_TABLE.xp_for_level(min_level)
        LEVEL_TABLE.xp_for_level(max_level)
        if min_level > max_level:
            raise InvalidArgumentError(
                f"min_level ({min_level}) cannot exceed max_level ({max_level})",
                argument="min_level",
                value=min_level,
            )

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_CHARACTER_COLUMNS} FROM characters "
                "WHERE level BETWEEN ? AND ? ORDER BY level, name",
                (min_level, max_level),
            )

            return [CharacterRecord.from_row(tuple(row)) for row in cursor.fetchall()]

    def get_characters_by_class(self, character_class: CharacterClass) -> list[CharacterRecord]:
        """Get characters of one class, ordered by level, then name."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_CHARACTER_COLUMNS} FROM characters "
                "WHERE character_class = ? ORDER BY level, name",
                (character_class.value,),
            )

            return [CharacterRecord.from_row(tuple(row)) for row in cursor.fetchall()]

    def search_characters(self, term: str) -> list[CharacterRecord]:
        """Get characters whose name contains ``term`` (case-insensitive)."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_CHARACTER_COLUMNS} FROM characters "
                "WHERE instr(lower(name), lower(?)) > 0 ORDER BY name",
                (term,),
            )

            return [CharacterRecord.from_row(tuple(row)) for row in cursor.fetchall()]

    def is_name_available(self, name: str, exclude_character_id: int | None = None) -> bool:
        """Check that no other character already uses ``name``.

        The comparison ignores case and surrounding whitespace.

        Args:
            name: Proposed name.
            exclude_character_id: Character to ignore, for renames.
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT id FROM characters WHERE lower(name) = lower(?) AND id IS NOT ?",
                (name.strip(), exclude_character_id),
            )
            return cursor.fetchone() is None

    def save_snapshot(
        self,
        character_id: int,
        snapshot: CharacterSnapshot,
        expected_version: int,
    ) -> CharacterRecord:
        """Write progression state if the row is still at ``expected_version``.

        Args:
            character_id: Character to update.
            snapshot: New progression state.
            expected_version: Version the caller loaded.

        Returns:
            The updated record, with version incremented.

        Raises:
            CharacterNotFoundError: If the character does not exist.
            ConcurrencyConflictError: If another write got there first.
            InvalidArgumentError: If a snapshot value exceeds the storage limit.
        """
        _check_storable(snapshot)
        now = datetime.now()

        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                UPDATE characters
                SET level = ?, total_experience = ?, health = ?, max_health = ?,
                    version = version + 1, updated_at = ?
                WHERE id = ? AND version = ?
            """, (snapshot.level, snapshot.total_experience, snapshot.health,
                  snapshot.max_health, now.isoformat(), character_id, expected_version))

            if cursor.rowcount == 0:
                cursor.execute("SELECT version FROM characters WHERE id = ?", (character_id,))
                row = cursor.fetchone()
                if row is None:
                    raise CharacterNotFoundError(
                        f"Character with ID {character_id} not found",
                        character_id=character_id,
                    )
                logger.warning(
                    "Stale character write rejected",
                    character_id=character_id,
                    expected_version=expected_version,
                    actual_version=row[0],
                )
                raise ConcurrencyConflictError(
                    "The character was modified by another request; reload and retry",
                    character_id=character_id,
                    expected_version=expected_version,
                    actual_version=row[0],
                )

        logger.debug(
            "Saved character snapshot",
            character_id=character_id,
            version=expected_version + 1,
        )
        return self.require_character(character_id)

    def delete_character(self, character_id: int) -> bool:
        """Delete a character.

        Returns:
            True if deleted, False if not found.
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM characters WHERE id = ?", (character_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("Deleted character", character_id=character_id)

        return deleted

    def get_character_count(self) -> int:
        """Get total number of characters."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM characters")
            return cursor.fetchone()[0]

    # =========================================================================
    # Monster Operations
    # =========================================================================

    def add_monster(self, monster: Monster) -> None:
        """Add or replace a monster in the catalog (keyed by name)."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT OR REPLACE INTO monsters
                (name, challenge_rating, hit_points, armor_class, damage_dice,
                 experience_points, monster_type)
                VALUES (?, ?, ?, ?, ?, ?, ?)
            """, (monster.name, monster.challenge_rating, monster.hit_points,
                  monster.armor_class, monster.damage_dice, monster.experience_points,
                  monster.monster_type))

        logger.debug("Stored monster", monster=monster.name)

    def get_all_monsters(self) -> list[Monster]:
        """Get the monster catalog, ordered by challenge rating then name."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_MONSTER_COLUMNS} FROM monsters ORDER BY challenge_rating, name"
            )

            return [_monster_from_row(tuple(row)) for row in cursor.fetchall()]

    def get_monsters_by_type(self, monster_type: str) -> list[Monster]:
        """Get monsters of one creature type (case-insensitive), easiest first."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_MONSTER_COLUMNS} FROM monsters "
                "WHERE lower(monster_type) = lower(?) ORDER BY challenge_rating, name",
                (monster_type.strip(),),
            )

            return [_monster_from_row(tuple(row)) for row in cursor.fetchall()]

    def get_monsters_by_challenge_rating(self, challenge_rating: float) -> list[Monster]:
        """Get monsters with exactly this challenge rating, ordered by name."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_MONSTER_COLUMNS} FROM monsters "
                "WHERE challenge_rating = ? ORDER BY name",
                (challenge_rating,),
            )

            return [_monster_from_row(tuple(row)) for row in cursor.fetchall()]

    def search_monsters(self, term: str) -> list[Monster]:
        """Get monsters whose name or type contains ``term`` (case-insensitive)."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_MONSTER_COLUMNS} FROM monsters "
                "WHERE instr(lower(name), lower(?)) > 0 "
                "OR instr(lower(monster_type), lower(?)) > 0 "
                "ORDER BY name",
                (term, term),
            )

            return [_monster_from_row(tuple(row)) for row in cursor.fetchall()]

    def get_monster_count(self) -> int:
        """Get the number of monsters in the catalog."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM monsters")
            return cursor.fetchone()[0]


# =============================================================================
# Singleton Instance
# =============================================================================


_database_instance: Database | None = None


def get_database() -> Database:
    """Get the global database instance.

    Returns:
        Database singleton instance.
    """
    global _database_instance

    if _database_instance is None:
        _database_instance = Database()

    return _database_instance


__all__ = [
    "MAX_STORED_INTEGER",
    "CharacterRecord",
    "Database",
    "get_database",
]
