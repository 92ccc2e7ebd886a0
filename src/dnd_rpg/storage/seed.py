"""Starter data for a fresh database.

Seeds a small Monster Manual catalog spanning CR 1/4 to 13 and four
sample characters. Each group is only seeded when its table is empty,
so running the seeder twice is harmless.

Example:
    >>> from dnd_rpg.storage import Database, seed_database
    >>> seed_database(Database("data/demo.db"))
    (7, 4)
"""

from __future__ import annotations

from typing import NamedTuple

from dnd_rpg.core.logging import get_logger
from dnd_rpg.models.entities import Monster
from dnd_rpg.models.enums import CharacterClass
from dnd_rpg.models.equipment import calculate_modifier
from dnd_rpg.models.progression import xp_for_level
from dnd_rpg.models.snapshot import CharacterSnapshot
from dnd_rpg.storage.database import Database


logger = get_logger(__name__)


# =============================================================================
# Monster Catalog (Monster Manual)
# =============================================================================

SEED_MONSTERS: tuple[Monster, ...] = (
    # Low challenge rating
    Monster(name="Goblin", challenge_rating=0.25, hit_points=7, armor_class=15,
            damage_dice="1d6+2", experience_points=50, monster_type="humanoid"),
    Monster(name="Wolf", challenge_rating=0.25, hit_points=11, armor_class=13,
            damage_dice="2d4+2", experience_points=50, monster_type="beast"),
    Monster(name="Orc", challenge_rating=0.5, hit_points=15, armor_class=13,
            damage_dice="1d12+3", experience_points=100, monster_type="humanoid"),
    # Medium challenge rating
    Monster(name="Owlbear", challenge_rating=3, hit_points=59, armor_class=13,
            damage_dice="2d8+5", experience_points=700, monster_type="monstrosity"),
    Monster(name="Troll", challenge_rating=5, hit_points=84, armor_class=15,
            damage_dice="2d6+4", experience_points=1800, monster_type="giant"),
    # High challenge rating
    Monster(name="Young Red Dragon", challenge_rating=10, hit_points=178, armor_class=18,
            damage_dice="2d10+6", experience_points=5900, monster_type="dragon"),
    Monster(name="Beholder", challenge_rating=13, hit_points=180, armor_class=18,
            damage_dice="4d6", experience_points=10000, monster_type="aberration"),
)


# =============================================================================
# Sample Characters
# =============================================================================


class SeedCharacter(NamedTuple):
    """A sample character, placed at the start of its level."""

    name: str
    character_class: CharacterClass
    constitution: int
    level: int
    max_health: int


SEED_CHARACTERS: tuple[SeedCharacter, ...] = (
    SeedCharacter("Aragorn", CharacterClass.RANGER, 15, 8, 75),
    SeedCharacter("Gandalf", CharacterClass.WIZARD, 16, 12, 95),
    SeedCharacter("Legolas", CharacterClass.FIGHTER, 14, 6, 55),
    SeedCharacter("Gimli", CharacterClass.FIGHTER, 18, 7, 68),
)


def seed_monsters(database: Database) -> int:
    """Add the starter monster catalog if the catalog is empty.

    Returns:
        Number of monsters added.
    """
    if database.get_monster_count() > 0:
        logger.info("Monsters already seeded, skipping")
        return 0

    for monster in SEED_MONSTERS:
        database.add_monster(monster)

    logger.info("Seeded monsters", count=len(SEED_MONSTERS))
    return len(SEED_MONSTERS)


def seed_characters(database: Database) -> int:
    """Add the sample characters if there are no characters yet.

    Returns:
        Number of characters added.
    """
    if database.get_character_count() > 0:
        logger.info("Characters already seeded, skipping")
        return 0

    for sample in SEED_CHARACTERS:
        snapshot = CharacterSnapshot(
            level=sample.level,
            total_experience=xp_for_level(sample.level),
            health=sample.max_health,
            max_health=sample.max_health,
            constitution_modifier=calculate_modifier(sample.constitution),
        )
        database.create_character(
            sample.name, sample.character_class, sample.constitution, snapshot
        )

    logger.info("Seeded sample characters", count=len(SEED_CHARACTERS))
    return len(SEED_CHARACTERS)


def seed_database(database: Database) -> tuple[int, int]:
    """Seed monsters first, then sample characters.

    Returns:
        Tuple of (monsters added, characters added).
    """
    logger.info("Starting database seeding", path=str(database.db_path))
    return seed_monsters(database), seed_characters(database)


__all__ = [
    "SEED_MONSTERS",
    "SEED_CHARACTERS",
    "SeedCharacter",
    "seed_monsters",
    "seed_characters",
    "seed_database",
]
