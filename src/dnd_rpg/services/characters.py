"""Character operations exposed to the API layer.

Each operation follows the same shape: load the record, hydrate a
CharacterSnapshot, run the pure engine function, and write the result
back with a version check. Engine errors surface before any write is
attempted; a stale version surfaces as ConcurrencyConflictError.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from dnd_rpg.core.exceptions import ValidationError
from dnd_rpg.core.logging import bound_context, get_logger
from dnd_rpg.engine import calculator, encounters, health
from dnd_rpg.models.character import validate_character_name
from dnd_rpg.models.entities import Monster
from dnd_rpg.models.enums import CharacterClass
from dnd_rpg.models.equipment import calculate_modifier, starting_max_health
from dnd_rpg.models.snapshot import CharacterSnapshot
from dnd_rpg.storage.database import CharacterRecord, Database


logger = get_logger(__name__)


class CharacterService:
    """Load, transform, and persist characters.

    Args:
        database: Character store.
        rng: Random source for encounter picks. A fresh unseeded
            ``random.Random`` is used if omitted.

    Example:
        >>> service = CharacterService(Database("data/test.db"), rng=random.Random(7))
        >>> hero = service.create_character("Thorin", CharacterClass.FIGHTER, constitution=15)
        >>> service.award_experience(hero.id, 300).level
        2
    """

    def __init__(self, database: Database, *, rng: random.Random | None = None) -> None:
        self._database = database
        self._rng = rng if rng is not None else random.Random()

    def create_character(
        self,
        name: str,
        character_class: CharacterClass,
        *,
        constitution: int = 10,
    ) -> CharacterRecord:
        """Create a level 1 character at full health.

        Starting HP is the class hit die plus CON modifier (at least 1).

        Raises:
            ValidationError: If the name breaks the naming rules or is
                already used by another character (ignoring case).
        """
        name = validate_character_name(name)
        if not self._database.is_name_available(name):
            raise ValidationError(
                f"Character name '{name}' is already in use",
                field_name="name",
                invalid_value=name,
            )

        con_mod = calculate_modifier(constitution)
        max_health = starting_max_health(character_class, con_mod)
        snapshot = CharacterSnapshot.starting(max_health=max_health, constitution_modifier=con_mod)
        return self._database.create_character(name, character_class, constitution, snapshot)

    def get_character(self, character_id: int) -> CharacterRecord:
        """Get a character, raising CharacterNotFoundError if missing."""
        return self._database.require_character(character_id)

    def get_snapshot(self, character_id: int) -> CharacterSnapshot:
        return self.get_character(character_id).to_snapshot()

    def is_name_available(self, name: str, exclude_character_id: int | None = None) -> bool:
        return self._database.is_name_available(name, exclude_character_id)

    def find_characters_by_level_range(self, min_level: int, max_level: int) -> list[CharacterRecord]:
        """Characters between two levels inclusive, ordered by level, then name."""
        return self._database.get_characters_by_level_range(min_level, max_level)

    def find_characters_by_class(self, character_class: CharacterClass) -> list[CharacterRecord]:
        return self._database.get_characters_by_class(character_class)

    def search_characters(self, term: str) -> list[CharacterRecord]:
        """Case-insensitive substring search on character names."""
        return self._database.search_characters(term)

    def search_monsters(self, term: str) -> list[Monster]:
        """Case-insensitive substring search on monster name or type."""
        return self._database.search_monsters(term)

    def _transform(
        self,
        character_id: int,
        operation: str,
        change: Callable[[CharacterSnapshot], CharacterSnapshot],
    ) -> CharacterRecord:
        with bound_context(character_id=character_id, operation=operation):
            record = self._database.require_character(character_id)
            updated = change(record.to_snapshot())
            return self._database.save_snapshot(character_id, updated, record.version)

    def award_experience(self, character_id: int, experience: int) -> CharacterRecord:
        """Add XP, leveling up as many times as the new total allows."""
        logger.info("Awarding experience", character_id=character_id, experience=experience)
        return self._transform(
            character_id,
            "award_experience",
            lambda snap: calculator.apply_experience(snap, experience),
        )

    def set_level(self, character_id: int, level: int) -> CharacterRecord:
        """Jump a character to a level (testing/debug affordance)."""
        logger.info("Setting level", character_id=character_id, level=level)
        return self._transform(
            character_id,
            "set_level",
            lambda snap: calculator.set_level(snap, level),
        )

    def heal(self, character_id: int, amount: int) -> CharacterRecord:
        """Heal a character, capped at max health."""
        logger.info("Healing character", character_id=character_id, amount=amount)
        return self._transform(character_id, "heal", lambda snap: health.heal(snap, amount))

    def damage(self, character_id: int, amount: int) -> CharacterRecord:
        """Damage a character, floored at 0 HP."""
        logger.info("Damaging character", character_id=character_id, amount=amount)
        return self._transform(character_id, "damage", lambda snap: health.damage(snap, amount))

    def random_encounter(self, character_id: int) -> Monster | None:
        """Pick a level-appropriate monster from the catalog.

        Returns:
            A monster within the character's challenge window, or None if
            the catalog has nothing suitable.
        """
        record = self._database.require_character(character_id)
        suitable = encounters.monsters_for_level(self._database.get_all_monsters(), record.level)
        return encounters.pick_random_monster(suitable, self._rng)


__all__ = ["CharacterService"]
