"""Integration tests for SQLite persistence."""

from __future__ import annotations

from pathlib import Path

import pytest

from dnd_rpg.core.exceptions import (
    CharacterNotFoundError,
    InvalidArgumentError,
    OutOfRangeError,
)
from dnd_rpg.models.entities import Monster
from dnd_rpg.models.enums import CharacterClass
from dnd_rpg.models.progression import xp_for_level
from dnd_rpg.models.snapshot import CharacterSnapshot
from dnd_rpg.storage import MAX_STORED_INTEGER, SEED_CHARACTERS, SEED_MONSTERS, seed_database
from dnd_rpg.storage.database import Database


class TestCharacterStorage:
    """Test character rows."""

    def test_create_and_load(self, database: Database) -> None:
        snapshot = CharacterSnapshot.starting(max_health=8, constitution_modifier=1)

        created = database.create_character("Mira", CharacterClass.ROGUE, 12, snapshot)
        loaded = database.get_character(created.id)

        assert loaded is not None
        assert loaded.name == "Mira"
        assert loaded.character_class is CharacterClass.ROGUE
        assert loaded.constitution_modifier == 1
        assert loaded.to_snapshot() == snapshot
        assert loaded.created_at == created.created_at

    def test_missing_character(self, database: Database) -> None:
        assert database.get_character(42) is None
        with pytest.raises(CharacterNotFoundError):
            database.require_character(42)

    def test_save_snapshot_bumps_version(self, database: Database) -> None:
        snapshot = CharacterSnapshot.starting(max_health=10)
        record = database.create_character("Mira", CharacterClass.ROGUE, 10, snapshot)

        saved = database.save_snapshot(record.id, snapshot.evolve(health=3), record.version)

        assert saved.version == 2
        assert saved.health == 3

    def test_save_snapshot_missing_character(self, database: Database) -> None:
        with pytest.raises(CharacterNotFoundError):
            database.save_snapshot(7, CharacterSnapshot.starting(max_health=10), 1)

    def test_list_count_and_delete(self, database: Database) -> None:
        snapshot = CharacterSnapshot.starting(max_health=10)
        zed = database.create_character("Zed", CharacterClass.MONK, 10, snapshot)
        database.create_character("Ana", CharacterClass.BARD, 10, snapshot)

        assert [c.name for c in database.get_all_characters()] == ["Ana", "Zed"]
        assert database.get_character_count() == 2

        assert database.delete_character(zed.id) is True
        assert database.delete_character(zed.id) is False
        assert database.get_character_count() == 1

    def test_data_survives_new_instance(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "store.db"
        record = Database(path).create_character(
            "Mira", CharacterClass.ROGUE, 10, CharacterSnapshot.starting(max_health=10)
        )

        assert Database(path).require_character(record.id).name == "Mira"


class TestCharacterQueries:
    """Test filtered character lookups."""

    @pytest.fixture
    def party(self, database: Database) -> Database:
        for name, cls, level in [
            ("Zed", CharacterClass.FIGHTER, 3),
            ("Ana", CharacterClass.BARD, 3),
            ("Mira", CharacterClass.ROGUE, 1),
            ("Bruna", CharacterClass.FIGHTER, 7),
            ("Miriam", CharacterClass.CLERIC, 12),
        ]:
            snapshot = CharacterSnapshot(
                level=level,
                total_experience=xp_for_level(level),
                health=10,
                max_health=10,
            )
            database.create_character(name, cls, 10, snapshot)
        return database

    def test_level_range_ordered_by_level_then_name(self, party: Database) -> None:
        found = party.get_characters_by_level_range(1, 7)

        assert [c.name for c in found] == ["Mira", "Ana", "Zed", "Bruna"]

    def test_level_range_single_level(self, party: Database) -> None:
        assert [c.name for c in party.get_characters_by_level_range(12, 12)] == ["Miriam"]
        assert party.get_characters_by_level_range(20, 20) == []

    def test_level_range_inverted(self, party: Database) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            party.get_characters_by_level_range(5, 2)

        assert exc_info.value.details["argument"] == "min_level"

    @pytest.mark.parametrize("bounds", [(0, 5), (1, 21)])
    def test_level_range_out_of_bounds(self, party: Database, bounds: tuple[int, int]) -> None:
        with pytest.raises(OutOfRangeError):
            party.get_characters_by_level_range(*bounds)

    def test_by_class(self, party: Database) -> None:
        fighters = party.get_characters_by_class(CharacterClass.FIGHTER)

        assert [c.name for c in fighters] == ["Zed", "Bruna"]
        assert party.get_characters_by_class(CharacterClass.WIZARD) == []

    def test_search_by_name(self, party: Database) -> None:
        """Substring match ignoring case, ordered by name."""
        assert [c.name for c in party.search_characters("MIR")] == ["Mira", "Miriam"]
        assert party.search_characters("gandalf") == []

    def test_name_availability(self, party: Database) -> None:
        mira = party.search_characters("mira")[0]

        assert party.is_name_available("  MIRA ") is False
        assert party.is_name_available("Mira", exclude_character_id=mira.id) is True
        assert party.is_name_available("Mir") is True


class TestStorageLimit:
    """Test values too large for an SQLite INTEGER column."""

    def test_create_rejects_oversized_total(self, database: Database) -> None:
        snapshot = CharacterSnapshot(
            level=20, total_experience=MAX_STORED_INTEGER + 1, health=10, max_health=10
        )

        with pytest.raises(InvalidArgumentError) as exc_info:
            database.create_character("Mira", CharacterClass.ROGUE, 10, snapshot)

        assert exc_info.value.details["argument"] == "total_experience"
        assert database.get_character_count() == 0

    def test_save_rejects_oversized_health(self, database: Database) -> None:
        snapshot = CharacterSnapshot.starting(max_health=10)
        record = database.create_character("Mira", CharacterClass.ROGUE, 10, snapshot)
        huge = snapshot.evolve(health=MAX_STORED_INTEGER + 1, max_health=MAX_STORED_INTEGER + 1)

        with pytest.raises(InvalidArgumentError) as exc_info:
            database.save_snapshot(record.id, huge, record.version)

        assert exc_info.value.details["argument"] == "health"
        assert database.require_character(record.id).version == 1


class TestMonsterStorage:
    """Test the monster catalog."""

    def test_catalog_ordered_by_rating(
        self, database: Database, sample_monsters: list[Monster]
    ) -> None:
        for monster in reversed(sample_monsters):
            database.add_monster(monster)

        assert database.get_all_monsters() == sample_monsters

    def test_add_replaces_by_name(self, database: Database, sample_monsters: list[Monster]) -> None:
        goblin = sample_monsters[1]
        database.add_monster(goblin)
        database.add_monster(goblin.model_copy(update={"hit_points": 12}))

        monsters = database.get_all_monsters()

        assert len(monsters) == 1
        assert monsters[0].hit_points == 12

    def test_by_type_ordered_by_rating_then_name(
        self, database: Database, sample_monsters: list[Monster]
    ) -> None:
        for monster in sample_monsters:
            database.add_monster(monster)

        giants = database.get_monsters_by_type("GIANT")

        assert [m.name for m in giants] == ["Ogre", "Troll"]
        assert database.get_monsters_by_type("dragon") == []

    def test_by_challenge_rating(self, database: Database, sample_monsters: list[Monster]) -> None:
        for monster in sample_monsters:
            database.add_monster(monster)

        assert [m.name for m in database.get_monsters_by_challenge_rating(0.25)] == ["Goblin"]
        assert database.get_monsters_by_challenge_rating(3) == []

    def test_search_matches_name_or_type(
        self, database: Database, sample_monsters: list[Monster]
    ) -> None:
        for monster in sample_monsters:
            database.add_monster(monster)

        assert [m.name for m in database.search_monsters("gian")] == ["Ogre", "Troll"]
        assert [m.name for m in database.search_monsters("BOLD")] == ["Kobold"]
        assert database.get_monster_count() == len(sample_monsters)


class TestSeeding:
    """Test starter data for a fresh database."""

    def test_seeds_empty_database(self, database: Database) -> None:
        assert seed_database(database) == (len(SEED_MONSTERS), len(SEED_CHARACTERS))

        assert database.get_monster_count() == 7
        assert [c.name for c in database.get_all_characters()] == [
            "Aragorn",
            "Gandalf",
            "Gimli",
            "Legolas",
        ]

    def test_seeded_characters_are_consistent(self, database: Database) -> None:
        """Sample characters sit at the start of their level at full health."""
        seed_database(database)

        for record in database.get_all_characters():
            snapshot = record.to_snapshot()
            assert snapshot.total_experience == xp_for_level(snapshot.level)
            assert snapshot.health == snapshot.max_health

        gandalf = database.search_characters("gandalf")[0]
        assert gandalf.level == 12
        assert gandalf.constitution_modifier == 3

    def test_second_run_adds_nothing(self, database: Database) -> None:
        seed_database(database)

        assert seed_database(database) == (0, 0)
        assert database.get_monster_count() == 7
        assert database.get_character_count() == 4

    def test_skips_only_populated_tables(
        self, database: Database, sample_monsters: list[Monster]
    ) -> None:
        database.add_monster(sample_monsters[0])

        assert seed_database(database) == (0, 4)
        assert [m.name for m in database.get_all_monsters()] == ["Kobold"]
