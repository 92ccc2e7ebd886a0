"""Tests for class kits, ability modifiers, and monsters."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from dnd_rpg.core.exceptions import ValidationError
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


class TestCalculateModifier:
    """Tests for ability modifiers."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (1, -5),
            (8, -1),
            (9, -1),
            (10, 0),
            (11, 0),
            (15, 2),
            (20, 5),
        ],
    )
    def test_modifier(self, score: int, expected: int) -> None:
        """Odd scores below 10 round down."""
        assert calculate_modifier(score) == expected


class TestDiceNotation:
    """Tests for damage expression validation."""

    def test_valid_expression_is_stripped(self) -> None:
        assert validate_dice_notation(" 2d6+1 ") == "2d6+1"

    def test_empty_expression(self) -> None:
        with pytest.raises(ValidationError):
            validate_dice_notation("   ")

    def test_garbage_expression(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_dice_notation("sword")

        assert exc_info.value.details["field_name"] == "damage_dice"
        assert exc_info.value.details["invalid_value"] == "sword"


class TestCharacterClass:
    """Tests for the CharacterClass enum."""

    def test_parse_case_insensitive(self) -> None:
        assert CharacterClass.parse("fighter") is CharacterClass.FIGHTER
        assert CharacterClass.parse("  WIZARD ") is CharacterClass.WIZARD

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown character class"):
            CharacterClass.parse("Artificer")

    def test_string_value(self) -> None:
        assert str(CharacterClass.ROGUE) == "Rogue"


class TestClassKits:
    """Tests for per-class starting kits."""

    def test_every_class_has_a_kit(self) -> None:
        assert set(CLASS_KITS) == set(CharacterClass)

    def test_fighter_kit(self) -> None:
        kit = get_class_kit(CharacterClass.FIGHTER)

        assert kit.weapon_name == "Longsword"
        assert kit.weapon_damage == "1d8"
        assert kit.armor_class == 16
        assert kit.hit_die == 10

    @pytest.mark.parametrize(
        "character_class,weapon,armor,armor_class,hit_die",
        [
            (CharacterClass.BARBARIAN, "Greataxe", "Unarmored", 10, 12),
            (CharacterClass.CLERIC, "Mace", "Scale Mail", 14, 8),
            (CharacterClass.RANGER, "Longbow", "Scale Mail", 14, 10),
            (CharacterClass.ROGUE, "Rapier", "Leather Armor", 11, 8),
            (CharacterClass.WIZARD, "Quarterstaff", "Unarmored", 10, 6),
        ],
    )
    def test_phb_starting_kits(
        self,
        character_class: CharacterClass,
        weapon: str,
        armor: str,
        armor_class: int,
        hit_die: int,
    ) -> None:
        """Kits use the PHB starting weapon and armor plus the class hit die."""
        kit = get_class_kit(character_class)

        assert (kit.weapon_name, kit.armor_name) == (weapon, armor)
        assert kit.armor_class == armor_class
        assert kit.hit_die == hit_die

    def test_invalid_kit_dice(self) -> None:
        with pytest.raises(ValidationError):
            ClassKit("Stick", "pointy", "None", 10, 8)

    def test_starting_max_health(self) -> None:
        assert starting_max_health(CharacterClass.FIGHTER, 2) == 12
        assert starting_max_health(CharacterClass.BARBARIAN, 0) == 12

    def test_starting_max_health_floor(self) -> None:
        """A huge CON penalty still leaves 1 HP."""
        assert starting_max_health(CharacterClass.WIZARD, -6) == 1


class TestMonster:
    """Tests for the Monster model."""

    def test_create(self) -> None:
        goblin = Monster(
            name="Goblin",
            challenge_rating=0.25,
            hit_points=7,
            armor_class=15,
            damage_dice="1d6+2",
            experience_points=50,
        )

        assert goblin.monster_type == "humanoid"

    def test_bad_damage_dice(self) -> None:
        with pytest.raises(PydanticValidationError, match="Invalid dice notation"):
            Monster(
                name="Blob",
                challenge_rating=1,
                hit_points=10,
                armor_class=8,
                damage_dice="sword",
                experience_points=200,
            )

    def test_frozen(self, sample_monsters: list[Monster]) -> None:
        with pytest.raises(PydanticValidationError):
            sample_monsters[0].hit_points = 1  # type: ignore[misc]
