"""Starting equipment and hit dice by class.

Each CharacterClass maps to exactly one ClassKit: the weapon and body
armor equipped from the PHB starting equipment (option A), plus the
class hit die. Weapon damage notation is checked with the d20 parser
when the table is built, so a typo fails at import rather than when a
character is created.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

import d20

from dnd_rpg.core.constants import MIN_MAX_HEALTH
from dnd_rpg.core.exceptions import ValidationError
from dnd_rpg.models.enums import CharacterClass


def calculate_modifier(score: int) -> int:
    """Calculate the ability modifier from an ability score.

    Example:
        >>> calculate_modifier(15)
        2
        >>> calculate_modifier(9)
        -1
    """
    return (score - 10) // 2


def validate_dice_notation(expression: str) -> str:
    """Check that a damage expression parses as dice notation.

    Args:
        expression: Dice expression such as '1d8' or '2d6+1'.

    Returns:
        The expression, stripped of surrounding whitespace.

    Raises:
        ValidationError: If d20 cannot parse the expression.
    """
    stripped = expression.strip()
    if not stripped:
        raise ValidationError("Empty dice expression", field_name="damage_dice")
    try:
        d20.parse(stripped)
    except d20.RollSyntaxError as exc:
        raise ValidationError(
            f"Invalid dice notation: {expression!r}",
            field_name="damage_dice",
            invalid_value=expression,
        ) from exc
    return stripped


@dataclass(frozen=True)
class ClassKit:
    """Starting gear and hit die for one class.

    Attributes:
        weapon_name: Starting weapon.
        weapon_damage: Weapon damage dice (d20 notation).
        armor_name: Starting armor.
        armor_class: Base armor class granted by the armor.
        hit_die: Size of the class hit die.
    """

    weapon_name: str
    weapon_damage: str
    armor_name: str
    armor_class: int
    hit_die: int

    def __post_init__(self) -> None:
        validate_dice_notation(self.weapon_damage)


CLASS_KITS: Mapping[CharacterClass, ClassKit] = MappingProxyType(
    {
        CharacterClass.BARBARIAN: ClassKit("Greataxe", "1d12", "Unarmored", 10, 12),
        CharacterClass.BARD: ClassKit("Rapier", "1d8", "Leather Armor", 11, 8),
        CharacterClass.CLERIC: ClassKit("Mace", "1d6", "Scale Mail", 14, 8),
        CharacterClass.DRUID: ClassKit("Scimitar", "1d6", "Leather Armor", 11, 8),
        CharacterClass.FIGHTER: ClassKit("Longsword", "1d8", "Chain Mail", 16, 10),
        CharacterClass.MONK: ClassKit("Shortsword", "1d6", "Unarmored", 10, 8),
        CharacterClass.PALADIN: ClassKit("Longsword", "1d8", "Chain Mail", 16, 10),
        CharacterClass.RANGER: ClassKit("Longbow", "1d8", "Scale Mail", 14, 10),
        CharacterClass.ROGUE: ClassKit("Rapier", "1d8", "Leather Armor", 11, 8),
        CharacterClass.SORCERER: ClassKit("Light Crossbow", "1d8", "Unarmored", 10, 6),
        CharacterClass.WARLOCK: ClassKit("Light Crossbow", "1d8", "Leather Armor", 11, 8),
        CharacterClass.WIZARD: ClassKit("Quarterstaff", "1d6", "Unarmored", 10, 6),
    }
)


def get_class_kit(character_class: CharacterClass) -> ClassKit:
    """Get the starting kit for a class."""
    return CLASS_KITS[character_class]


def starting_max_health(character_class: CharacterClass, constitution_modifier: int) -> int:
    """Level 1 hit points: full hit die plus CON modifier, at least 1."""
    return max(MIN_MAX_HEALTH, CLASS_KITS[character_class].hit_die + constitution_modifier)


__all__ = [
    "ClassKit",
    "CLASS_KITS",
    "calculate_modifier",
    "get_class_kit",
    "starting_max_health",
    "validate_dice_notation",
]
