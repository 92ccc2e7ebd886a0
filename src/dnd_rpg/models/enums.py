"""Enumeration types for the D&D RPG character manager."""

from __future__ import annotations

from enum import StrEnum


class CharacterClass(StrEnum):
    """Playable D&D 5E classes.

    A closed set: every per-class rules table is keyed by this enum, so
    an unknown class name fails at parse time instead of falling through
    to a default branch.
    """

    BARBARIAN = "Barbarian"
    BARD = "Bard"
    CLERIC = "Cleric"
    DRUID = "Druid"
    FIGHTER = "Fighter"
    MONK = "Monk"
    PALADIN = "Paladin"
    RANGER = "Ranger"
    ROGUE = "Rogue"
    SORCERER = "Sorcerer"
    WARLOCK = "Warlock"
    WIZARD = "Wizard"

    @classmethod
    def parse(cls, name: str) -> "CharacterClass":
        """Look up a class by name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the name is not a known class.
        """
        normalized = name.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown character class: {name!r}")


__all__ = ["CharacterClass"]
