"""D&D 5E level progression data.

The XP threshold table (PHB p.15) and the lookups built on it. This is
the single source of truth for level math: the calculator, the snapshot
model, and any client code derive every XP figure from here.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Mapping
from types import MappingProxyType

from dnd_rpg.core.constants import MAX_CHARACTER_LEVEL, MAX_LEVEL_SPAN, MIN_CHARACTER_LEVEL
from dnd_rpg.core.exceptions import InvalidArgumentError, OutOfRangeError


# =============================================================================
# XP Thresholds (PHB p.15)
# =============================================================================

XP_THRESHOLDS: Mapping[int, int] = MappingProxyType(
    {
        1: 0,
        2: 300,
        3: 900,
        4: 2700,
        5: 6500,
        6: 14000,
        7: 23000,
        8: 34000,
        9: 48000,
        10: 64000,
        11: 85000,
        12: 100000,
        13: 120000,
        14: 140000,
        15: 165000,
        16: 195000,
        17: 225000,
        18: 265000,
        19: 305000,
        20: 355000,
    }
)


class LevelTable:
    """Canonical XP-to-level mapping and its inverse.

    Always backed by XP_THRESHOLDS; the table is not configurable.
    Lookups outside levels 1-20 raise OutOfRangeError; negative XP
    raises InvalidArgumentError.

    Example:
        >>> table = LevelTable()
        >>> table.xp_for_level(5)
        6500
        >>> table.level_for_total_xp(6499)
        4
        >>> table.xp_span_of_level(20)
        0
    """

    def __init__(self) -> None:
        self._thresholds = XP_THRESHOLDS
        # Sorted threshold values for bisect; index i holds level i + 1.
        self._ordered = tuple(XP_THRESHOLDS[level] for level in self.levels)

    @property
    def levels(self) -> range:
        """All valid levels, lowest first."""
        return range(MIN_CHARACTER_LEVEL, MAX_CHARACTER_LEVEL + 1)

    @property
    def thresholds(self) -> Mapping[int, int]:
        """Read-only view of level -> cumulative XP."""
        return self._thresholds

    def _check_level(self, level: int) -> None:
        if not MIN_CHARACTER_LEVEL <= level <= MAX_CHARACTER_LEVEL:
            raise OutOfRangeError(
                f"Level must be between {MIN_CHARACTER_LEVEL} and {MAX_CHARACTER_LEVEL}, got {level}",
                value=level,
                minimum=MIN_CHARACTER_LEVEL,
                maximum=MAX_CHARACTER_LEVEL,
            )

    def xp_for_level(self, level: int) -> int:
        """Get the cumulative XP needed to reach a level.

        Args:
            level: Character level (1-20).

        Returns:
            Total XP at which the level begins (0 for level 1).

        Raises:
            OutOfRangeError: If level is outside 1-20.
        """
        self._check_level(level)
        return self._thresholds[level]

    def level_for_total_xp(self, total_xp: int) -> int:
        """Determine the level reached with a given total XP.

        XP beyond the level 20 threshold still maps to 20.

        Args:
            total_xp: Cumulative XP (>= 0).

        Returns:
            The highest level whose threshold is <= total_xp.

        Raises:
            InvalidArgumentError: If total_xp is negative.
        """
        if total_xp < 0:
            raise InvalidArgumentError(
                "Total XP cannot be negative",
                argument="total_xp",
                value=total_xp,
            )
        return min(bisect_right(self._ordered, total_xp), MAX_CHARACTER_LEVEL)

    def xp_span_of_level(self, level: int) -> int:
        """Get the XP width of a level.

        Args:
            level: Character level (1-20).

        Returns:
            XP between this level's threshold and the next one, or
            MAX_LEVEL_SPAN (0) at level 20.

        Raises:
            OutOfRangeError: If level is outside 1-20.
        """
        self._check_level(level)
        if level == MAX_CHARACTER_LEVEL:
            return MAX_LEVEL_SPAN
        return self._thresholds[level + 1] - self._thresholds[level]

    def xp_to_next_level(self, total_xp: int) -> int:
        """Get the XP still missing before the next threshold (0 at level 20)."""
        level = self.level_for_total_xp(total_xp)
        if level == MAX_CHARACTER_LEVEL:
            return 0
        return self._thresholds[level + 1] - total_xp


LEVEL_TABLE = LevelTable()
"""Shared table instance."""


def xp_for_level(level: int) -> int:
    """Module-level shortcut for LEVEL_TABLE.xp_for_level."""
    return LEVEL_TABLE.xp_for_level(level)


def level_for_total_xp(total_xp: int) -> int:
    """Module-level shortcut for LEVEL_TABLE.level_for_total_xp."""
    return LEVEL_TABLE.level_for_total_xp(total_xp)


def xp_span_of_level(level: int) -> int:
    """Module-level shortcut for LEVEL_TABLE.xp_span_of_level."""
    return LEVEL_TABLE.xp_span_of_level(level)


__all__ = [
    "XP_THRESHOLDS",
    "LevelTable",
    "LEVEL_TABLE",
    "xp_for_level",
    "level_for_total_xp",
    "xp_span_of_level",
]
