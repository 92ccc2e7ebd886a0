"""Encounter selection: which monsters suit a character level.

Randomness is injected as a ``random.Random`` instance so callers can
seed it in tests; nothing here touches the module-level RNG.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from dnd_rpg.core.constants import MIN_ENCOUNTER_CR, MIN_ENCOUNTER_MAX_CR
from dnd_rpg.core.logging import get_logger
from dnd_rpg.models.entities import Monster
from dnd_rpg.models.progression import LEVEL_TABLE


logger = get_logger(__name__)


def challenge_range_for_level(level: int) -> tuple[float, float]:
    """Challenge rating window for a solo character of the given level.

    Args:
        level: Character level (1-20).

    Returns:
        Tuple of (min_cr, max_cr), inclusive.

    Raises:
        OutOfRangeError: If level is outside 1-20.
    """
    # Validates the level
    LEVEL_TABLE.xp_for_level(level)
    min_cr = max(MIN_ENCOUNTER_CR, level / 8)
    max_cr = max(MIN_ENCOUNTER_MAX_CR, level / 2)
    return (min_cr, max_cr)


def _by_rating(monsters: Iterable[Monster]) -> list[Monster]:
    return sorted(monsters, key=lambda m: (m.challenge_rating, m.name))


def monsters_for_level(monsters: Iterable[Monster], level: int) -> list[Monster]:
    """Monsters whose CR falls in the window for ``level``, easiest first."""
    min_cr, max_cr = challenge_range_for_level(level)
    return _by_rating(m for m in monsters if min_cr <= m.challenge_rating <= max_cr)


def pick_random_monster(
    monsters: Sequence[Monster],
    rng: random.Random,
    *,
    max_challenge_rating: float | None = None,
) -> Monster | None:
    """Pick a monster uniformly at random.

    Args:
        monsters: Candidate monsters.
        rng: Random source to draw from.
        max_challenge_rating: If given, only monsters at or below this CR.

    Returns:
        The chosen monster, or None if no candidate qualifies.
    """
    candidates = _by_rating(
        m
        for m in monsters
        if max_challenge_rating is None or m.challenge_rating <= max_challenge_rating
    )
    if not candidates:
        logger.debug("No monsters available", max_challenge_rating=max_challenge_rating)
        return None
    choice = rng.choice(candidates)
    logger.debug("Monster picked", monster=choice.name, candidates=len(candidates))
    return choice


__all__ = [
    "challenge_range_for_level",
    "monsters_for_level",
    "pick_random_monster",
]
