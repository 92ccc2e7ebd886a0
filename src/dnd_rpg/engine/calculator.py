"""Progression calculator: XP gain and explicit level assignment.

Every function here is pure. It takes a CharacterSnapshot and returns a
new one, or raises before building anything. Persisting the result is
the caller's job.

Two hit point policies apply:

* ``apply_experience`` grants ``max(1, 1 + CON modifier)`` per level
  gained, one level at a time, healing by the same amount.
* ``set_level`` is a testing/debug jump. It grants a flat configured
  amount per level gained in one step and fully heals.
"""

from __future__ import annotations

from dnd_rpg.core.config import get_settings
from dnd_rpg.core.constants import (
    MAX_CHARACTER_LEVEL,
    MIN_CHARACTER_LEVEL,
    MIN_LEVEL_UP_HP_GAIN,
)
from dnd_rpg.core.exceptions import InvalidArgumentError, OutOfRangeError
from dnd_rpg.core.logging import get_logger
from dnd_rpg.models.progression import LEVEL_TABLE
from dnd_rpg.models.snapshot import CharacterSnapshot


logger = get_logger(__name__)


def hp_gain_for_level_up(constitution_modifier: int) -> int:
    """HP gained for one level earned through experience.

    Example:
        >>> hp_gain_for_level_up(2)
        3
        >>> hp_gain_for_level_up(-4)
        1
    """
    return max(MIN_LEVEL_UP_HP_GAIN, 1 + constitution_modifier)


def can_level_up(level: int, total_experience: int) -> bool:
    """Check whether total XP has reached the next level's threshold.

    Always False at level 20. Useful for flagging stored records whose
    level lags behind their XP.
    """
    if level >= MAX_CHARACTER_LEVEL:
        return False
    return total_experience >= LEVEL_TABLE.xp_for_level(level + 1)


def levels_gained(before: CharacterSnapshot, after: CharacterSnapshot) -> int:
    """Number of levels gained between two snapshots (0 if none or lost)."""
    return max(0, after.level - before.level)


def apply_experience(snapshot: CharacterSnapshot, xp_delta: int) -> CharacterSnapshot:
    """Add experience and apply any resulting level-ups.

    XP past the level 20 threshold still accumulates in
    ``total_experience``, but the level stays at 20. Each level gained
    adds ``hp_gain_for_level_up`` to both max and current health.

    Args:
        snapshot: Current state.
        xp_delta: XP earned (>= 0).

    Returns:
        A new snapshot. The input is not modified.

    Raises:
        InvalidArgumentError: If xp_delta is negative.
    """
    if xp_delta < 0:
        raise InvalidArgumentError(
            "Experience gain cannot be negative",
            argument="xp_delta",
            value=xp_delta,
        )

    new_total = snapshot.total_experience + xp_delta
    new_level = LEVEL_TABLE.level_for_total_xp(new_total)

    max_health = snapshot.max_health
    health = snapshot.health
    for level in range(snapshot.level + 1, new_level + 1):
        hp_gain = hp_gain_for_level_up(snapshot.constitution_modifier)
        max_health += hp_gain
        health += hp_gain
        logger.debug("Level gained", level=level, hp_gain=hp_gain, max_health=max_health)

    result = snapshot.evolve(
        level=new_level,
        total_experience=new_total,
        health=health,
        max_health=max_health,
    )

    if result.level > snapshot.level:
        logger.info(
            "Character leveled up",
            from_level=snapshot.level,
            to_level=result.level,
            health=result.health,
            max_health=result.max_health,
        )
    return result


def set_level(
    snapshot: CharacterSnapshot,
    target_level: int,
    *,
    per_level_hp: int | None = None,
) -> CharacterSnapshot:
    """Jump directly to a level, snapping XP to the start of it.

    Meant for testing and debugging, not gameplay. Moving up adds
    ``per_level_hp`` max HP for each level skipped; moving down leaves
    max HP alone. Health is always restored to max.

    Args:
        snapshot: Current state.
        target_level: Level to jump to (1-20).
        per_level_hp: Flat HP per level gained. Defaults to the
            ``progression.fixed_per_level_hp`` setting.

    Returns:
        A new snapshot with ``experience_in_level == 0``.

    Raises:
        OutOfRangeError: If target_level is outside 1-20.
        InvalidArgumentError: If per_level_hp is negative.
    """
    if not MIN_CHARACTER_LEVEL <= target_level <= MAX_CHARACTER_LEVEL:
        raise OutOfRangeError(
            f"Target level must be between {MIN_CHARACTER_LEVEL} and {MAX_CHARACTER_LEVEL}",
            value=target_level,
            minimum=MIN_CHARACTER_LEVEL,
            maximum=MAX_CHARACTER_LEVEL,
        )
    if per_level_hp is None:
        per_level_hp = get_settings().progression.fixed_per_level_hp
    if per_level_hp < 0:
        raise InvalidArgumentError(
            "Per-level HP cannot be negative",
            argument="per_level_hp",
            value=per_level_hp,
        )

    new_total = LEVEL_TABLE.xp_for_level(target_level)

    max_health = snapshot.max_health + max(0, target_level - snapshot.level) * per_level_hp
    result = snapshot.evolve(
        level=target_level,
        total_experience=new_total,
        health=max_health,
        max_health=max_health,
    )
    logger.info(
        "Character level set",
        from_level=snapshot.level,
        to_level=target_level,
        max_health=max_health,
    )
    return result


__all__ = [
    "apply_experience",
    "set_level",
    "hp_gain_for_level_up",
    "can_level_up",
    "levels_gained",
]
