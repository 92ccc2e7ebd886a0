"""Heal and damage clamps.

Not part of progression; these are plain bounded adjustments to
current health that keep ``0 <= health <= max_health``.
"""

from __future__ import annotations

from dnd_rpg.core.exceptions import InvalidArgumentError
from dnd_rpg.core.logging import get_logger
from dnd_rpg.models.snapshot import CharacterSnapshot


logger = get_logger(__name__)


def _check_amount(amount: int, argument: str) -> None:
    if amount < 0:
        raise InvalidArgumentError(
            f"{argument.capitalize()} amount cannot be negative",
            argument=argument,
            value=amount,
        )


def heal(snapshot: CharacterSnapshot, amount: int) -> CharacterSnapshot:
    """Restore health, never past max_health.

    Raises:
        InvalidArgumentError: If amount is negative.
    """
    _check_amount(amount, "heal")
    health = min(snapshot.health + amount, snapshot.max_health)
    return snapshot.evolve(health=health)


def damage(snapshot: CharacterSnapshot, amount: int) -> CharacterSnapshot:
    """Reduce health, never below zero.

    Raises:
        InvalidArgumentError: If amount is negative.
    """
    _check_amount(amount, "damage")
    health = max(snapshot.health - amount, 0)
    if health == 0 and snapshot.health > 0:
        logger.warning("Character reduced to 0 HP", damage=amount)
    return snapshot.evolve(health=health)


def health_percentage(snapshot: CharacterSnapshot) -> float:
    """Current health as a percentage of max, rounded to 2 dp."""
    return round(snapshot.health / snapshot.max_health * 100, 2)


__all__ = ["heal", "damage", "health_percentage"]
