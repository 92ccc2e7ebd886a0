"""Immutable character progression snapshot.

A CharacterSnapshot holds the progression-relevant slice of a character
at one instant. Only ``level``, ``total_experience`` and the hit point
fields are stored; the per-level XP figures are computed from the level
table on access, so they cannot drift from the total.

Example:
    >>> snap = CharacterSnapshot.starting(max_health=12, constitution_modifier=2)
    >>> snap.experience_to_next_level
    300
    >>> snap.progress_percentage
    0.0
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from dnd_rpg.core.constants import MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL, MIN_MAX_HEALTH
from dnd_rpg.core.exceptions import InvalidArgumentError
from dnd_rpg.models.progression import level_for_total_xp, xp_for_level, xp_span_of_level


class CharacterSnapshot(BaseModel):
    """Progression state of a character at a point in time.

    Attributes:
        level: Character level (1-20). Must match the level derived from
            total_experience.
        total_experience: Cumulative XP ever earned.
        health: Current hit points (0 to max_health).
        max_health: Maximum hit points.
        constitution_modifier: CON modifier used for level-up HP gain.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        json_schema_extra={
            "description": "Character progression state with derived XP fields"
        },
    )

    level: Annotated[
        int, Field(ge=MIN_CHARACTER_LEVEL, le=MAX_CHARACTER_LEVEL, description="Level (1-20)")
    ]
    total_experience: Annotated[int, Field(ge=0, description="Cumulative XP")]
    health: Annotated[int, Field(ge=0, description="Current hit points")]
    max_health: Annotated[int, Field(ge=MIN_MAX_HEALTH, description="Maximum hit points")]
    constitution_modifier: int = Field(default=0, description="Constitution modifier")

    @model_validator(mode="after")
    def validate_consistency(self) -> "CharacterSnapshot":
        """Reject health above max and levels that disagree with total XP."""
        if self.health > self.max_health:
            msg = f"health ({self.health}) cannot exceed max_health ({self.max_health})"
            raise ValueError(msg)
        derived = level_for_total_xp(self.total_experience)
        if derived != self.level:
            msg = (
                f"level {self.level} does not match total_experience "
                f"{self.total_experience} (expected level {derived})"
            )
            raise ValueError(msg)
        return self

    # Derived XP fields
    @computed_field(description="XP earned since entering the current level")
    @property
    def experience_in_level(self) -> int:
        return self.total_experience - xp_for_level(self.level)

    @computed_field(description="XP width of the current level (0 at level 20)")
    @property
    def experience_to_next_level(self) -> int:
        return xp_span_of_level(self.level)

    @computed_field(description="Whether the character is at the level cap")
    @property
    def is_max_level(self) -> bool:
        return self.level == MAX_CHARACTER_LEVEL

    @computed_field(description="Percent through the current level, None at level 20")
    @property
    def progress_percentage(self) -> float | None:
        """Progress bar value; None marks the MAX LEVEL display state."""
        span = self.experience_to_next_level
        if self.is_max_level or span == 0:
            return None
        return round(self.experience_in_level / span * 100, 2)

    def stored_fields(self) -> dict[str, Any]:
        """The persisted fields, without computed values."""
        return self.model_dump(include=set(type(self).model_fields))

    def evolve(self, **changes: Any) -> "CharacterSnapshot":
        """Return a new, fully validated snapshot with some fields replaced.

        Unlike ``model_copy(update=...)``, this re-runs validation.
        """
        return type(self).model_validate({**self.stored_fields(), **changes})

    @classmethod
    def starting(cls, *, max_health: int, constitution_modifier: int = 0) -> "CharacterSnapshot":
        """Snapshot of a brand-new level 1 character at full health."""
        return cls(
            level=MIN_CHARACTER_LEVEL,
            total_experience=0,
            health=max_health,
            max_health=max_health,
            constitution_modifier=constitution_modifier,
        )


def snapshot_from_legacy(
    *,
    level: int,
    experience: int,
    health: int,
    max_health: int,
    constitution_modifier: int = 0,
) -> CharacterSnapshot:
    """Rebuild a snapshot from a record that only stored XP-in-level.

    Older records kept ``level`` plus XP earned inside that level. The
    total is reconstructed as the level threshold plus that XP, and the
    level is then re-derived from the total, so a record that had
    silently overflowed its level lands on the correct one.

    Args:
        level: Stored level (1-20).
        experience: Stored XP earned within that level.
        health: Current hit points.
        max_health: Maximum hit points.
        constitution_modifier: CON modifier.

    Returns:
        A consistent CharacterSnapshot.

    Raises:
        InvalidArgumentError: If experience is negative.
        OutOfRangeError: If level is outside 1-20.
    """
    if experience < 0:
        raise InvalidArgumentError(
            "Legacy experience cannot be negative",
            argument="experience",
            value=experience,
        )
    total = xp_for_level(level) + experience
    return CharacterSnapshot(
        level=level_for_total_xp(total),
        total_experience=total,
        health=min(health, max_health),
        max_health=max_health,
        constitution_modifier=constitution_modifier,
    )


__all__ = ["CharacterSnapshot", "snapshot_from_legacy"]
