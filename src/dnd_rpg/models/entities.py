"""Game entities other than player characters."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dnd_rpg.core.exceptions import ValidationError
from dnd_rpg.models.equipment import validate_dice_notation


class Monster(BaseModel):
    """A monster that can be offered as an encounter.

    Attributes:
        name: Display name (e.g., 'Goblin').
        challenge_rating: CR as a float (0.125, 0.25, 0.5, 1, ...).
        hit_points: Average hit points.
        armor_class: Armor class.
        damage_dice: Primary attack damage in dice notation.
        experience_points: XP awarded when defeated.
        monster_type: Creature type used for filtering.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Annotated[str, Field(min_length=1, max_length=100)]
    challenge_rating: Annotated[float, Field(ge=0, le=30)]
    hit_points: Annotated[int, Field(ge=1)]
    armor_class: Annotated[int, Field(ge=1, le=30)]
    damage_dice: str
    experience_points: Annotated[int, Field(ge=0)]
    monster_type: str = "humanoid"

    @field_validator("damage_dice")
    @classmethod
    def check_damage_dice(cls, value: str) -> str:
        """Reject damage strings the dice parser cannot read."""
        try:
            return validate_dice_notation(value)
        except ValidationError as exc:
            raise ValueError(exc.message) from exc


__all__ = ["Monster"]
