"""Character naming rules.

Names are 2-100 characters of letters, spaces, hyphens, apostrophes and
periods ("Drizzt Do'Urden", "Mary-Anne", "St. Cuthbert").
"""

from __future__ import annotations

import re

from dnd_rpg.core.constants import MAX_NAME_LENGTH, MIN_NAME_LENGTH
from dnd_rpg.core.exceptions import ValidationError


NAME_PATTERN = re.compile(r"[A-Za-z\s\-'.]+")
"""Characters allowed in a character name."""


def validate_character_name(name: str) -> str:
    """Check a character name and return it without surrounding whitespace.

    Args:
        name: Proposed character name.

    Returns:
        The stripped name.

    Raises:
        ValidationError: If the name is too short, too long, or contains
            characters other than letters, spaces, hyphens, apostrophes
            and periods.
    """
    stripped = name.strip()
    if not MIN_NAME_LENGTH <= len(stripped) <= MAX_NAME_LENGTH:
        raise ValidationError(
            f"Character name must be between {MIN_NAME_LENGTH} and "
            f"{MAX_NAME_LENGTH} characters",
            field_name="name",
            invalid_value=name,
        )
    if NAME_PATTERN.fullmatch(stripped) is None:
        raise ValidationError(
            "Character name can only contain letters, spaces, hyphens, "
            "apostrophes, and periods",
            field_name="name",
            invalid_value=name,
        )
    return stripped


__all__ = ["NAME_PATTERN", "validate_character_name"]
