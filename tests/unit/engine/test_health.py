"""Tests for heal and damage clamps."""

from __future__ import annotations

import pytest

from dnd_rpg.core.exceptions import InvalidArgumentError
from dnd_rpg.engine.health import damage, heal, health_percentage
from dnd_rpg.models.snapshot import CharacterSnapshot


class TestHeal:
    """Tests for healing."""

    def test_heal(self, veteran_snapshot: CharacterSnapshot) -> None:
        assert heal(veteran_snapshot, 5).health == 25

    def test_capped_at_max(self, veteran_snapshot: CharacterSnapshot) -> None:
        assert heal(veteran_snapshot, 1000).health == 40

    def test_progression_untouched(self, veteran_snapshot: CharacterSnapshot) -> None:
        result = heal(veteran_snapshot, 5)

        assert result.level == veteran_snapshot.level
        assert result.total_experience == veteran_snapshot.total_experience
        assert result.max_health == veteran_snapshot.max_health

    def test_negative(self, veteran_snapshot: CharacterSnapshot) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            heal(veteran_snapshot, -1)

        assert exc_info.value.details["argument"] == "heal"


class TestDamage:
    """Tests for damage."""

    def test_damage(self, veteran_snapshot: CharacterSnapshot) -> None:
        assert damage(veteran_snapshot, 5).health == 15

    def test_floored_at_zero(self, veteran_snapshot: CharacterSnapshot) -> None:
        assert damage(veteran_snapshot, 1000).health == 0

    def test_zero_is_noop(self, veteran_snapshot: CharacterSnapshot) -> None:
        assert damage(veteran_snapshot, 0) == veteran_snapshot

    def test_negative(self, veteran_snapshot: CharacterSnapshot) -> None:
        with pytest.raises(InvalidArgumentError):
            damage(veteran_snapshot, -3)


class TestHealthPercentage:
    def test_percentage(self, veteran_snapshot: CharacterSnapshot) -> None:
        assert health_percentage(veteran_snapshot) == 50.0

    def test_full(self, fresh_snapshot: CharacterSnapshot) -> None:
        assert health_percentage(fresh_snapshot) == 100.0
