"""Service layer combining the progression engine with storage."""

from dnd_rpg.services.characters import CharacterService

__all__ = ["CharacterService"]
