"""In-memory persona catalogue.

The repository is filled once from a seed sequence and is read-only
afterwards, so a single instance can serve any number of concurrent
requests without locking.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from loguru import logger

from ..config.personas import DEFAULT_PERSONAS
from ..models.persona import Persona


class PersonaRepository:
    """Lookup table of personas keyed by id and grouped by category."""

    def __init__(self, personas: Iterable[Persona]) -> None:
        by_id: dict[str, Persona] = {}
        by_category: dict[str, list[Persona]] = {}
        for persona in personas:
            if persona.id in by_id:
                raise ValueError(f"Duplicate persona id: {persona.id!r}")
            by_id[persona.id] = persona
            by_category.setdefault(persona.category, []).append(persona)

        self._by_id: Mapping[str, Persona] = MappingProxyType(by_id)
        self._by_category: Mapping[str, tuple[Persona, ...]] = MappingProxyType(
            {category: tuple(members) for category, members in by_category.items()}
        )
        logger.info(
            "Persona repository initialised with {} personas in {} categories",
            len(self._by_id),
            len(self._by_category),
        )

    @classmethod
    def from_seed(cls, seed: Iterable[dict[str, Any]]) -> "PersonaRepository":
        """Build a repository from raw persona dictionaries."""
        return cls(Persona.model_validate(entry) for entry in seed)

    def get_by_id(self, persona_id: str | None) -> Persona | None:
        if not persona_id or not persona_id.strip():
            logger.warning("Persona lookup with empty id")
            return None
        logger.debug("Looking up persona {}", persona_id)
        return self._by_id.get(persona_id)

    def get_all(self) -> list[Persona]:
        return list(self._by_id.values())

    def get_all_categories(self) -> list[str]:
        """Return the distinct categories in seed order."""
        return list(self._by_category)

    def get_by_category(self, category: str | None) -> list[Persona]:
        """Return the personas of one category.

        Unknown categories yield an empty list; a blank category yields
        every persona.
        """
        if not category or not category.strip():
            logger.warning("Empty category requested, returning all personas")
            return self.get_all()
        return list(self._by_category.get(category, ()))

    def __len__(self) -> int:
        return len(self._by_id)


@lru_cache()
def get_persona_repository() -> PersonaRepository:
    """Return the process-wide repository built from the default seed."""
    return PersonaRepository.from_seed(DEFAULT_PERSONAS)
