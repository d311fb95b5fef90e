from __future__ import annotations

import pytest
from pydantic import ValidationError

from persona_chat.config.personas import DEFAULT_PERSONAS
from persona_chat.repositories.persona_repository import PersonaRepository, get_persona_repository


def test_default_catalogue_is_seeded() -> None:
    repository = get_persona_repository()

    assert len(repository) == len(DEFAULT_PERSONAS) == 8
    assert [persona.id for persona in repository.get_all()] == [entry["id"] for entry in DEFAULT_PERSONAS]


def test_get_by_id() -> None:
    repository = get_persona_repository()

    einstein = repository.get_by_id("einstein")
    assert einstein is not None
    assert einstein.name == "Albert Einstein"
    assert einstein.category == "Scientist"
    assert repository.get_by_id("nobody") is None
    assert repository.get_by_id("") is None
    assert repository.get_by_id(None) is None


def test_categories_are_distinct_and_in_seed_order() -> None:
    categories = get_persona_repository().get_all_categories()

    assert categories == [
        "Literary Character",
        "Historical Figure",
        "Scientist",
        "Writer",
        "Philosopher",
        "Artist/Scientist",
    ]


def test_get_by_category() -> None:
    repository = get_persona_repository()

    assert [p.id for p in repository.get_by_category("Scientist")] == ["einstein", "marie-curie"]
    assert [p.id for p in repository.get_by_category("Historical Figure")] == ["socrates", "maya"]
    assert repository.get_by_category("Astronaut") == []
    assert len(repository.get_by_category("  ")) == len(repository)


def test_returned_lists_do_not_affect_the_repository() -> None:
    repository = get_persona_repository()

    repository.get_all().clear()
    repository.get_by_category("Scientist").clear()
    repository.get_all_categories().clear()

    assert len(repository.get_all()) == 8
    assert len(repository.get_by_category("Scientist")) == 2
    assert len(repository.get_all_categories()) == 6


def test_personas_are_frozen() -> None:
    persona = get_persona_repository().get_by_id("socrates")

    with pytest.raises(ValidationError):
        persona.name = "Plato"


def test_duplicate_ids_are_rejected() -> None:
    entry = DEFAULT_PERSONAS[0]

    with pytest.raises(ValueError, match="Duplicate persona id"):
        PersonaRepository.from_seed([entry, dict(entry)])


def test_seed_accepts_legacy_avatar_key() -> None:
    repository = PersonaRepository.from_seed(
        [
            {
                "id": "ada",
                "name": "Ada Lovelace",
                "avatar": "/avatars/ada.png",
                "category": "Scientist",
                "description": "Pioneer of computing.",
                "personality": "Analytical.",
            }
        ]
    )

    assert repository.get_by_id("ada").avatar_ref == "/avatars/ada.png"
