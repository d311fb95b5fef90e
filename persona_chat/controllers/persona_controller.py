"""Read-only endpoints over the persona catalogue."""

from fastapi import APIRouter, Depends
from loguru import logger

from ..models.persona import Persona
from ..repositories.persona_repository import PersonaRepository, get_persona_repository
from ..utils.error_handler import ResourceNotFoundError

router = APIRouter(prefix="", tags=["Personas"])


@router.get("/personas", response_model=list[str])
async def list_categories_endpoint(
    repository: PersonaRepository = Depends(get_persona_repository),
) -> list[str]:
    """Return every persona category."""
    categories = repository.get_all_categories()
    logger.info("Returning {} persona categories", len(categories))
    return categories


@router.get("/personas/{category:path}", response_model=list[Persona])
async def list_category_personas_endpoint(
    category: str,
    repository: PersonaRepository = Depends(get_persona_repository),
) -> list[Persona]:
    """Return the personas in a category; unknown categories give an empty list."""
    personas = repository.get_by_category(category)
    logger.info("Returning {} personas for category {!r}", len(personas), category)
    return personas


@router.get("/characters", response_model=list[Persona])
async def list_personas_endpoint(
    repository: PersonaRepository = Depends(get_persona_repository),
) -> list[Persona]:
    """Return every persona."""
    return repository.get_all()


@router.get("/characters/{persona_id}", response_model=Persona)
async def get_persona_endpoint(
    persona_id: str,
    repository: PersonaRepository = Depends(get_persona_repository),
) -> Persona:
    """Return a single persona or 404."""
    persona = repository.get_by_id(persona_id)
    if persona is None:
        raise ResourceNotFoundError(f"Persona not found: {persona_id}")
    return persona
