"""Read-only stores backing the chat API."""

from .persona_repository import PersonaRepository, get_persona_repository  # noqa: F401
