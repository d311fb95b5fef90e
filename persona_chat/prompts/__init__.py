"""Prompt text used by the persona prompt chain."""

from .persona import CONVERSATION_PROMPT, PERSONA_SYSTEM_PROMPT  # noqa: F401
