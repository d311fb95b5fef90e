"""LangChain prompt assembly for persona conversations."""

from __future__ import annotations

from typing import Sequence

from loguru import logger
from langchain_core.prompts import PromptTemplate

from ..models.chat_message import ChatTurn
from ..models.enums import MessageRole
from ..models.persona import Persona
from ..prompts import CONVERSATION_PROMPT, PERSONA_SYSTEM_PROMPT


class PersonaPromptBuilder:
    """Turns a persona, a history window and a user message into one prompt.

    The output is a single flat string: the persona's system block, the
    rendered history (one ``role: text`` line per turn) and finally the
    current ``user:`` line.
    """

    def __init__(
        self,
        system_template: str | None = None,
        conversation_template: str | None = None,
    ) -> None:
        self._system_template = PromptTemplate.from_template(system_template or PERSONA_SYSTEM_PROMPT)
        self._conversation_template = PromptTemplate.from_template(
            conversation_template or CONVERSATION_PROMPT
        )

    def build_system_prompt(self, persona: Persona) -> str:
        """Fill the system block with the persona's identity and style."""
        return self._system_template.format(
            name=persona.name,
            category=persona.category,
            description=persona.description,
            personality=persona.personality,
        )

    @staticmethod
    def render_history(history: Sequence[ChatTurn]) -> str:
        """Render prior turns, each on its own newline-terminated line."""
        lines = []
        for turn in history:
            role = MessageRole.for_sender(turn.sender)
            lines.append(f"{role.value}: {turn.text}\n")
        return "".join(lines)

    def build_prompt(self, persona: Persona, history: Sequence[ChatTurn], user_message: str) -> str:
        prompt = self._conversation_template.format(
            system_prompt=self.build_system_prompt(persona),
            message_history=self.render_history(history),
            user_message=user_message,
        )
        logger.debug(
            "Built prompt for persona={} with {} history turns ({} characters)",
            persona.id,
            len(history),
            len(prompt),
        )
        return prompt
