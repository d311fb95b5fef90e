"""Chat pipeline turning a user message into a persona reply.

The ChatService receives a request, applies every business rule
(validation, content filtering, persona resolution, canned replies and
history windowing), builds a single prompt and asks the completion
client for the persona's answer.  It never raises: every outcome is a
:class:`ChatResponse`, so controllers can remain thin.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Sequence

from loguru import logger

from ..chains.prompt_builder import PersonaPromptBuilder
from ..config.chat_config import ChatConfig, get_chat_config
from ..config.chat_rules import APOLOGY_REPLY
from ..models.chat_message import ChatTurn
from ..models.chat_request import ChatRequest
from ..models.chat_response import ChatResponse
from ..models.enums import ChatErrorKind, invalid_length_message
from ..repositories.persona_repository import PersonaRepository, get_persona_repository
from ..utils.error_handler import CompletionError, pipeline_boundary
from ..utils.helpers import format_message_timestamp, take_last
from ..utils.validators import validate_message_content
from .content_filter import SensitiveContentFilter
from .llm_service import CompletionClient, get_completion_client
from .response_cache import CommonResponseCache


def limit_history(history: Sequence[ChatTurn] | None, max_size: int) -> list[ChatTurn]:
    """Return the most recent ``max_size`` turns in their original order.

    A missing history is treated as empty.  The caller's sequence is
    never modified.
    """
    return take_last(history, max_size)


class ChatService:
    """Coordinates validation, filtering, prompting and model invocation.

    All collaborators are passed in explicitly.  The persona repository,
    filter and canned-response table are read-only, so one service
    instance can handle any number of concurrent requests.
    """

    def __init__(
        self,
        persona_repository: PersonaRepository,
        completion_client: CompletionClient,
        chat_config: ChatConfig | None = None,
        content_filter: SensitiveContentFilter | None = None,
        response_cache: CommonResponseCache | None = None,
        prompt_builder: PersonaPromptBuilder | None = None,
    ) -> None:
        self.persona_repository = persona_repository
        self.completion_client = completion_client
        self.chat_config = chat_config or get_chat_config()
        self.content_filter = content_filter or SensitiveContentFilter()
        self.response_cache = response_cache or CommonResponseCache()
        self.prompt_builder = prompt_builder or PersonaPromptBuilder()
        logger.info(
            "ChatService initialised (max history={}, max message length={})",
            self.chat_config.max_history_size,
            self.chat_config.max_message_length,
        )

    @pipeline_boundary
    def process_chat_request(self, request: ChatRequest) -> ChatResponse:
        """Generate the persona's reply to a chat request.

        Each rule is a gate: the first violation returns a failed
        :class:`ChatResponse` without contacting the model.  Messages
        matching a common phrase are answered from the canned table.
        Provider failures are answered with an apology and still count
        as success; any other unexpected error becomes an
        ``INTERNAL_FAILURE`` response.
        """
        persona_id = request.persona_id
        logger.info("Processing chat request for persona {}", persona_id)

        if persona_id is None or not persona_id.strip():
            logger.warning("Chat request without persona id")
            return ChatResponse.fail(ChatErrorKind.MISSING_PERSONA_ID)

        if request.message is None:
            logger.warning("Chat request without message")
            return ChatResponse.fail(ChatErrorKind.MISSING_MESSAGE)

        message = request.message.strip()
        if not self.validate_message_content(message):
            logger.warning("Rejected message of length {}", len(message))
            return ChatResponse.fail(
                ChatErrorKind.INVALID_MESSAGE_LENGTH,
                invalid_length_message(self.chat_config.max_message_length),
            )

        filtered_message = self.content_filter.filter(message)
        if not filtered_message:
            logger.warning("Message rejected after content filtering")
            return ChatResponse.fail(ChatErrorKind.INAPPROPRIATE_CONTENT)
        if filtered_message != message:
            logger.info("Masked sensitive content in message")

        persona = self.persona_repository.get_by_id(persona_id)
        if persona is None:
            logger.warning("Persona not found: {}", persona_id)
            return ChatResponse.fail(ChatErrorKind.PERSONA_NOT_FOUND)

        cached_reply = self.response_cache.lookup(filtered_message)
        if cached_reply is not None:
            logger.info("Answering persona {} from the common response cache", persona_id)
            return ChatResponse.ok(ChatTurn.from_character(cached_reply))

        history = limit_history(request.history, self.chat_config.max_history_size)
        prompt = self.prompt_builder.build_prompt(persona, history, filtered_message)

        logger.info("Calling completion client for persona {}", persona.name)
        reply = self._complete(prompt)
        logger.info("Chat request processed for persona {}", persona_id)
        return ChatResponse.ok(ChatTurn.from_character(reply))

    def _complete(self, prompt: str) -> str:
        """Ask the model for a reply, substituting an apology on failure."""
        try:
            reply = self.completion_client.complete(prompt)
        except CompletionError as exc:
            logger.warning("Completion failed, answering with apology: {}", exc)
            return APOLOGY_REPLY
        except Exception:
            logger.exception("Completion client raised unexpectedly, answering with apology")
            return APOLOGY_REPLY

        if not isinstance(reply, str) or not reply.strip():
            logger.warning("Completion client returned an unusable reply ({!r}), answering with apology", reply)
            return APOLOGY_REPLY
        return reply

    def validate_message_content(self, content: str | None) -> bool:
        return validate_message_content(content, self.chat_config.max_message_length)

    @staticmethod
    def format_message_timestamp(timestamp: datetime) -> str:
        return format_message_timestamp(timestamp)


@lru_cache()
def get_chat_service() -> ChatService:
    """Dependency injector for ChatService instances.

    FastAPI will call this function to obtain a singleton
    ChatService wired with the default persona catalogue and the
    configured completion client.
    """
    return ChatService(
        persona_repository=get_persona_repository(),
        completion_client=get_completion_client(),
        chat_config=get_chat_config(),
    )
