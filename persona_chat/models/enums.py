"""Enumerations used across models."""

from enum import Enum


class MessageSender(str, Enum):
    """Who authored a turn in the conversation."""

    USER = "user"
    CHARACTER = "character"


class MessageRole(str, Enum):
    """Enum for message roles in a model prompt.

    History turns written by the persona are rendered as ``ASSISTANT``
    and everything else as ``USER``.  ``SYSTEM`` marks the instruction
    block that precedes the conversation.
    """

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"

    @classmethod
    def for_sender(cls, sender: MessageSender) -> "MessageRole":
        return cls.ASSISTANT if sender == MessageSender.CHARACTER else cls.USER


class ChatErrorKind(str, Enum):
    """Business and internal failures reported by the chat pipeline.

    Provider failures are deliberately absent: they are absorbed by the
    pipeline and answered with an apology instead.
    """

    MISSING_PERSONA_ID = "missing_persona_id"
    MISSING_MESSAGE = "missing_message"
    INVALID_MESSAGE_LENGTH = "invalid_message_length"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    PERSONA_NOT_FOUND = "persona_not_found"
    INTERNAL_FAILURE = "internal_failure"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]

    @property
    def is_client_error(self) -> bool:
        return self is not ChatErrorKind.INTERNAL_FAILURE


def invalid_length_message(max_length: int) -> str:
    return f"message must be between 1 and {max_length} characters"


_ERROR_MESSAGES = {
    ChatErrorKind.MISSING_PERSONA_ID: "persona id required",
    ChatErrorKind.MISSING_MESSAGE: "message required",
    ChatErrorKind.INVALID_MESSAGE_LENGTH: invalid_length_message(1000),
    ChatErrorKind.INAPPROPRIATE_CONTENT: "inappropriate content, please revise",
    ChatErrorKind.PERSONA_NOT_FOUND: "persona not found",
    ChatErrorKind.INTERNAL_FAILURE: "failed to process request, try again later",
}
