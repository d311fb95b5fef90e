"""Request model for the chat API."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .chat_message import ChatTurn


class ChatRequest(BaseModel):
    """Represents a request payload for a chat message.

    ``persona_id`` selects the character to talk to, ``message`` holds the
    user's raw text and ``history`` carries the prior turns the client
    wants the persona to remember.  None of the fields are validated
    here: presence, blankness and length are business rules enforced by
    :class:`~persona_chat.services.chat_service.ChatService` so that a bad
    request still receives a structured ``ChatResponse``.  The legacy
    ``characterId``/``messageHistory`` names are accepted as well.
    """

    persona_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("personaId", "persona_id", "characterId"),
        serialization_alias="personaId",
        description="Identifier of the persona to chat with.",
    )
    message: str | None = Field(
        default=None,
        description="The user's message content.",
    )
    history: list[ChatTurn] | None = Field(
        default=None,
        validation_alias=AliasChoices("history", "messageHistory"),
        description="Prior conversation turns, oldest first.",
    )

    model_config = ConfigDict(populate_by_name=True)
