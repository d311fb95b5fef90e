"""Models representing chat turns."""

from datetime import datetime, timezone
import uuid

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import MessageSender


class ChatTurn(BaseModel):
    """Represents a single turn in a conversation.

    Prior turns are supplied by the client with each request, oldest
    first; the server never stores them.  ``timestamp`` is optional on
    input so that clients may send bare ``{sender, text}`` pairs.
    """

    id: str | None = None
    text: str
    sender: MessageSender
    timestamp: datetime | None = None
    is_voice: bool = Field(
        default=False,
        validation_alias=AliasChoices("isVoice", "is_voice", "voice"),
        serialization_alias="isVoice",
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_character(cls, text: str) -> "ChatTurn":
        """Create a fresh persona reply stamped with the current UTC time."""
        return cls(
            id=f"character-{uuid.uuid4().hex}",
            text=text,
            sender=MessageSender.CHARACTER,
            timestamp=datetime.now(timezone.utc),
            is_voice=False,
        )
