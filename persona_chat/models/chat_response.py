"""Response model for the chat API."""

from pydantic import BaseModel, Field, model_validator

from .chat_message import ChatTurn
from .enums import ChatErrorKind


class ChatResponse(BaseModel):
    """Outcome of one chat request.

    Either ``success`` is true and ``message`` holds the persona's reply,
    or ``success`` is false and ``error`` explains why.  Exactly one of
    the two is ever populated.  ``error_kind`` is kept for the HTTP layer
    to pick a status code and is never serialised.
    """

    success: bool
    message: ChatTurn | None = None
    error: str | None = None
    error_kind: ChatErrorKind | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _check_exclusive(self) -> "ChatResponse":
        if self.success:
            if self.message is None or self.error is not None:
                raise ValueError("a successful response carries a message and no error")
        elif self.message is not None or not self.error:
            raise ValueError("a failed response carries an error and no message")
        return self

    @classmethod
    def ok(cls, message: ChatTurn) -> "ChatResponse":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, kind: ChatErrorKind, error: str | None = None) -> "ChatResponse":
        """Build a failure for ``kind``, optionally overriding its default text."""
        return cls(success=False, error=error or kind.message, error_kind=kind)
