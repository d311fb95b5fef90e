"""Expose commonly used model classes at the package level.

Importing these classes here allows consumers to write concise imports like::

    from persona_chat.models import ChatRequest, ChatResponse, ChatTurn, Persona

These names refer to the underlying Pydantic models defined in their
respective modules.
"""

from .chat_request import ChatRequest  # noqa: F401
from .chat_response import ChatResponse  # noqa: F401
from .chat_message import ChatTurn  # noqa: F401
from .persona import Persona  # noqa: F401
from .enums import ChatErrorKind, MessageRole, MessageSender  # noqa: F401
