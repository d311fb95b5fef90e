"""Input validation predicates shared by the API and the chat pipeline."""

from __future__ import annotations

DEFAULT_MAX_MESSAGE_LENGTH = 1000


def validate_message_content(content: str | None, max_length: int = DEFAULT_MAX_MESSAGE_LENGTH) -> bool:
    """Return True when the trimmed message holds 1 to ``max_length`` characters."""
    if content is None:
        return False
    stripped = content.strip()
    return 0 < len(stripped) <= max_length
