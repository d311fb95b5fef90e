from __future__ import annotations

import sys
from pathlib import Path

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from datetime import datetime, timezone

import pytest

from persona_chat.config.chat_config import ChatConfig
from persona_chat.models import ChatTurn, MessageSender
from persona_chat.repositories.persona_repository import get_persona_repository
from persona_chat.services.chat_service import ChatService


class RecordingCompletionClient:
    """Completion client stub that remembers every prompt it receives."""

    def __init__(self, reply: str = "Time is relative.") -> None:
        self.reply = reply
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


class FailingCompletionClient:
    """Completion client stub that always raises the configured error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def complete(self, prompt: str) -> str:
        self.calls += 1
        raise self.error


def make_turn(index: int, sender: MessageSender) -> ChatTurn:
    return ChatTurn(
        id=f"turn-{index}",
        text=f"turn {index}",
        sender=sender,
        timestamp=datetime(2024, 5, 1, 12, index, tzinfo=timezone.utc),
    )


@pytest.fixture
def history_of():
    """Build an alternating user/character history of the given length."""

    def _build(length: int) -> list[ChatTurn]:
        return [
            make_turn(i, MessageSender.USER if i % 2 == 0 else MessageSender.CHARACTER)
            for i in range(length)
        ]

    return _build


@pytest.fixture
def completion_client() -> RecordingCompletionClient:
    return RecordingCompletionClient()


@pytest.fixture
def chat_config() -> ChatConfig:
    return ChatConfig(max_history_size=5, max_message_length=1000)


@pytest.fixture
def chat_service(completion_client: RecordingCompletionClient, chat_config: ChatConfig) -> ChatService:
    return ChatService(
        persona_repository=get_persona_repository(),
        completion_client=completion_client,
        chat_config=chat_config,
    )
