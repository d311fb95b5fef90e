from __future__ import annotations

import pytest
from pydantic import ValidationError

from persona_chat.models import ChatErrorKind, ChatRequest, ChatResponse, ChatTurn, MessageSender


def test_chat_request_accepts_camel_case_and_legacy_names() -> None:
    current = ChatRequest.model_validate(
        {"personaId": "einstein", "message": "hi", "history": [{"text": "a", "sender": "user"}]}
    )
    legacy = ChatRequest.model_validate(
        {"characterId": "einstein", "message": "hi", "messageHistory": [{"text": "a", "sender": "user"}]}
    )

    assert current == legacy
    assert current.persona_id == "einstein"
    assert current.history[0].sender is MessageSender.USER


def test_chat_request_fields_are_optional() -> None:
    empty = ChatRequest.model_validate({})

    assert empty.persona_id is None
    assert empty.message is None
    assert empty.history is None


def test_chat_turn_accepts_voice_alias_and_serialises_camel_case() -> None:
    turn = ChatTurn.model_validate(
        {"id": "1", "text": "hi", "sender": "character", "timestamp": "2024-05-01T12:00:00Z", "voice": True}
    )

    dumped = turn.model_dump(mode="json", by_alias=True)

    assert turn.is_voice is True
    assert dumped["isVoice"] is True
    assert dumped["sender"] == "character"


def test_unknown_sender_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ChatTurn(text="hi", sender="narrator")


def test_success_response_serialises_without_error_kind() -> None:
    response = ChatResponse.ok(ChatTurn.from_character("Time is relative."))

    dumped = response.model_dump(mode="json", by_alias=True)

    assert dumped["success"] is True
    assert dumped["error"] is None
    assert dumped["message"]["text"] == "Time is relative."
    assert "error_kind" not in dumped


def test_failure_response_carries_message_for_kind() -> None:
    response = ChatResponse.fail(ChatErrorKind.PERSONA_NOT_FOUND)

    assert response.success is False
    assert response.message is None
    assert response.error == "persona not found"


@pytest.mark.parametrize(
    "payload",
    [
        {"success": True},
        {"success": True, "message": ChatTurn.from_character("x"), "error": "oops"},
        {"success": False},
        {"success": False, "error": ""},
        {"success": False, "error": "oops", "message": ChatTurn.from_character("x")},
    ],
)
def test_response_requires_exactly_one_of_message_or_error(payload: dict) -> None:
    with pytest.raises(ValidationError):
        ChatResponse(**payload)
