from __future__ import annotations

from types import SimpleNamespace

import pytest
from langchain_core.messages import HumanMessage

from persona_chat.config import llm_config as llm_config_module
from persona_chat.config.llm_config import LlmConfig
from persona_chat.services import llm_service
from persona_chat.services.llm_service import (
    EchoCompletionClient,
    OpenAICompletionClient,
    get_completion_client,
)
from persona_chat.utils.error_handler import CompletionError


class FakeChatModel:
    def __init__(self, content=None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.received = None

    def invoke(self, messages):
        self.received = messages
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=self.content)


def make_client(fake: FakeChatModel) -> OpenAICompletionClient:
    client = OpenAICompletionClient(LlmConfig(LLM_API_KEY="test-key"))
    client._llm = fake
    return client


def test_complete_sends_prompt_as_single_human_message() -> None:
    fake = FakeChatModel(content="  Time is relative.  ")

    reply = make_client(fake).complete("user: Tell me about relativity")

    assert reply == "Time is relative."
    assert len(fake.received) == 1
    assert isinstance(fake.received[0], HumanMessage)
    assert fake.received[0].content == "user: Tell me about relativity"


@pytest.mark.parametrize(
    "fake",
    [
        FakeChatModel(error=TimeoutError("read timed out")),
        FakeChatModel(error=RuntimeError("rate limited")),
        FakeChatModel(content=""),
        FakeChatModel(content="   "),
        FakeChatModel(content=[{"type": "text", "text": "hi"}]),
    ],
)
def test_provider_failures_raise_completion_error(fake: FakeChatModel) -> None:
    with pytest.raises(CompletionError):
        make_client(fake).complete("prompt")


def test_missing_api_key_raises_completion_error() -> None:
    client = OpenAICompletionClient(LlmConfig(LLM_API_KEY=None))

    with pytest.raises(CompletionError, match="LLM_API_KEY"):
        client.complete("prompt")


def test_client_forwards_tuning_parameters() -> None:
    config = LlmConfig(
        LLM_API_KEY="test-key",
        LLM_BASE_URL="https://api.deepseek.com",
        LLM_MAX_TOKENS=256,
        LLM_TIMEOUT=12,
    )

    client = OpenAICompletionClient(config)

    assert client._llm_kwargs["base_url"] == "https://api.deepseek.com"
    assert client._llm_kwargs["max_tokens"] == 256
    assert client._llm_kwargs["timeout"] == 12
    assert client._llm_kwargs["max_retries"] == 0


def test_echo_client_repeats_last_user_line() -> None:
    reply = EchoCompletionClient().complete("system block\n\nuser: Tell me about relativity")

    assert reply == "(offline) You said: Tell me about relativity"


def test_factory_selects_client_by_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    llm_config_module.get_llm_config.cache_clear()
    get_completion_client.cache_clear()
    try:
        monkeypatch.setenv("LLM_PROVIDER", "mock")
        assert isinstance(get_completion_client(), EchoCompletionClient)

        llm_config_module.get_llm_config.cache_clear()
        get_completion_client.cache_clear()
        monkeypatch.setenv("LLM_PROVIDER", "openai")
        assert isinstance(get_completion_client(), llm_service.OpenAICompletionClient)
    finally:
        llm_config_module.get_llm_config.cache_clear()
        get_completion_client.cache_clear()
