"""Completion clients used to obtain persona replies.

The chat pipeline only depends on the :class:`CompletionClient`
protocol: a single ``complete(prompt) -> str`` call that may raise.
:class:`OpenAICompletionClient` talks to any OpenAI-compatible endpoint
through LangChain's ChatOpenAI integration; :class:`EchoCompletionClient`
answers offline for local development.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Protocol

from loguru import logger
from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from ..config.llm_config import LlmConfig, get_llm_config
from ..utils.error_handler import CompletionError


class CompletionClient(Protocol):
    """Anything able to turn a prompt into a completion."""

    def complete(self, prompt: str) -> str:
        ...


class OpenAICompletionClient:
    """Completion client backed by LangChain's :class:`ChatOpenAI`.

    The client is built from a single :class:`LlmConfig`.  If a
    ``base_url`` is configured requests go to that endpoint, otherwise to
    the default OpenAI API.  ``temperature``, ``max_tokens`` and
    ``timeout`` are forwarded verbatim to the ChatOpenAI constructor.

    The underlying model is created on first use, so a missing API key
    surfaces as a :class:`CompletionError` from :meth:`complete` rather
    than at start-up.
    """

    def __init__(self, llm_config: LlmConfig | None = None) -> None:
        self.llm_config = llm_config or get_llm_config()

        self._llm_kwargs: dict[str, object] = {
            "api_key": self.llm_config.api_key,
            "model": self.llm_config.model,
            "temperature": self.llm_config.temperature,
            # A failed call is answered once with an apology, never retried.
            "max_retries": 0,
        }
        if self.llm_config.base_url:
            self._llm_kwargs["base_url"] = self.llm_config.base_url
        if self.llm_config.max_tokens:
            self._llm_kwargs["max_tokens"] = self.llm_config.max_tokens
        if self.llm_config.timeout:
            self._llm_kwargs["timeout"] = self.llm_config.timeout

        self._llm: ChatOpenAI | None = None

    @property
    def llm(self) -> ChatOpenAI:
        if self._llm is None:
            if not self.llm_config.api_key:
                raise CompletionError("LLM_API_KEY is not configured")
            self._llm = ChatOpenAI(**self._llm_kwargs)
        return self._llm

    def complete(self, prompt: str) -> str:
        """Send ``prompt`` as a single user message and return the reply text.

        Raises
        ------
        CompletionError
            If the provider call fails or returns no usable text.
        """
        logger.debug("Requesting completion from model={} ({} characters)", self.llm_config.model, len(prompt))
        try:
            response = self.llm.invoke([HumanMessage(content=prompt)])
        except CompletionError:
            raise
        except Exception as exc:
            raise CompletionError(f"Completion request failed: {exc}") from exc

        content = getattr(response, "content", None)
        if not isinstance(content, str):
            raise CompletionError(f"Unexpected completion payload: {type(content).__name__}")
        content = content.strip()
        if not content:
            raise CompletionError("Completion was empty")
        return content


class EchoCompletionClient:
    """Offline client returning a canned in-character acknowledgement."""

    def complete(self, prompt: str) -> str:
        last_line = prompt.rstrip().splitlines()[-1] if prompt.strip() else ""
        user_message = last_line.removeprefix("user: ").strip()
        return f"(offline) You said: {user_message}"


@lru_cache()
def get_completion_client() -> CompletionClient:
    """Return the completion client selected by ``LLM_PROVIDER``."""
    llm_config = get_llm_config()
    if llm_config.provider == "mock":
        logger.warning("Using the offline echo completion client")
        return EchoCompletionClient()
    if llm_config.provider == "openai":
        return OpenAICompletionClient(llm_config)
    raise ValueError(f"Unsupported LLM provider: {llm_config.provider}")
