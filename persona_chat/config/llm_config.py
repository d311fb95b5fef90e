from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


SUPPORTED_PROVIDERS = {"openai", "mock"}


class LlmConfig(BaseSettings):
    """Configuration settings for the completion provider.

    Any OpenAI-compatible endpoint can be targeted by setting
    ``LLM_BASE_URL`` (for example DeepSeek at ``https://api.deepseek.com``).
    ``LLM_PROVIDER=mock`` swaps in an offline client for local development.
    """

    provider: str = Field("openai", alias="LLM_PROVIDER")
    api_key: Optional[str] = Field(default=None, alias="LLM_API_KEY")
    base_url: Optional[str] = Field(default=None, alias="LLM_BASE_URL")
    model: str = Field("deepseek-chat", alias="LLM_MODEL")
    temperature: float = Field(0.7, alias="LLM_TEMPERATURE")
    max_tokens: Optional[int] = Field(1000, alias="LLM_MAX_TOKENS")
    timeout: int = Field(30, alias="LLM_TIMEOUT")

    @field_validator("provider")
    def validate_provider(cls, value: str) -> str:
        provider = value.strip().lower()
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(
                "LLM_PROVIDER must be one of: {}".format(", ".join(sorted(SUPPORTED_PROVIDERS)))
            )
        return provider

    @field_validator("temperature")
    def validate_temperature(cls, value: float) -> float:
        if not 0.0 <= value <= 2.0:
            raise ValueError("LLM_TEMPERATURE must be between 0.0 and 2.0")
        return value

    @field_validator("timeout")
    def validate_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("LLM_TIMEOUT must be positive")
        return value

    @field_validator("max_tokens")
    def validate_max_tokens(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("LLM_MAX_TOKENS must be positive")
        return value

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


@lru_cache()
def get_llm_config() -> LlmConfig:
    """Return a cached language model configuration."""

    return LlmConfig()
