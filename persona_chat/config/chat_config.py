from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class ChatConfig(BaseSettings):
    """Limits applied by the chat pipeline to every request."""

    max_history_size: int = Field(5)
    max_message_length: int = Field(1000)

    @field_validator("max_history_size")
    def validate_max_history_size(cls, value: int) -> int:
        if value < 0:
            raise ValueError("CHAT_MAX_HISTORY_SIZE must not be negative")
        return value

    @field_validator("max_message_length")
    def validate_max_message_length(cls, value: int) -> int:
        if value < 1:
            raise ValueError("CHAT_MAX_MESSAGE_LENGTH must be at least 1")
        return value

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CHAT_", extra="ignore")


@lru_cache()
def get_chat_config() -> ChatConfig:
    """Return a cached chat pipeline configuration."""

    return ChatConfig()
