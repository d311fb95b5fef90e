from functools import lru_cache
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class AppConfig(BaseSettings):
    """Application configuration settings."""

    # Environment
    app_env: str = Field("development")
    app_debug: bool = Field(False)
    app_host: str = Field("0.0.0.0")
    app_port: int = Field(8080)

    # Logging
    log_level: str = Field("INFO")
    log_file: Optional[str] = Field(None)

    # HTTP
    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])
    api_prefix: str = Field("")

    @field_validator("app_env")
    def validate_app_env(cls, value: str) -> str:
        if value not in ["development", "staging", "production"]:
            raise ValueError("APP_ENV must be development, staging, or production")
        return value

    @field_validator("log_level")
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be a valid Loguru level")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, list):
            return value
        if not value:
            return []
        return [part.strip() for part in value.split(",") if part.strip()]

    @field_validator("api_prefix")
    def validate_api_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            raise ValueError("API_PREFIX must start with '/'")
        return value

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache()
def get_app_config() -> AppConfig:
    """Return a cached application configuration instance."""

    return AppConfig()
