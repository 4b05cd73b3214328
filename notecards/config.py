"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Hard ceiling on how many cards one generation may return
FLASHCARD_LIMIT = 7


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./notecards.db"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "notecards API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # AI configuration
    AI_PROVIDER: (
        Literal["ollama"] | Literal["openai"] | Literal["anthropic"] | Literal["google"] | None
    ) = None
    AI_MODEL_NAME: str | None = None

    # ollama
    OPENAI_BASE_URL: str | None = None
    # openai
    OPENAI_API_KEY: str | None = None
    # anthropic
    ANTHROPIC_API_KEY: str | None = None
    # google
    GEMINI_API_KEY: str | None = None

    # Generation request
    AI_REQUEST_TIMEOUT_SECONDS: float = 30.0
    AI_MAX_TOKENS: int = 1000
    AI_TEMPERATURE: float = 0.7
    MIN_FLASHCARDS: int = 3
    MAX_FLASHCARDS: int = FLASHCARD_LIMIT

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ai_enabled(self) -> bool:
        """Whether AI features are enabled."""
        return self.AI_PROVIDER is not None

    @field_validator("MIN_FLASHCARDS", "MAX_FLASHCARDS", mode="after")
    @classmethod
    def validate_flashcard_bounds(cls, value: int) -> int:
        """Keep card counts within what a single generation may return."""
        if not 1 <= value <= FLASHCARD_LIMIT:
            msg = f"Flashcard counts must be between 1 and {FLASHCARD_LIMIT}"
            raise ValueError(msg)
        return value

    @field_validator("AI_REQUEST_TIMEOUT_SECONDS", mode="after")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Reject non-positive provider timeouts."""
        if value <= 0:
            msg = "AI_REQUEST_TIMEOUT_SECONDS must be positive"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def validate_flashcard_range(self) -> "Settings":
        """Validate MIN_FLASHCARDS <= MAX_FLASHCARDS."""
        if self.MIN_FLASHCARDS > self.MAX_FLASHCARDS:
            msg = "MIN_FLASHCARDS cannot be greater than MAX_FLASHCARDS"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_ai_provider_config(self) -> "Settings":
        """Validate AI provider configuration."""
        if self.AI_PROVIDER is not None and self.AI_MODEL_NAME is None:
            msg = f"AI_MODEL_NAME is required when AI_PROVIDER is '{self.AI_PROVIDER}'"
            raise ValueError(msg)

        if self.AI_PROVIDER == "ollama" and not self.OPENAI_BASE_URL:
            msg = "OPENAI_BASE_URL is required when AI_PROVIDER is 'ollama'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            msg = "OPENAI_API_KEY is required when AI_PROVIDER is 'openai'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "anthropic" and not self.ANTHROPIC_API_KEY:
            msg = "ANTHROPIC_API_KEY is required when AI_PROVIDER is 'anthropic'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "google" and not self.GEMINI_API_KEY:
            msg = "GEMINI_API_KEY is required when AI_PROVIDER is 'google'"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
