from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from src.extraction.completion import CompletionConfig


# Groq speaks the OpenAI chat-completions protocol
GROQ_BASE_URL = "https://api.groq.com/openai/v1"

DEFAULT_MODELS = {
    "openai": "llama-3.3-70b-versatile",
    "anthropic": "claude-sonnet-4-20250514",
}


class ConfigurationError(RuntimeError):
    """Raised when the process cannot be started with the current settings."""


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # LLM provider
    llm_provider: Literal["openai", "anthropic"] = "openai"
    llm_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("llm_api_key", "groq_api_key"),
    )
    llm_base_url: str | None = None
    llm_model: str | None = None
    llm_timeout_seconds: float = 60.0

    # App config
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3001, validation_alias=AliasChoices("port", "api_port"))
    cors_origins: list[str] = ["*"]
    max_body_bytes: int = 10 * 1024 * 1024
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    def completion_config(self) -> CompletionConfig:
        """Build the explicit provider configuration used by the completion client.

        Raises:
            ConfigurationError: If no provider credential is configured.
        """
        if not self.llm_api_key.strip():
            raise ConfigurationError(
                "LLM_API_KEY (or GROQ_API_KEY) is not set. "
                "Add it to the environment or to a .env file."
            )
        return CompletionConfig(
            provider=self.llm_provider,
            api_key=self.llm_api_key,
            model=self.llm_model or DEFAULT_MODELS[self.llm_provider],
            base_url=self.llm_base_url or _default_base_url(self.llm_provider),
            timeout=self.llm_timeout_seconds,
        )


def _default_base_url(provider: str) -> str | None:
    return GROQ_BASE_URL if provider == "openai" else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]
