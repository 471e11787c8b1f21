"""Tests for Settings and the explicit provider configuration."""

from __future__ import annotations

import pytest

from src.config import DEFAULT_MODELS, GROQ_BASE_URL, ConfigurationError, Settings
from src.extraction.completion import CompletionConfig


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[arg-type]


class TestSettingsDefaults:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("LLM_PROVIDER", "LLM_MODEL", "LLM_BASE_URL", "PORT", "API_PORT"):
            monkeypatch.delenv(name, raising=False)
        cfg = _settings()
        assert cfg.llm_provider == "openai"
        assert cfg.llm_model is None
        assert cfg.api_port == 3001
        assert cfg.max_body_bytes == 10 * 1024 * 1024
        assert cfg.cors_origins == ["*"]

    def test_groq_key_alias(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Deployments configured with GROQ_API_KEY keep working."""
        monkeypatch.delenv("LLM_API_KEY", raising=False)
        monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
        assert _settings().llm_api_key == "gsk-test"

    def test_port_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        assert _settings().api_port == 8080

    def test_invalid_provider_rejected(self) -> None:
        with pytest.raises(ValueError):
            _settings(llm_provider="cohere")


# ---------------------------------------------------------------------------
# completion_config
# ---------------------------------------------------------------------------


class TestCompletionConfig:
    def test_missing_key_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            _settings(llm_api_key="").completion_config()

    def test_blank_key_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            _settings(llm_api_key="   ").completion_config()

    def test_openai_provider_defaults_to_groq(self) -> None:
        cfg = _settings(llm_api_key="k", llm_provider="openai", llm_base_url=None).completion_config()
        assert isinstance(cfg, CompletionConfig)
        assert cfg.base_url == GROQ_BASE_URL
        assert cfg.api_key == "k"

    def test_anthropic_provider_uses_sdk_default_url(self) -> None:
        cfg = _settings(
            llm_api_key="k", llm_provider="anthropic", llm_base_url=None
        ).completion_config()
        assert cfg.provider == "anthropic"
        assert cfg.base_url is None

    def test_openai_provider_defaults_to_llama(self) -> None:
        cfg = _settings(llm_api_key="k", llm_provider="openai", llm_model=None).completion_config()
        assert cfg.model == "llama-3.3-70b-versatile"

    def test_anthropic_provider_defaults_to_claude(self) -> None:
        cfg = _settings(
            llm_api_key="k", llm_provider="anthropic", llm_model=None
        ).completion_config()
        assert cfg.model == DEFAULT_MODELS["anthropic"]
        assert cfg.model.startswith("claude-")

    def test_explicit_model_wins(self) -> None:
        cfg = _settings(
            llm_api_key="k", llm_provider="anthropic", llm_model="claude-3-5-haiku-latest"
        ).completion_config()
        assert cfg.model == "claude-3-5-haiku-latest"

    def test_explicit_base_url_wins(self) -> None:
        cfg = _settings(
            llm_api_key="k", llm_base_url="https://api.openai.com/v1"
        ).completion_config()
        assert cfg.base_url == "https://api.openai.com/v1"

    def test_repr_hides_api_key(self) -> None:
        cfg = _settings(llm_api_key="super-secret").completion_config()
        assert "super-secret" not in repr(cfg)

    def test_immutable(self) -> None:
        cfg = _settings(llm_api_key="k").completion_config()
        with pytest.raises(AttributeError):
            cfg.model = "other"  # type: ignore[misc]
