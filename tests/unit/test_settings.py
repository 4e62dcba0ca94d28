from __future__ import annotations

from typing import get_args, get_type_hints

import pytest

from langgraph_memchat.common.settings import (
    DEFAULT_LMSTUDIO_BASE_URL,
    DEFAULT_OPENROUTER_BASE_URL,
    DEFAULT_PROFILE_API_URL,
    LLMProvider,
    Settings,
)

ENV_VARS = [
    "LLM_PROVIDER",
    "OPENROUTER_API_KEY",
    "OPENROUTER_BASE_URL",
    "LMSTUDIO_BASE_URL",
    "MODEL_NAME",
    "SYSTEM_PROMPT",
    "DATABASE_URL",
    "USE_MOCK_PROFILES",
    "PROFILE_API_URL",
    "PROFILE_API_TOKEN",
    "LOG_LEVEL",
]


class TestSettingsFromEnv:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        settings = Settings.from_env()

        assert settings.llm_provider == "openrouter"
        assert settings.openrouter_api_key is None
        assert settings.openrouter_base_url == DEFAULT_OPENROUTER_BASE_URL
        assert settings.lmstudio_base_url == DEFAULT_LMSTUDIO_BASE_URL
        assert settings.model_name is None
        assert settings.system_prompt is None
        assert settings.database_url is None
        assert not settings.durable
        assert settings.use_mock_profiles
        assert settings.profile_api_url == DEFAULT_PROFILE_API_URL
        assert settings.log_level == "INFO"

    def test_values_from_env(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "LMStudio")
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
        monkeypatch.setenv("MODEL_NAME", "openai/gpt-4o")
        monkeypatch.setenv("SYSTEM_PROMPT", "Be kind.")
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/memchat")
        monkeypatch.setenv("USE_MOCK_PROFILES", "FALSE")
        monkeypatch.setenv("PROFILE_API_TOKEN", "token")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.llm_provider == "lmstudio"
        assert settings.openrouter_api_key == "sk-test"
        assert settings.model_name == "openai/gpt-4o"
        assert settings.system_prompt == "Be kind."
        assert settings.durable
        assert not settings.use_mock_profiles
        assert settings.profile_api_token == "token"
        assert settings.log_level == "DEBUG"

    def test_empty_values_count_as_unset(self, monkeypatch):
        monkeypatch.setenv("OPENROUTER_API_KEY", "")
        monkeypatch.setenv("DATABASE_URL", "")
        monkeypatch.setenv("OPENROUTER_BASE_URL", "")

        settings = Settings.from_env()

        assert settings.openrouter_api_key is None
        assert settings.database_url is None
        assert settings.openrouter_base_url == DEFAULT_OPENROUTER_BASE_URL


class TestSettingsTypes:
    def test_llm_provider_typed_as_provider_literal(self):
        hint = get_type_hints(Settings)["llm_provider"]

        assert hint == LLMProvider
        assert set(get_args(hint)) == {"openrouter", "lmstudio"}
