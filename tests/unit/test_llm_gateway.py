from __future__ import annotations

import pytest
from langchain_openai import ChatOpenAI

from langgraph_memchat.common import ConfigurationError
from langgraph_memchat.common.settings import Settings
from langgraph_memchat.llm.gateway import (
    DEFAULT_MODEL,
    LMStudioGateway,
    OpenRouterGateway,
    _CachingGateway,
    create_gateway,
)


class TestOpenRouterGateway:
    @pytest.fixture
    def gateway(self):
        return OpenRouterGateway(api_key="sk-test", base_url="https://openrouter.ai/api/v1")

    def test_missing_api_key_fails_at_construction(self):
        with pytest.raises(ConfigurationError, match="OPENROUTER_API_KEY"):
            OpenRouterGateway(api_key=None, base_url="https://openrouter.ai/api/v1")

    def test_hardcoded_fallback_model(self, gateway):
        model = gateway.get_chat_model()

        assert isinstance(model, ChatOpenAI)
        assert model.model_name == DEFAULT_MODEL == "google/gemini-2.5-flash-lite"
        assert model.openai_api_base == "https://openrouter.ai/api/v1"

    def test_process_default_model(self):
        gateway = OpenRouterGateway(api_key="sk-test", base_url="https://openrouter.ai/api/v1", default_model="openai/gpt-4o")
        assert gateway.get_chat_model().model_name == "openai/gpt-4o"

    def test_explicit_override_wins(self):
        gateway = OpenRouterGateway(api_key="sk-test", base_url="https://openrouter.ai/api/v1", default_model="openai/gpt-4o")
        assert gateway.get_chat_model("anthropic/claude-3.5-sonnet").model_name == "anthropic/claude-3.5-sonnet"

    def test_models_cached_per_name(self, gateway):
        assert gateway.get_chat_model() is gateway.get_chat_model(DEFAULT_MODEL)
        assert gateway.get_chat_model("a/b") is not gateway.get_chat_model("c/d")


class TestCreateGateway:
    def test_openrouter_by_default(self):
        gateway = create_gateway(Settings(openrouter_api_key="sk-test"))
        assert isinstance(gateway, OpenRouterGateway)

    def test_openrouter_without_key_is_fatal(self):
        with pytest.raises(ConfigurationError):
            create_gateway(Settings())

    def test_lmstudio_needs_no_key(self):
        gateway = create_gateway(Settings(llm_provider="lmstudio", lmstudio_base_url="http://localhost:1234/v1"))

        assert isinstance(gateway, LMStudioGateway)
        assert gateway.get_chat_model("local-model").openai_api_base == "http://localhost:1234/v1"

    def test_unknown_provider(self):
        with pytest.raises(ConfigurationError, match="Unknown LLM_PROVIDER"):
            create_gateway(Settings(llm_provider="carrier-pigeon"))


class TestCachingGateway:
    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="_create"):
            _CachingGateway()

    def test_subclass_must_implement_create(self):
        class Incomplete(_CachingGateway):
            pass

        with pytest.raises(TypeError):
            Incomplete()
