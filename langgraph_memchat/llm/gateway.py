"""Chat model resolution.

A gateway is built once at process start and hands out ``ChatOpenAI`` instances
per model identifier. Building a chat model performs no network I/O; the first
request happens on ``invoke``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

from langgraph_memchat.common import ConfigurationError
from langgraph_memchat.common.settings import LLMProvider, Settings

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "google/gemini-2.5-flash-lite"


class ChatModelGateway(Protocol):
    def get_chat_model(self, model_name: str | None = None) -> BaseChatModel:
        """Return a chat model for ``model_name``, or for the gateway default when omitted."""
        ...


class _CachingGateway(ABC):
    def __init__(self, *, default_model: str | None = None) -> None:
        self._default_model = default_model
        self._models: dict[str, BaseChatModel] = {}

    def resolve_model_name(self, model_name: str | None = None) -> str:
        return model_name or self._default_model or DEFAULT_MODEL

    def get_chat_model(self, model_name: str | None = None) -> BaseChatModel:
        resolved = self.resolve_model_name(model_name)

        cached = self._models.get(resolved)
        if cached is not None:
            return cached

        logger.debug(f"Creating chat model for {resolved!r}")
        model = self._create(resolved)
        self._models[resolved] = model
        return model

    @abstractmethod
    def _create(self, model_name: str) -> BaseChatModel: ...


class OpenRouterGateway(_CachingGateway):
    """OpenRouter exposes many vendors' models behind one OpenAI-compatible API."""

    def __init__(self, *, api_key: str | None, base_url: str, default_model: str | None = None) -> None:
        if not api_key:
            raise ConfigurationError("OPENROUTER_API_KEY must be set when LLM_PROVIDER=openrouter")
        super().__init__(default_model=default_model)
        self._api_key = api_key
        self._base_url = base_url

    def _create(self, model_name: str) -> BaseChatModel:
        return ChatOpenAI(
            model=model_name,
            api_key=self._api_key,  # type: ignore
            base_url=self._base_url,
        )


class LMStudioGateway(_CachingGateway):
    def __init__(self, *, base_url: str, default_model: str | None = None) -> None:
        super().__init__(default_model=default_model)
        self._base_url = base_url

    def _create(self, model_name: str) -> BaseChatModel:
        return ChatOpenAI(
            model=model_name,
            base_url=self._base_url,
            api_key="lm-studio",  # type: ignore - LMStudio doesn't need a real key
        )


PROVIDERS: tuple[LLMProvider, ...] = ("openrouter", "lmstudio")


def create_gateway(settings: Settings) -> ChatModelGateway:
    provider = settings.llm_provider

    if provider == "openrouter":
        return OpenRouterGateway(
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url,
            default_model=settings.model_name,
        )
    elif provider == "lmstudio":
        return LMStudioGateway(base_url=settings.lmstudio_base_url, default_model=settings.model_name)

    raise ConfigurationError(f"Unknown LLM_PROVIDER {provider!r}, expected one of {', '.join(PROVIDERS)}")
