"""Process-level configuration.

Environment Variables:
    LLM_PROVIDER: "openrouter" or "lmstudio" (default: "openrouter")
    OPENROUTER_API_KEY: Required if using OpenRouter
    OPENROUTER_BASE_URL: OpenRouter endpoint (default: "https://openrouter.ai/api/v1")
    LMSTUDIO_BASE_URL: LMStudio endpoint (default: "http://localhost:1234/v1")
    MODEL_NAME: Default chat model identifier
    SYSTEM_PROMPT: Default base instruction for the assistant

    DATABASE_URL: Postgres connection string; when unset everything stays in process memory

    USE_MOCK_PROFILES: "false" switches to the GraphQL profile source (default: mock)
    PROFILE_API_URL: GraphQL endpoint for profile lookups
    PROFILE_API_TOKEN: Required when USE_MOCK_PROFILES=false

    LOG_LEVEL: Standard logging level name (default: "INFO")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

LLMProvider = Literal["openrouter", "lmstudio"]

DEFAULT_OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_LMSTUDIO_BASE_URL = "http://localhost:1234/v1"
DEFAULT_PROFILE_API_URL = "https://open.semble.io/graphql"


@dataclass(slots=True)
class Settings:
    llm_provider: LLMProvider = "openrouter"
    openrouter_api_key: str | None = None
    openrouter_base_url: str = DEFAULT_OPENROUTER_BASE_URL
    lmstudio_base_url: str = DEFAULT_LMSTUDIO_BASE_URL
    model_name: str | None = None
    system_prompt: str | None = None
    database_url: str | None = None
    use_mock_profiles: bool = True
    profile_api_url: str = DEFAULT_PROFILE_API_URL
    profile_api_token: str | None = None
    log_level: str = "INFO"

    @property
    def durable(self) -> bool:
        return bool(self.database_url)

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            llm_provider=os.getenv("LLM_PROVIDER", "openrouter").lower(),  # type: ignore
            openrouter_api_key=_optional_env("OPENROUTER_API_KEY"),
            openrouter_base_url=os.getenv("OPENROUTER_BASE_URL") or DEFAULT_OPENROUTER_BASE_URL,
            lmstudio_base_url=os.getenv("LMSTUDIO_BASE_URL") or DEFAULT_LMSTUDIO_BASE_URL,
            model_name=_optional_env("MODEL_NAME"),
            system_prompt=_optional_env("SYSTEM_PROMPT"),
            database_url=_optional_env("DATABASE_URL"),
            use_mock_profiles=os.getenv("USE_MOCK_PROFILES", "true").lower() != "false",
            profile_api_url=os.getenv("PROFILE_API_URL") or DEFAULT_PROFILE_API_URL,
            profile_api_token=_optional_env("PROFILE_API_TOKEN"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def _optional_env(name: str) -> str | None:
    # Empty strings count as unset
    return os.getenv(name) or None
