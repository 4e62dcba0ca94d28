from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from langchain_core.runnables import RunnableConfig

from langgraph_memchat.common import DEFAULT_CLIENT_ID


@dataclass(slots=True, frozen=True)
class TurnConfig:
    """Per-invocation settings read from ``config["configurable"]``.

    Recognized keys are ``clientId``, ``model`` and ``systemPrompt``. ``thread_id``
    is left to the checkpointer.
    """

    client_id: str = DEFAULT_CLIENT_ID
    model: str | None = None
    system_prompt: str | None = None

    @classmethod
    def from_runnable_config(cls, config: RunnableConfig | None = None) -> TurnConfig:
        configurable: dict[str, Any] = (config or {}).get("configurable") or {}
        return cls(
            client_id=configurable.get("clientId") or DEFAULT_CLIENT_ID,
            model=configurable.get("model") or None,
            system_prompt=configurable.get("systemPrompt"),
        )
