from __future__ import annotations

from dataclasses import dataclass, field

from langgraph_memchat.common.settings import Settings
from langgraph_memchat.llm.gateway import ChatModelGateway, create_gateway
from langgraph_memchat.memory import KeywordWritePolicy, MemoryWritePolicy
from langgraph_memchat.profiles import ProfileSource, create_profile_source


@dataclass(slots=True)
class Services:
    """Collaborators shared by every node, built once at process start."""

    llm: ChatModelGateway
    profiles: ProfileSource
    write_policy: MemoryWritePolicy = field(default_factory=KeywordWritePolicy)
    system_prompt: str | None = None


def build_services(settings: Settings) -> Services:
    """Build all collaborators from settings.

    Raises:
        ConfigurationError: If a selected provider is missing its credentials
    """
    return Services(
        llm=create_gateway(settings),
        profiles=create_profile_source(settings),
        system_prompt=settings.system_prompt,
    )
