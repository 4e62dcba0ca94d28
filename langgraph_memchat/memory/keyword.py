from __future__ import annotations

from datetime import datetime

from langchain_core.messages import BaseMessage, HumanMessage

from .models import MemoryItem


class KeywordWritePolicy:
    """Write policy that stores a user message when it mentions a trigger keyword.

    The whole message is stored verbatim; no attempt is made to extract the fact itself.
    """

    def __init__(self, keyword: str = "remember") -> None:
        self.keyword = keyword.lower()

    def decide(self, message: BaseMessage | None, *, now: datetime | None = None) -> MemoryItem | None:
        if not isinstance(message, HumanMessage):
            return None

        content = message.content
        if not isinstance(content, str):
            return None

        if self.keyword not in content.lower():
            return None

        return MemoryItem.create(content, now=now)
