from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from langgraph_memchat.common import epoch_millis, iso_timestamp


@dataclass(slots=True, frozen=True)
class MemoryItem:
    """A single durable fact about a client."""

    text: str
    created_at: str

    @classmethod
    def create(cls, text: str, *, now: datetime | None = None) -> MemoryItem:
        return cls(text=text, created_at=iso_timestamp(now))

    @classmethod
    def from_value(cls, value: Any) -> MemoryItem | None:
        """Rebuild an item from a stored value; None if the value carries no text."""
        if not isinstance(value, dict):
            return None
        text = value.get("text")
        if not isinstance(text, str) or not text:
            return None
        return cls(text=text, created_at=str(value.get("createdAt", "")))

    def as_value(self) -> dict[str, str]:
        return {"text": self.text, "createdAt": self.created_at}


def memory_key(now: datetime | None = None) -> str:
    # Two writes for one client in the same millisecond share a key; the later one wins.
    return f"mem_{epoch_millis(now)}"


def format_memories(items: Iterable[MemoryItem]) -> str:
    """Render memories as a bullet list, one ``- `` line per non-empty text."""
    texts = [item.text for item in items if item.text]
    if not texts:
        return ""
    return "- " + "\n- ".join(texts)
