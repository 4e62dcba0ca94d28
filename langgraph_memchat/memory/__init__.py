"""Client-scoped long-term memory: storage adapter and write policies."""

from .adapter import MEMORY_NAMESPACE, RECALL_LIMIT, ClientMemory
from .keyword import KeywordWritePolicy
from .models import MemoryItem, format_memories, memory_key
from .protocol import MemoryWritePolicy

__all__ = [
    "MEMORY_NAMESPACE",
    "RECALL_LIMIT",
    "ClientMemory",
    "KeywordWritePolicy",
    "MemoryItem",
    "MemoryWritePolicy",
    "format_memories",
    "memory_key",
]
