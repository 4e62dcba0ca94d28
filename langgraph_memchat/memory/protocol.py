from typing import Protocol

from langchain_core.messages import BaseMessage

from .models import MemoryItem


class MemoryWritePolicy(Protocol):
    """Protocol for deciding whether a turn should be durably remembered."""

    def decide(self, message: BaseMessage | None) -> MemoryItem | None:
        """Decide what to persist from the latest incoming message.

        Args:
            message: The last message in the conversation before the reply was appended

        Returns:
            The item to store, or None to store nothing
        """
        ...
