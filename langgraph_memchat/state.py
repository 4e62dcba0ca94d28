from typing import Annotated

from langgraph.graph import MessagesState

from langgraph_memchat.profiles import Profile


def keep_latest(current: Profile | None, update: Profile | None) -> Profile | None:
    """Last-write-wins reducer that ignores empty updates."""
    return update if update is not None else current


class ConversationState(MessagesState):
    """Graph state: append-only message history plus the client's profile, if fetched."""

    profile: Annotated[Profile | None, keep_latest]
