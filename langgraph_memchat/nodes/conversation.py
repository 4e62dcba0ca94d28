import logging

from langchain_core.messages import AnyMessage, SystemMessage
from langchain_core.runnables import RunnableConfig
from langgraph.store.base import BaseStore

from langgraph_memchat.common.result import BestEffort
from langgraph_memchat.configuration import TurnConfig
from langgraph_memchat.memory import ClientMemory, MemoryItem, format_memories
from langgraph_memchat.prompt import build_system_message, get_system_prompt
from langgraph_memchat.services import Services
from langgraph_memchat.state import ConversationState

logger = logging.getLogger(__name__)


def conversation_node(
    state: ConversationState, config: RunnableConfig, *, store: BaseStore | None, services: Services
) -> dict:
    """Produce one assistant reply for the conversation so far.

    The node follows this flow:
    1. Resolves the chat model and client id from the runnable config
    2. Recalls the client's memories from the store, if one is configured
    3. Builds the system message from instruction, profile and memories
    4. Invokes the LLM with the system message followed by the conversation
    5. Stores the last incoming message when the write policy asks for it

    Only the LLM call may raise; memory failures degrade to an empty context.

    Args:
        state: Current ConversationState
        config: Runnable configuration carrying clientId, model and systemPrompt
        store: Long-term store, or None to run without client memory
        services: Shared collaborators

    Returns:
        Dictionary with the single reply message to append
    """
    turn = TurnConfig.from_runnable_config(config)
    llm = services.llm.get_chat_model(turn.model)
    memory = ClientMemory(store)
    messages = state["messages"]

    recalled = memory.recall(turn.client_id)
    system_message = _system_message(state, turn, services, recalled)

    response = llm.invoke([system_message, *messages])

    item = _memory_to_write(memory, services, messages, turn.client_id)
    if item is not None:
        memory.remember(turn.client_id, item)

    return {"messages": [response]}


async def aconversation_node(
    state: ConversationState, config: RunnableConfig, *, store: BaseStore | None, services: Services
) -> dict:
    """Async counterpart of ``conversation_node``; store and LLM are awaited."""
    turn = TurnConfig.from_runnable_config(config)
    llm = services.llm.get_chat_model(turn.model)
    memory = ClientMemory(store)
    messages = state["messages"]

    recalled = await memory.arecall(turn.client_id)
    system_message = _system_message(state, turn, services, recalled)

    response = await llm.ainvoke([system_message, *messages])

    item = _memory_to_write(memory, services, messages, turn.client_id)
    if item is not None:
        await memory.aremember(turn.client_id, item)

    return {"messages": [response]}


def _system_message(
    state: ConversationState, turn: TurnConfig, services: Services, recalled: BestEffort[list[MemoryItem]]
) -> SystemMessage:
    if recalled.degraded:
        logger.debug(f"Continuing without memories for {turn.client_id!r} ({recalled.outcome.value})")

    return build_system_message(
        get_system_prompt(turn.system_prompt, services.system_prompt),
        profile=state.get("profile"),
        memories=format_memories(recalled.value),
    )


def _memory_to_write(
    memory: ClientMemory, services: Services, messages: list[AnyMessage], client_id: str
) -> MemoryItem | None:
    if not memory.available:
        return None

    last_message = messages[-1] if messages else None
    item = services.write_policy.decide(last_message)
    if item is None:
        logger.debug(f"Write policy declined the last message for {client_id!r}, nothing stored")
    return item
