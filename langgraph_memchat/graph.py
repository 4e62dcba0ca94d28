"""Graph factory for the conversation workflow: START -> fetch_profile -> conversation -> END."""

from typing import Optional

from langchain_core.runnables import RunnableConfig
from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.graph import END, START, StateGraph
from langgraph.store.base import BaseStore

from langgraph_memchat.nodes.conversation import aconversation_node, conversation_node
from langgraph_memchat.nodes.profile_fetch import aprofile_fetch_node, profile_fetch_node
from langgraph_memchat.services import Services
from langgraph_memchat.state import ConversationState


def create_graph(
    services: Services,
    *,
    checkpoint: Optional[BaseCheckpointSaver] = None,
    store: Optional[BaseStore] = None,
    use_async: bool = False,
):
    """
    Build and compile the conversation graph.

    Args:
        services: Collaborators bound into every node
        checkpoint: Optional checkpointer for thread-scoped message history
        store: Optional store for client-scoped memories
        use_async: Build coroutine nodes that await the store and LLM. Such a
            graph only runs through ``ainvoke``/``astream``, which is what async
            checkpointers and stores (e.g. the Postgres ones) require.

    Returns:
        Compiled graph ready for invocation
    """

    def fetch_profile(state: ConversationState, config: RunnableConfig):
        return profile_fetch_node(state, config, profiles=services.profiles)

    def conversation(state: ConversationState, config: RunnableConfig, *, store: BaseStore):
        return conversation_node(state, config, store=store, services=services)

    async def afetch_profile(state: ConversationState, config: RunnableConfig):
        return await aprofile_fetch_node(state, config, profiles=services.profiles)

    async def aconversation(state: ConversationState, config: RunnableConfig, *, store: BaseStore):
        return await aconversation_node(state, config, store=store, services=services)

    workflow = StateGraph(ConversationState)
    workflow.add_node("fetch_profile", afetch_profile if use_async else fetch_profile)
    workflow.add_node("conversation", aconversation if use_async else conversation)
    workflow.add_edge(START, "fetch_profile")
    workflow.add_edge("fetch_profile", "conversation")
    workflow.add_edge("conversation", END)
    return workflow.compile(checkpointer=checkpoint, store=store)
