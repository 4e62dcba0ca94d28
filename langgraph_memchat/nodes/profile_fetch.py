import logging

from langchain_core.runnables import RunnableConfig
from langchain_core.runnables.config import run_in_executor

from langgraph_memchat.common.result import BestEffort
from langgraph_memchat.profiles import Profile, ProfileSource
from langgraph_memchat.state import ConversationState

logger = logging.getLogger(__name__)


def lookup_profile(profiles: ProfileSource, client_id: str | None) -> BestEffort[Profile | None]:
    if not client_id:
        return BestEffort.skipped(None)

    try:
        profile = profiles.get_profile(client_id)
    except Exception as e:
        logger.warning(f"Profile lookup failed for {client_id!r}: {e}", exc_info=True)
        return BestEffort.failed(None, e)

    if profile is None:
        return BestEffort.empty(None)
    return BestEffort.ok(profile)


def profile_fetch_node(state: ConversationState, config: RunnableConfig, *, profiles: ProfileSource) -> dict:
    """Load the client's profile into state ahead of the conversation node.

    Never raises: a missing client id, a missing record or a failing source
    all produce an empty update, leaving any previously fetched profile in place.
    """
    result = lookup_profile(profiles, _client_id(config))
    return _profile_update(result)


async def aprofile_fetch_node(state: ConversationState, config: RunnableConfig, *, profiles: ProfileSource) -> dict:
    # Profile sources block, so the lookup runs on the config's executor
    result = await run_in_executor(config, lookup_profile, profiles, _client_id(config))
    return _profile_update(result)


def _client_id(config: RunnableConfig | None) -> str | None:
    return ((config or {}).get("configurable") or {}).get("clientId")


def _profile_update(result: BestEffort[Profile | None]) -> dict:
    if result.value is None:
        return {}
    return {"profile": result.value}
