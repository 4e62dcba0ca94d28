"""Entry point referenced by langgraph.json.

Settings and services are built at import time, so a missing provider
credential fails the process before any turn is served. ``make_graph`` opens
persistence per use and yields a graph with async nodes, as the server runs
graphs through ``ainvoke``/``astream``.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import dotenv
from langchain_core.runnables import RunnableConfig
from langgraph.graph.state import CompiledStateGraph

from langgraph_memchat.common.settings import Settings
from langgraph_memchat.graph import create_graph
from langgraph_memchat.persistence import open_persistence
from langgraph_memchat.services import build_services

dotenv.load_dotenv()

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

services = build_services(settings)


@asynccontextmanager
async def make_graph(config: RunnableConfig) -> AsyncIterator[CompiledStateGraph]:
    async with open_persistence(settings.database_url) as (checkpointer, store):
        yield create_graph(services, checkpoint=checkpointer, store=store, use_async=True)
