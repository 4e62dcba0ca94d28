from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import cache

from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.checkpoint.memory import MemorySaver
from langgraph.store.base import BaseStore
from langgraph.store.memory import InMemoryStore

logger = logging.getLogger(__name__)

# Connection strings whose tables have already been created in this process
_initialized: set[str] = set()


@cache
def in_memory_persistence() -> tuple[BaseCheckpointSaver, BaseStore]:
    """Process-wide checkpointer and store; both are lost on restart."""
    return MemorySaver(), InMemoryStore()


@asynccontextmanager
async def open_persistence(database_url: str | None = None) -> AsyncIterator[tuple[BaseCheckpointSaver, BaseStore]]:
    """Open the checkpointer and store for the configured mode.

    Without a connection string this yields the in-memory pair. With one, both
    are the async Postgres implementations, so graphs using them must run
    through ``ainvoke``/``astream``. Tables are created the first time a given
    connection string is opened.
    """
    if not database_url:
        logger.info("DATABASE_URL not set, using in-memory checkpointer and store")
        yield in_memory_persistence()
        return

    from langgraph.checkpoint.postgres.aio import AsyncPostgresSaver
    from langgraph.store.postgres.aio import AsyncPostgresStore

    async with AsyncPostgresSaver.from_conn_string(database_url) as checkpointer:
        async with AsyncPostgresStore.from_conn_string(database_url) as store:
            if database_url not in _initialized:
                await checkpointer.setup()
                await store.setup()
                _initialized.add(database_url)
                logger.info("Postgres checkpointer and store ready")

            yield checkpointer, store
