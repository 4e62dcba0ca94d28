from __future__ import annotations

import logging

from langgraph.store.base import BaseStore, SearchItem

from langgraph_memchat.common.result import BestEffort

from .models import MemoryItem, memory_key

logger = logging.getLogger(__name__)

MEMORY_NAMESPACE = ("memories",)
RECALL_LIMIT = 10


class ClientMemory:
    """Client-scoped memories on top of an optional LangGraph store.

    Every store call is best effort: a missing store or a store error yields an
    empty result instead of an exception. The ``a``-prefixed methods go through
    the store's async interface and are the ones to use under ``ainvoke``.
    """

    def __init__(
        self,
        store: BaseStore | None,
        *,
        base_namespace: tuple[str, ...] = MEMORY_NAMESPACE,
        limit: int = RECALL_LIMIT,
    ) -> None:
        self._store = store
        self.base_namespace = base_namespace
        self.limit = limit

    @property
    def available(self) -> bool:
        return self._store is not None

    def namespace(self, client_id: str) -> tuple[str, ...]:
        return self.base_namespace + (client_id,)

    def recall(self, client_id: str) -> BestEffort[list[MemoryItem]]:
        if self._store is None:
            return BestEffort.skipped([])

        namespace = self.namespace(client_id)
        try:
            results = self._store.search(namespace, limit=self.limit)
        except Exception as e:
            return self._recall_failed(namespace, e)
        return self._recalled(namespace, results)

    async def arecall(self, client_id: str) -> BestEffort[list[MemoryItem]]:
        if self._store is None:
            return BestEffort.skipped([])

        namespace = self.namespace(client_id)
        try:
            results = await self._store.asearch(namespace, limit=self.limit)
        except Exception as e:
            return self._recall_failed(namespace, e)
        return self._recalled(namespace, results)

    def remember(self, client_id: str, item: MemoryItem, *, key: str | None = None) -> BestEffort[str | None]:
        if self._store is None:
            return BestEffort.skipped(None)

        namespace = self.namespace(client_id)
        key = key or memory_key()
        try:
            self._store.put(namespace, key, item.as_value())
        except Exception as e:
            return self._write_failed(namespace, key, e)
        return self._written(namespace, key)

    async def aremember(self, client_id: str, item: MemoryItem, *, key: str | None = None) -> BestEffort[str | None]:
        if self._store is None:
            return BestEffort.skipped(None)

        namespace = self.namespace(client_id)
        key = key or memory_key()
        try:
            await self._store.aput(namespace, key, item.as_value())
        except Exception as e:
            return self._write_failed(namespace, key, e)
        return self._written(namespace, key)

    def _recalled(self, namespace: tuple[str, ...], results: list[SearchItem]) -> BestEffort[list[MemoryItem]]:
        items = [item for item in (MemoryItem.from_value(r.value) for r in results) if item is not None]
        logger.debug(f"Recalled {len(items)} memories from {namespace}")

        if not items:
            return BestEffort.empty(items)
        return BestEffort.ok(items)

    def _recall_failed(self, namespace: tuple[str, ...], error: Exception) -> BestEffort[list[MemoryItem]]:
        logger.warning(f"Memory search failed for namespace {namespace}: {error}", exc_info=True)
        return BestEffort.failed([], error)

    def _written(self, namespace: tuple[str, ...], key: str) -> BestEffort[str | None]:
        logger.info(f"Stored memory {key} in {namespace}")
        return BestEffort.ok(key)

    def _write_failed(self, namespace: tuple[str, ...], key: str, error: Exception) -> BestEffort[str | None]:
        logger.warning(f"Memory write {key} failed for namespace {namespace}: {error}", exc_info=True)
        return BestEffort.failed(None, error)
