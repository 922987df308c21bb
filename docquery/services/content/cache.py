"""Time-bounded in-memory cache of fetched documents, keyed by source id."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, Dict, Optional

from loguru import logger

from docquery.services.content.models import CacheEntry

DEFAULT_TTL_SECONDS = 5 * 60

FetchFn = Callable[[str], Awaitable[str]]


class DocumentCache:
    """Holds the latest text per source id and decides fetch vs reuse.

    A failed refresh raises and leaves the previous entry in place. Concurrent
    misses on the same source id share a single fetch.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def _fresh(self, source_id: str) -> Optional[CacheEntry]:
        entry = self._entries.get(source_id)
        if entry is not None and self._clock() - entry.fetched_at < self.ttl_seconds:
            return entry
        return None

    async def get(self, source_id: str, fetch_fn: FetchFn) -> str:
        entry = self._fresh(source_id)
        if entry is not None:
            logger.debug("cache hit for {}", source_id)
            return entry.text

        lock = self._locks.get(source_id)
        if lock is None:
            lock = self._locks[source_id] = asyncio.Lock()
        async with lock:
            entry = self._fresh(source_id)
            if entry is not None:
                return entry.text
            logger.debug("cache miss for {}", source_id)
            text = await fetch_fn(source_id)
            self._entries[source_id] = CacheEntry(text=text, fetched_at=self._clock())
            return text

    def peek(self, source_id: str) -> Optional[CacheEntry]:
        """Return the stored entry regardless of age."""
        return self._entries.get(source_id)

    def invalidate(self, source_id: str) -> None:
        self._entries.pop(source_id, None)

    def cached_sources(self) -> list[str]:
        return sorted(self._entries)
