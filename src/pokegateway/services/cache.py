"""In-memory TTL cache for upstream catalog results.

This module provides the process-local cache used by the cache-aside
services:
- Per-entry absolute expiry, evaluated lazily on read
- Optional periodic sweep that evicts expired entries nobody reads again
- Deterministic cache key generators

Entries live only as long as the process. There is no size bound and no
eviction other than expiry.

Cache Key Types:
    - list:{offset}:{limit} - A page of the catalog list
    - list-search:{query} - Client-side search results (query lowercased)
    - detail:{id} - A single catalog record
"""

import asyncio
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A stored value and the absolute time at which it stops being visible."""

    value: Any
    expires_at: float


def is_expired(entry: CacheEntry, now: float) -> bool:
    """Return True once ``now`` has reached the entry's expiry.

    An entry is visible strictly before ``expires_at``, so a TTL of zero is
    stale on the very next read.
    """
    return now >= entry.expires_at


class TTLCache:
    """Key-value store with per-entry time-to-live.

    Each individual operation holds an internal lock, so reads never observe
    a half-written entry. No cross-operation atomicity is offered: two
    callers may both miss on a key and both ``set`` it afterwards.

    Usage:
        ```python
        cache = TTLCache()
        cache.set("detail:1", record, ttl_seconds=3600)
        record = cache.get("detail:1")  # None once expired
        ```
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty cache.

        Args:
            clock: Source of the current time in seconds. Defaults to
                ``time.monotonic``; tests pass a controllable clock.
        """
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None if absent or expired.

        Expired entries are deleted as a side effect.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if is_expired(entry, self._clock()):
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store ``value`` under ``key`` for ``ttl_seconds``.

        Any previous entry is overwritten. A zero or negative TTL stores an
        entry that is already stale.
        """
        with self._lock:
            self._entries[key] = CacheEntry(
                value=value, expires_at=self._clock() + ttl_seconds
            )

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def cleanup(self) -> int:
        """Evict all expired entries.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if is_expired(e, now)]
            for key in expired:
                del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._entries.get(key)  # type: ignore[arg-type]
            return entry is not None and not is_expired(entry, self._clock())

    # -------------------------------------------------------------------------
    # Cache Key Generators
    # -------------------------------------------------------------------------

    @staticmethod
    def list_key(offset: int, limit: int) -> str:
        """Generate cache key for a page of the catalog list.

        Returns:
            Cache key (e.g., "list:0:20")
        """
        return f"list:{offset}:{limit}"

    @staticmethod
    def search_key(query: str) -> str:
        """Generate cache key for a search query.

        Same query in any letter case = same key = cache hit.

        Returns:
            Cache key (e.g., "list-search:saur")
        """
        return f"list-search:{query.strip().lower()}"

    @staticmethod
    def detail_key(pokemon_id: int) -> str:
        """Generate cache key for a single record.

        Returns:
            Cache key (e.g., "detail:25")
        """
        return f"detail:{pokemon_id}"


async def run_cleanup_loop(cache: TTLCache, interval_seconds: float) -> None:
    """Sweep expired entries from ``cache`` every ``interval_seconds``.

    Runs until cancelled. Start it from the application lifespan:
        ```python
        task = asyncio.create_task(run_cleanup_loop(cache, 300))
        ...
        task.cancel()
        ```
    """
    while True:
        await asyncio.sleep(interval_seconds)
        removed = cache.cleanup()
        if removed:
            logger.debug("cache_cleanup", removed=removed, remaining=len(cache))
