"""
In-memory response cache with per-entry freshness windows.

Entries are keyed by the full (endpoint, params) tuple of a request.
Values are parsed payloads that are never mutated after being stored, so
concurrent writes for the same key are last-writer-wins. The cache holds at
most ``max_entries`` keys and drops the least recently used one beyond that.
"""

import time
from collections import OrderedDict
from threading import Lock
from typing import Any, Callable, Hashable, Optional, Tuple


class ResponseCache:
    """Bounded TTL cache for successful catalog responses."""

    DEFAULT_MAX_ENTRIES = 512

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[Hashable, Tuple[float, Any]]" = OrderedDict()
        self._lock = Lock()

    def get(self, key: Hashable, ttl_seconds: int) -> Optional[Any]:
        """
        Return the cached payload if it is younger than ttl_seconds.

        Args:
            key: Request cache key
            ttl_seconds: Freshness window requested by the caller

        Returns:
            Cached payload or None on miss/stale entry
        """
        if ttl_seconds <= 0:
            return None
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, payload = entry
            if self._clock() - stored_at >= ttl_seconds:
                return None
            self._entries.move_to_end(key)
        return payload

    def set(self, key: Hashable, payload: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock(), payload)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def purge(self, max_age_seconds: int) -> int:
        """Drop entries older than max_age_seconds. Returns the number removed."""
        now = self._clock()
        with self._lock:
            stale = [k for k, (ts, _) in self._entries.items() if now - ts >= max_age_seconds]
            for key in stale:
                del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries
