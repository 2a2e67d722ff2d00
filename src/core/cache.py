"""Small in-memory cache with TTL expiry and a FIFO size bound.

Entries are stamped with wall-clock milliseconds when first inserted or
refreshed. Expiration is lazy (checked on lookup) plus a periodic full
sweep every `query_overflow` operations. When the cache grows past
`max_entries` the earliest-inserted entry is dropped, regardless of how
recently it was read.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Optional

from core.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_TTL_MILLIS = 30_000
DEFAULT_MAX_ENTRIES = 200
DEFAULT_QUERY_OVERFLOW = 300


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


def _positive_int(name: str, value: int) -> int:
    n = int(value)
    if n <= 0:
        raise ValidationError(f"{name} must be positive")
    return n


@dataclass(slots=True)
class CacheEntry:
    # Value + wall-clock millis of the last insert/refresh
    timestamp: int
    value: str


class ExpiringCache:
    # Insertion-ordered TTL cache; every public method holds self._lock
    def __init__(
        self,
        ttl_millis: int = DEFAULT_TTL_MILLIS,
        *,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        query_overflow: int = DEFAULT_QUERY_OVERFLOW,
    ) -> None:
        self._ttl_millis = _positive_int("ttl_millis", ttl_millis)
        self._max_entries = _positive_int("max_entries", max_entries)
        self._query_overflow = _positive_int("query_overflow", query_overflow)
        self._query_count = 0
        self._store: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()

    @property
    def ttl_millis(self) -> int:
        return self._ttl_millis

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def query_overflow(self) -> int:
        return self._query_overflow

    @property
    def query_count(self) -> int:
        with self._lock:
            return self._query_count

    def get(self, key: str) -> Optional[str]:
        if key is None:
            raise ValidationError("Cache key must not be None")

        with self._lock:
            self._count_query()
            entry = self._live_entry(key, _now_millis())
            return None if entry is None else entry.value

    def put(self, key: str, value: str) -> None:
        if key is None:
            raise ValidationError("Cache key must not be None")
        if value is None:
            raise ValidationError("Cache value must not be None")

        with self._lock:
            self._count_query()
            now = _now_millis()
            entry = self._live_entry(key, now)
            if entry is not None:
                # Refresh in place: insertion position is kept
                entry.timestamp = now
                entry.value = value
                return

            self._store[key] = CacheEntry(timestamp=now, value=value)
            if len(self._store) > self._max_entries:
                evicted, _ = self._store.popitem(last=False)
                logger.debug("Evicted oldest cache entry %r (max_entries=%d)", evicted, self._max_entries)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def keys(self) -> List[str]:
        """Snapshot of the stored keys in insertion order.

        Does not check expiration; stale keys are listed until a lookup
        or sweep removes them.
        """
        with self._lock:
            return list(self._store)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    # The helpers below assume self._lock is held.

    def _count_query(self) -> None:
        self._query_count += 1
        if self._query_count >= self._query_overflow:
            self._sweep()

    def _live_entry(self, key: str, now: int) -> Optional[CacheEntry]:
        entry = self._store.get(key)
        if entry is None:
            return None

        # A negative delta means the clock went backwards: treat as expired
        delta = now - entry.timestamp
        if delta < 0 or delta >= self._ttl_millis:
            del self._store[key]
            return None
        return entry

    def _sweep(self) -> None:
        before = len(self._store)
        now = _now_millis()
        for key in list(self._store):
            self._live_entry(key, now)
        self._query_count = 0

        removed = before - len(self._store)
        if removed:
            logger.debug("Swept %d expired cache entries, %d remain", removed, len(self._store))
