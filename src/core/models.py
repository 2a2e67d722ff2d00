"""Immutable settings shared by the canonicalization caches.

CacheSettings bundles the ExpiringCache tunables so one configured value
can be handed to every cache a canonicalizer creates.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.cache import DEFAULT_MAX_ENTRIES, DEFAULT_QUERY_OVERFLOW, DEFAULT_TTL_MILLIS, ExpiringCache


@dataclass(frozen=True)
class CacheSettings:
    """Tunables for an ExpiringCache.

    - ttl_millis: age after which an entry is treated as absent.
    - max_entries: FIFO size bound.
    - query_overflow: operations between full expiration sweeps.
    """

    ttl_millis: int = DEFAULT_TTL_MILLIS
    max_entries: int = DEFAULT_MAX_ENTRIES
    query_overflow: int = DEFAULT_QUERY_OVERFLOW

    def new_cache(self) -> ExpiringCache:
        return ExpiringCache(
            self.ttl_millis,
            max_entries=self.max_entries,
            query_overflow=self.query_overflow,
        )
