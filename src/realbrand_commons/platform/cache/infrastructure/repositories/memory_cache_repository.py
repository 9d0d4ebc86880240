"""Memory cache repository.

ONLY in-memory implementation - bounded, recency-ordered key/value store
used as the in-process tier of the hybrid cache.
"""

import logging
import sys
import time
from collections import OrderedDict
from typing import Any, Callable, Dict, Optional

from .....core.exceptions import CacheConfigurationError
from ...core.entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)

EvictionCallback = Callable[[str, Any], None]

_MISSING = object()


def _estimate_entry_size(key: str, value: Any) -> int:
    """Rough byte estimate of one entry (key + value + entry overhead)."""
    try:
        value_size = sys.getsizeof(value)
    except TypeError:
        value_size = 100
    return sys.getsizeof(key) + value_size + 200


class MemoryCache:
    """Bounded LRU map with per-entry TTL and lookup metrics.

    Features:
    - Capacity ceiling by item count, least-recently-used evicted first
    - Per-entry TTL, expired entries dropped lazily on access
    - Hit/miss/eviction counters and running average lookup time
    - Eviction notification callback

    All operations are synchronous and perform no I/O, so under a single
    event loop they are atomic with respect to each other.
    """

    def __init__(
        self,
        max_entries: int = 1000,
        default_ttl_seconds: Optional[float] = None,
        on_evict: Optional[EvictionCallback] = None,
    ):
        """Initialize memory cache.

        Args:
            max_entries: Maximum number of entries before eviction
            default_ttl_seconds: TTL applied when ``set`` gets none; None
                means entries never expire
            on_evict: Called with ``(key, value)`` for every capacity eviction

        Raises:
            CacheConfigurationError: Non-positive capacity or TTL
        """
        if max_entries <= 0:
            raise CacheConfigurationError(
                "max_entries must be positive",
                details={"max_entries": max_entries},
            )
        if default_ttl_seconds is not None and default_ttl_seconds <= 0:
            raise CacheConfigurationError(
                "default_ttl_seconds must be positive or None",
                details={"default_ttl_seconds": default_ttl_seconds},
            )

        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._sizes: Dict[str, int] = {}
        self._max_entries = max_entries
        self._default_ttl = default_ttl_seconds
        self._on_evict = on_evict

        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "deletes": 0,
            "evictions": 0,
            "expirations": 0,
            "total_lookup_time_ms": 0.0,
            "total_memory_bytes": 0,
        }

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def default_ttl_seconds(self) -> Optional[float]:
        return self._default_ttl

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by key.

        Refreshes recency on hit. Returns ``default`` when the key is
        absent or expired.
        """
        start_time = time.perf_counter()
        try:
            entry = self._entries.get(key)

            if entry is not None and entry.is_expired():
                self._remove(key)
                self._stats["expirations"] += 1
                entry = None

            if entry is None:
                self._stats["misses"] += 1
                return default

            entry.touch()
            self._entries.move_to_end(key)
            self._stats["hits"] += 1
            return entry.value
        finally:
            self._stats["total_lookup_time_ms"] += (time.perf_counter() - start_time) * 1000

    def peek(self, key: str, default: Any = None) -> Any:
        """Get value without touching recency order or counters."""
        entry = self._entries.get(key)
        if entry is None or entry.is_expired():
            return default
        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        """Insert or replace an entry, evicting the LRU entry when full."""
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl

        if key in self._entries:
            self._remove(key)
        else:
            while len(self._entries) >= self._max_entries:
                self._evict_one()

        self._entries[key] = CacheEntry.create(key, value, ttl)
        size = _estimate_entry_size(key, value)
        self._sizes[key] = size
        self._stats["total_memory_bytes"] += size
        self._stats["sets"] += 1

    def delete(self, key: str) -> bool:
        """Delete entry, returning whether it existed."""
        if key not in self._entries:
            return False
        self._remove(key)
        self._stats["deletes"] += 1
        return True

    def clear(self) -> None:
        """Drop every entry. Counters are kept."""
        self._entries.clear()
        self._sizes.clear()
        self._stats["total_memory_bytes"] = 0

    def size(self) -> int:
        """Number of stored entries, including not-yet-collected expired ones."""
        return len(self._entries)

    def cleanup_expired(self) -> int:
        """Remove all expired entries, returning how many were removed."""
        now = time.monotonic()
        expired_keys = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired_keys:
            self._remove(key)
        self._stats["expirations"] += len(expired_keys)
        return len(expired_keys)

    def keys(self):
        """Keys in recency order, least recently used first."""
        return list(self._entries.keys())

    def metrics(self) -> Dict[str, Any]:
        """Get lookup metrics.

        ``hit_rate`` is 0.0 until the first lookup.
        """
        lookups = self._stats["hits"] + self._stats["misses"]
        return {
            "hits": self._stats["hits"],
            "misses": self._stats["misses"],
            "hit_rate": self._stats["hits"] / lookups if lookups else 0.0,
            "memory_usage": self._stats["total_memory_bytes"],
            "evictions": self._stats["evictions"],
            "expirations": self._stats["expirations"],
            "average_response_time": self._stats["total_lookup_time_ms"] / lookups if lookups else 0.0,
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get full statistics including write counters."""
        return {
            **self.metrics(),
            "sets": self._stats["sets"],
            "deletes": self._stats["deletes"],
            "total_keys": len(self._entries),
            "max_entries": self._max_entries,
            "eviction_policy": "lru",
        }

    def _remove(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.pop(key, None)
        self._stats["total_memory_bytes"] -= self._sizes.pop(key, 0)
        return entry

    def _evict_one(self) -> None:
        key, entry = next(iter(self._entries.items()))
        self._remove(key)
        self._stats["evictions"] += 1

        if self._on_evict is not None:
            try:
                self._on_evict(key, entry.value)
            except Exception as e:
                logger.error(f"Error in eviction callback for {key}: {e}")

    def __contains__(self, key: str) -> bool:
        return self.peek(key, _MISSING) is not _MISSING

    def __len__(self) -> int:
        return len(self._entries)


# Factory function for dependency injection
def create_memory_cache(
    max_entries: int = 1000,
    default_ttl_seconds: Optional[float] = None,
    on_evict: Optional[EvictionCallback] = None,
) -> MemoryCache:
    """Create memory cache with configuration."""
    return MemoryCache(
        max_entries=max_entries,
        default_ttl_seconds=default_ttl_seconds,
        on_evict=on_evict,
    )
