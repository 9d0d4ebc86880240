"""Hybrid cache coordinator service.

ONLY tier orchestration - presents one get/set/delete surface over the
in-process tier and the remote tier, applies the configured write policy
and aggregates metrics from both.
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, Optional, Set

from .....core.exceptions import CacheConfigurationError
from ...core.value_objects.cache_metrics import CacheMetricsSnapshot, safe_ratio
from ...core.value_objects.write_policy import WritePolicy
from ...core.protocols.remote_cache_client import RemoteCacheClient
from ...infrastructure.configuration.cache_config import HybridCacheConfig
from ...infrastructure.repositories.memory_cache_repository import MemoryCache
from ...infrastructure.repositories.redis_cache_repository import (
    TRANSPORT_ERRORS,
    RedisCacheRepository,
)
from ..commands.warm_cache import WarmCacheInput, iter_warm_entries

logger = logging.getLogger(__name__)

_MISSING = object()


class HybridCache:
    """Two-tier cache: bounded in-process LRU in front of a shared Redis.

    Write policies:

    - write-through: in-process tier, then the remote write is awaited.
      If the remote write raises, the in-process copy is dropped before
      the error propagates so the local tier never runs ahead of Redis.
    - write-behind: in-process tier, then the remote write is detached.
      The payload is encoded before detaching so serialization errors
      still reach the caller. Detached writes to the same key may land in
      any order.
    - write-around: remote only; any in-process copy of the key is dropped.

    With ``fallback_on_remote_error`` on (the default), remote transport
    failures degrade to misses and no-op writes. With it off they
    propagate. Serialization errors always propagate.

    No retries, timeouts or cancellation are applied here; callers that
    need a deadline wrap calls in ``asyncio.wait_for``.
    """

    def __init__(
        self,
        config: Optional[HybridCacheConfig] = None,
        remote: Optional[RedisCacheRepository] = None,
        memory: Optional[MemoryCache] = None,
        redis_client: Optional[RemoteCacheClient] = None,
    ):
        """Initialize hybrid cache.

        Args:
            config: Cache configuration, defaults when omitted
            remote: Remote tier repository; built from ``redis_client`` if
                omitted
            memory: In-process tier to use. Pass the same instance to
                several coordinators to share one in-process tier.
            redis_client: Async Redis client for the remote tier

        Raises:
            CacheConfigurationError: Invalid configuration or missing tier
        """
        self._config = config if config is not None else HybridCacheConfig()
        self._policy = WritePolicy.parse(self._config.write_policy)
        self._fallback = self._config.fallback_on_remote_error

        if remote is None:
            if redis_client is None:
                raise CacheConfigurationError(
                    "HybridCache needs a remote repository or a Redis client"
                )
            remote = RedisCacheRepository(
                redis_client=redis_client,
                namespace=self._config.remote.namespace,
                default_ttl_seconds=self._config.remote.default_ttl_seconds,
                raise_errors=not self._fallback,
            )
        elif remote.raise_errors == self._fallback:
            raise CacheConfigurationError(
                "Remote repository error mode contradicts fallback_on_remote_error",
                details={
                    "fallback_on_remote_error": self._fallback,
                    "raise_errors": remote.raise_errors,
                },
            )
        self._remote = remote

        if memory is None:
            memory = MemoryCache(
                max_entries=self._config.memory.max_entries,
                default_ttl_seconds=self._config.memory.default_ttl_seconds,
            )
        self._memory = memory

        self._counters = {
            "memory_hits": 0,
            "redis_hits": 0,
            "misses": 0,
            "writes": 0,
            "errors": 0,
        }

        self._pending: Set[asyncio.Task] = set()
        max_pending = self._config.max_pending_writes
        self._write_slots = asyncio.Semaphore(max_pending) if max_pending else None

    @property
    def config(self) -> HybridCacheConfig:
        return self._config

    @property
    def write_policy(self) -> WritePolicy:
        return self._policy

    @property
    def fallback_enabled(self) -> bool:
        return self._fallback

    @property
    def memory(self) -> MemoryCache:
        return self._memory

    @property
    def remote(self) -> RedisCacheRepository:
        return self._remote

    @property
    def pending_writes(self) -> int:
        """Detached write-behind writes not yet finished."""
        return len(self._pending)

    async def get(self, key: str) -> Optional[Any]:
        """Get value, reading through to Redis on an in-process miss.

        Every call counts exactly one memory hit, redis hit or miss.
        """
        value = self._memory.get(key, _MISSING)
        if value is not _MISSING:
            self._counters["memory_hits"] += 1
            return value

        try:
            value = await self._remote.get(key)
        except Exception as e:
            self._counters["misses"] += 1
            self._record_failure(e)
            raise

        if value is not None:
            self._memory.set(key, value)
            self._counters["redis_hits"] += 1
            return value

        self._counters["misses"] += 1
        return None

    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        """Write value under the configured policy.

        None is the miss marker and cannot be stored; use ``delete``.

        Raises:
            ValueError: value is None or ttl_seconds is not positive
            CacheSerializationError: value cannot be encoded for Redis
        """
        if value is None:
            raise ValueError(f"Cannot cache None for key {key!r}; use delete() instead")
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive for key {key!r}, got {ttl_seconds}")

        self._counters["writes"] += 1
        payload = self._remote.serialize(value)

        if self._policy is WritePolicy.WRITE_THROUGH:
            await self._write_through(key, value, payload, ttl_seconds)
        elif self._policy is WritePolicy.WRITE_BEHIND:
            await self._write_behind(key, value, payload, ttl_seconds)
        else:
            await self._write_around(key, payload, ttl_seconds)

    async def _write_through(self, key: str, value: Any, payload: str, ttl_seconds: Optional[int]) -> None:
        self._memory.set(key, value, self._memory_ttl(ttl_seconds))

        try:
            stored = await self._remote.set_serialized(key, payload, ttl_seconds)
        except Exception as e:
            self._memory.delete(key)
            self._record_failure(e)
            raise

        if not stored:
            logger.warning(f"Redis write-through failed for {key}; value kept in memory only")

    async def _write_behind(self, key: str, value: Any, payload: str, ttl_seconds: Optional[int]) -> None:
        self._memory.set(key, value, self._memory_ttl(ttl_seconds))

        if self._write_slots is not None:
            if self._write_slots.locked():
                logger.warning(
                    f"Write-behind queue full ({self.pending_writes} pending); waiting for a slot"
                )
            await self._write_slots.acquire()

        task = asyncio.create_task(self._remote.set_serialized(key, payload, ttl_seconds))
        self._pending.add(task)
        task.add_done_callback(self._on_write_behind_done)

    def _on_write_behind_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if self._write_slots is not None:
            self._write_slots.release()

        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._record_failure(exc)
            logger.error(f"Redis write-behind error: {exc}")

    async def _write_around(self, key: str, payload: str, ttl_seconds: Optional[int]) -> None:
        try:
            await self._remote.set_serialized(key, payload, ttl_seconds)
        except Exception as e:
            self._record_failure(e)
            raise
        finally:
            self._memory.delete(key)

    async def delete(self, key: str) -> None:
        """Delete key from both tiers.

        A write-behind write for the same key still in flight may land
        afterwards.
        """
        self._memory.delete(key)

        try:
            await self._remote.delete(key)
        except Exception as e:
            self._record_failure(e)
            raise

    async def invalidate_pattern(self, pattern: str) -> None:
        """Invalidate keys matching a glob pattern.

        The in-process tier cannot pattern-match cheaply, so it is cleared
        entirely; unrelated keys do not survive locally. Redis only loses
        the matching keys.
        """
        self._memory.clear()

        try:
            deleted = await self._remote.flush(pattern)
        except Exception as e:
            self._record_failure(e)
            raise

        logger.info(f"Invalidated pattern {pattern!r}: {deleted} remote keys removed")

    async def warm_cache(self, entries: Iterable[WarmCacheInput]) -> None:
        """Sequentially ``set`` each entry under the configured policy.

        There is no rollback: an error part-way leaves the earlier entries
        warmed and propagates.
        """
        items = list(entries)
        logger.info(f"Warming cache with {len(items)} items")

        for entry in iter_warm_entries(items):
            await self.set(entry.key, entry.value, entry.ttl_seconds)

        logger.info("Cache warming completed")

    def metrics(self) -> CacheMetricsSnapshot:
        """Merge in-process tier metrics with coordinator counters."""
        memory_metrics = self._memory.metrics()
        hits = self._counters["memory_hits"] + self._counters["redis_hits"]
        misses = self._counters["misses"]

        return CacheMetricsSnapshot(
            hits=hits,
            misses=misses,
            hit_rate=safe_ratio(hits, hits + misses),
            memory_usage=memory_metrics["memory_usage"],
            evictions=memory_metrics["evictions"],
            average_response_time=memory_metrics["average_response_time"],
            memory_hits=self._counters["memory_hits"],
            redis_hits=self._counters["redis_hits"],
            writes=self._counters["writes"],
            errors=self._counters["errors"] + self._remote.error_count,
            pending_writes=self.pending_writes,
        )

    async def health_check(self) -> Dict[str, bool]:
        """Liveness probe of both tiers."""
        memory = self._memory.size() >= 0
        redis = await self._remote.probe()
        return {"memory": memory, "redis": redis}

    async def flush_pending(self) -> None:
        """Wait for every detached write-behind write to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def close(self) -> None:
        """Drain pending writes and close the Redis client."""
        await self.flush_pending()
        await self._remote.close()

    def _memory_ttl(self, ttl_seconds: Optional[int]) -> Optional[float]:
        # The in-process copy never outlives the remote one
        if ttl_seconds is None:
            return None
        default = self._memory.default_ttl_seconds
        return min(ttl_seconds, default) if default is not None else ttl_seconds

    def _record_failure(self, error: BaseException) -> None:
        # Transport errors are already counted by the remote repository
        if not isinstance(error, TRANSPORT_ERRORS):
            self._counters["errors"] += 1

