"""Pytest configuration and fixtures for realbrand-commons tests."""

import asyncio
from fnmatch import fnmatchcase
from typing import Any, Dict, List, Optional

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from realbrand_commons.platform.cache import (
    HybridCache,
    HybridCacheConfig,
    MemoryCache,
    MemoryCacheConfig,
    RemoteCacheConfig,
)


class FakeRedis:
    """In-memory stand-in for ``redis.asyncio.Redis``.

    Set ``fail`` to make every call raise ``redis.exceptions.ConnectionError``.
    ``set_delays`` holds per-call sleep times consumed by successive ``set``
    calls, to force detached writes to land out of order.
    """

    def __init__(self):
        self.store: Dict[str, Any] = {}
        self.ttls: Dict[str, Optional[int]] = {}
        self.fail = False
        self.closed = False
        self.calls: List[str] = []
        self.set_delays: List[float] = []

    def _call(self, operation: str) -> None:
        self.calls.append(operation)
        if self.fail:
            raise RedisConnectionError("Error 111 connecting to localhost:6379. Connection refused.")

    async def get(self, name: str) -> Optional[Any]:
        self._call("get")
        return self.store.get(name)

    async def set(self, name: str, value: Any, ex: Optional[int] = None) -> bool:
        self._call("set")
        if self.set_delays:
            await asyncio.sleep(self.set_delays.pop(0))
        self.store[name] = value
        self.ttls[name] = ex
        return True

    async def delete(self, *names: str) -> int:
        self._call("delete")
        deleted = 0
        for name in names:
            if name in self.store:
                del self.store[name]
                self.ttls.pop(name, None)
                deleted += 1
        return deleted

    async def exists(self, *names: str) -> int:
        self._call("exists")
        return sum(1 for name in names if name in self.store)

    async def keys(self, pattern: str = "*") -> List[str]:
        self._call("keys")
        return [name for name in self.store if fnmatchcase(name, pattern)]

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_redis():
    """Healthy in-memory Redis double."""
    return FakeRedis()


@pytest.fixture
def cache_config_factory():
    """Build a test configuration under the ``test`` namespace."""
    def _create(
        write_policy: str = "write-through",
        fallback: bool = True,
        max_entries: int = 1000,
        memory_ttl_seconds: Optional[float] = None,
        max_pending_writes: Optional[int] = None,
    ) -> HybridCacheConfig:
        return HybridCacheConfig(
            remote=RemoteCacheConfig(namespace="test", default_ttl_seconds=3600),
            memory=MemoryCacheConfig(
                max_entries=max_entries,
                default_ttl_seconds=memory_ttl_seconds,
            ),
            write_policy=write_policy,
            fallback_on_remote_error=fallback,
            max_pending_writes=max_pending_writes,
        )
    return _create


@pytest.fixture
def make_cache(fake_redis, cache_config_factory):
    """Build a hybrid cache over the shared ``fake_redis``."""
    def _create(memory: Optional[MemoryCache] = None, **config_kwargs) -> HybridCache:
        return HybridCache(
            config=cache_config_factory(**config_kwargs),
            redis_client=fake_redis,
            memory=memory,
        )
    return _create


@pytest.fixture
def cache(make_cache):
    """Write-through cache with fallback enabled."""
    return make_cache()
