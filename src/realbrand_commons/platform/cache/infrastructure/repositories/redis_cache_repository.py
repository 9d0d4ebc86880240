"""Redis cache repository implementation.

ONLY Redis implementation - namespaced key/value operations against the
remote tier with per-call transport error isolation.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional, TypeVar

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from ...core.protocols.cache_serializer import CacheSerializer
from ...core.protocols.remote_cache_client import RemoteCacheClient
from ..serializers.json_serializer import JSONCacheSerializer

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors that mean "the remote tier is unreachable". Command errors such as
# ResponseError and data problems always propagate.
TRANSPORT_ERRORS = (RedisConnectionError, RedisTimeoutError, OSError, asyncio.TimeoutError)

HEALTH_CHECK_KEY = "health-check-key"


class RedisCacheRepository:
    """Redis cache repository implementation.

    Every key is sent as ``"<namespace>:<key>"`` and the prefix is stripped
    from returned key lists. A transport failure is logged, counted and
    turned into a safe default (``None``, ``False``, ``[]``, ``0``) unless
    ``raise_errors`` is set, in which case the original exception
    propagates unchanged. A miss and a swallowed transport error therefore
    look identical from ``get``; ``error_count`` in ``get_stats()`` tells
    them apart.
    """

    def __init__(
        self,
        redis_client: RemoteCacheClient,
        namespace: str = "realbrand",
        default_ttl_seconds: Optional[int] = 3600,
        serializer: Optional[CacheSerializer] = None,
        raise_errors: bool = False,
    ):
        """Initialize Redis cache repository.

        Args:
            redis_client: Async Redis client (``redis.asyncio.Redis``)
            namespace: Prefix scoping every key
            default_ttl_seconds: TTL used when ``set`` gets none
            serializer: Value codec, JSON by default
            raise_errors: Propagate transport errors instead of swallowing
        """
        self._redis_client = redis_client
        self._namespace = namespace
        self._prefix = f"{namespace}:"
        self._default_ttl = default_ttl_seconds
        self._serializer = serializer if serializer is not None else JSONCacheSerializer()
        self._raise_errors = raise_errors

        self._stats = {
            "get_count": 0,
            "set_count": 0,
            "delete_count": 0,
            "hit_count": 0,
            "miss_count": 0,
            "error_count": 0,
        }

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def raise_errors(self) -> bool:
        return self._raise_errors

    @property
    def client(self) -> RemoteCacheClient:
        return self._redis_client

    @property
    def error_count(self) -> int:
        return self._stats["error_count"]

    def _build_redis_key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def _strip_prefix(self, redis_key: Any) -> str:
        if isinstance(redis_key, bytes):
            redis_key = redis_key.decode("utf-8")
        if redis_key.startswith(self._prefix):
            return redis_key[len(self._prefix):]
        return redis_key

    async def _guard(
        self,
        operation: str,
        key: str,
        call: Callable[[], Awaitable[T]],
        default: T,
    ) -> T:
        """Run one remote call, isolating transport errors."""
        try:
            return await call()
        except TRANSPORT_ERRORS as e:
            self._stats["error_count"] += 1
            logger.error(f"Redis {operation} error for {self._build_redis_key(key)}: {e}")
            if self._raise_errors:
                raise
            return default

    def serialize(self, value: Any) -> str:
        """Encode a value for the remote tier.

        Raises:
            CacheSerializationError: Value cannot be encoded
        """
        return self._serializer.serialize(value)

    async def get(self, key: str) -> Optional[Any]:
        """Get value by key, None on miss or swallowed transport error.

        Raises:
            CacheSerializationError: Stored payload cannot be decoded
        """
        self._stats["get_count"] += 1
        redis_key = self._build_redis_key(key)

        payload = await self._guard("get", key, lambda: self._redis_client.get(redis_key), None)
        if payload is None:
            self._stats["miss_count"] += 1
            return None

        value = self._serializer.deserialize(payload)
        if value is None:
            self._stats["miss_count"] += 1
        else:
            self._stats["hit_count"] += 1
        return value

    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> bool:
        """Set value, returning False when a transport error was swallowed.

        Raises:
            CacheSerializationError: Value cannot be encoded
        """
        return await self.set_serialized(key, self.serialize(value), ttl_seconds)

    async def set_serialized(self, key: str, payload: str, ttl_seconds: Optional[int] = None) -> bool:
        """Store an already-encoded payload.

        Raises:
            ValueError: ttl_seconds is not positive
        """
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._stats["set_count"] += 1
        redis_key = self._build_redis_key(key)
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl

        async def _set() -> bool:
            await self._redis_client.set(redis_key, payload, ex=ttl)
            return True

        return await self._guard("set", key, _set, False)

    async def delete(self, key: str) -> bool:
        """Delete key, returning whether it existed."""
        self._stats["delete_count"] += 1
        redis_key = self._build_redis_key(key)

        async def _delete() -> bool:
            return (await self._redis_client.delete(redis_key)) > 0

        return await self._guard("delete", key, _delete, False)

    async def exists(self, key: str) -> bool:
        """Check if key exists."""
        redis_key = self._build_redis_key(key)

        async def _exists() -> bool:
            return (await self._redis_client.exists(redis_key)) > 0

        return await self._guard("exists", key, _exists, False)

    async def keys(self, pattern: str = "*") -> List[str]:
        """List keys in the namespace matching a glob pattern (prefix stripped)."""
        redis_pattern = self._build_redis_key(pattern)

        async def _keys() -> List[str]:
            return [self._strip_prefix(k) for k in await self._redis_client.keys(redis_pattern)]

        return await self._guard("keys", pattern, _keys, [])

    async def flush(self, pattern: Optional[str] = None) -> int:
        """Delete keys matching pattern, or the whole namespace when omitted.

        Only keys under this repository's namespace are ever touched.
        """
        redis_pattern = self._build_redis_key(pattern if pattern else "*")

        async def _flush() -> int:
            redis_keys = await self._redis_client.keys(redis_pattern)
            if not redis_keys:
                return 0
            return await self._redis_client.delete(*redis_keys)

        return await self._guard("flush", pattern or "*", _flush, 0)

    async def probe(self) -> bool:
        """Liveness probe: True when a trivial ``exists`` call does not raise."""
        try:
            await self._redis_client.exists(self._build_redis_key(HEALTH_CHECK_KEY))
            return True
        except Exception as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close the underlying client if it supports closing."""
        close = getattr(self._redis_client, "aclose", None) or getattr(self._redis_client, "close", None)
        if close is not None:
            await close()

    def get_stats(self) -> dict:
        """Get operation counters."""
        get_count = self._stats["get_count"]
        return {
            "repository_type": "redis",
            "namespace": self._namespace,
            **self._stats,
            "hit_rate": self._stats["hit_count"] / get_count if get_count else 0.0,
        }


def create_redis_cache_repository(
    redis_client: RemoteCacheClient,
    namespace: str = "realbrand",
    default_ttl_seconds: Optional[int] = 3600,
    serializer: Optional[CacheSerializer] = None,
    raise_errors: bool = False,
) -> RedisCacheRepository:
    """Create Redis cache repository with dependencies."""
    return RedisCacheRepository(
        redis_client=redis_client,
        namespace=namespace,
        default_ttl_seconds=default_ttl_seconds,
        serializer=serializer,
        raise_errors=raise_errors,
    )
