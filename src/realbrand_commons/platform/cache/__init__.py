"""Hybrid cache platform.

Two-tier cache for the brand app: a bounded in-process LRU map in front of
a namespaced Redis, with a configurable write policy.

Usage:
    from realbrand_commons.platform.cache import HybridCacheConfig, create_hybrid_cache

    cache = create_hybrid_cache(HybridCacheConfig.from_environment())
    await cache.set("listings:mls-1", listing, ttl_seconds=600)
    listing = await cache.get("listings:mls-1")
"""

from .core import *
from .infrastructure import *
from .application import *
from .factory import cache_lifespan, create_hybrid_cache, create_redis_client, setup_cache

__all__ = [
    # Core
    "CacheEntry",
    "CacheMetricsSnapshot",
    "WritePolicy",
    "safe_ratio",
    "CacheSerializer",
    "RemoteCacheClient",

    # Infrastructure
    "ConfigSource",
    "HybridCacheConfig",
    "MemoryCacheConfig",
    "RemoteCacheConfig",
    "create_cache_config",
    "MemoryCache",
    "RedisCacheRepository",
    "TRANSPORT_ERRORS",
    "create_memory_cache",
    "create_redis_cache_repository",
    "JSONCacheSerializer",
    "create_json_serializer",

    # Application
    "WarmCacheEntry",
    "HybridCache",
    "build_cache_key",
    "cached",

    # Wiring
    "cache_lifespan",
    "create_hybrid_cache",
    "create_redis_client",
    "setup_cache",
]
