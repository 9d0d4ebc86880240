"""Cache configuration."""

from .cache_config import (
    ConfigSource,
    HybridCacheConfig,
    MemoryCacheConfig,
    RemoteCacheConfig,
    create_cache_config,
)

__all__ = [
    "ConfigSource",
    "HybridCacheConfig",
    "MemoryCacheConfig",
    "RemoteCacheConfig",
    "create_cache_config",
]
