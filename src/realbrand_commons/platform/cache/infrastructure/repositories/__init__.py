"""Cache tier repositories."""

from .memory_cache_repository import MemoryCache, create_memory_cache
from .redis_cache_repository import (
    HEALTH_CHECK_KEY,
    TRANSPORT_ERRORS,
    RedisCacheRepository,
    create_redis_cache_repository,
)

__all__ = [
    "HEALTH_CHECK_KEY",
    "TRANSPORT_ERRORS",
    "MemoryCache",
    "RedisCacheRepository",
    "create_memory_cache",
    "create_redis_cache_repository",
]
