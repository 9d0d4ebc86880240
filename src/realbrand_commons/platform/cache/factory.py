"""Hybrid cache wiring.

ONLY construction and application wiring - builds the coordinator and its
Redis client from configuration and attaches it to a FastAPI app. There is
no module-level cache instance; every application builds its own at
startup and hands it to consumers through ``app.state``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import redis.asyncio as redis
from fastapi import FastAPI

from .application.services.hybrid_cache import HybridCache
from .core.protocols.remote_cache_client import RemoteCacheClient
from .infrastructure.configuration.cache_config import HybridCacheConfig
from .infrastructure.repositories.memory_cache_repository import MemoryCache

logger = logging.getLogger(__name__)


def create_redis_client(config: HybridCacheConfig) -> RemoteCacheClient:
    """Create an async Redis client from the remote tier settings."""
    return redis.from_url(
        config.remote.endpoint,
        **config.remote.get_connection_params()
    )


def create_hybrid_cache(
    config: Optional[HybridCacheConfig] = None,
    redis_client: Optional[RemoteCacheClient] = None,
    memory: Optional[MemoryCache] = None,
) -> HybridCache:
    """Create a hybrid cache.

    Args:
        config: Cache configuration, read from the environment when omitted
        redis_client: Existing async Redis client; built from
            ``config.remote`` when omitted
        memory: Shared in-process tier, fresh one when omitted
    """
    if config is None:
        config = HybridCacheConfig.from_environment()
    if redis_client is None:
        redis_client = create_redis_client(config)

    cache = HybridCache(config=config, memory=memory, redis_client=redis_client)
    logger.info(
        f"Hybrid cache created: policy={config.write_policy.value}, "
        f"namespace={config.remote.namespace}, "
        f"fallback={config.fallback_on_remote_error}"
    )
    return cache


def setup_cache(app: FastAPI, cache: HybridCache) -> HybridCache:
    """Attach a cache to ``app.state.cache`` and register its shutdown.

    The close is appended to ``app.state.shutdown_tasks`` for lifespans that
    drain that list; apps without one can use ``cache_lifespan`` instead.
    """
    app.state.cache = cache

    shutdown_tasks = getattr(app.state, "shutdown_tasks", None)
    if shutdown_tasks is None:
        shutdown_tasks = []
        app.state.shutdown_tasks = shutdown_tasks
    shutdown_tasks.append(cache.close)
    return cache


@asynccontextmanager
async def cache_lifespan(
    app: FastAPI,
    config: Optional[HybridCacheConfig] = None,
    redis_client: Optional[RemoteCacheClient] = None,
) -> AsyncIterator[HybridCache]:
    """Build a cache for the lifetime of an app, then drain and close it.

    Usage:
        @asynccontextmanager
        async def lifespan(app: FastAPI):
            async with cache_lifespan(app):
                yield
    """
    cache = create_hybrid_cache(config=config, redis_client=redis_client)
    app.state.cache = cache
    try:
        yield cache
    finally:
        logger.info("Closing hybrid cache")
        await cache.close()
        app.state.cache = None
