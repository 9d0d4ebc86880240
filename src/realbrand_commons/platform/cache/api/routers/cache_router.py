"""Main cache router.

ONLY operator cache operations - metrics, health, invalidation, warming
and single-key deletion over the hybrid cache.
"""

import logging
import time
from typing import NoReturn

from fastapi import APIRouter, HTTPException, status

from .....core.exceptions import (
    CacheConnectionError,
    CacheError,
    create_error_response,
    get_http_status_code,
)
from ...infrastructure.repositories.redis_cache_repository import TRANSPORT_ERRORS
from ..dependencies.cache_dependencies import HybridCacheDependency
from ..models.requests.invalidate_request import InvalidateRequest
from ..models.requests.warm_cache_request import WarmCacheRequest
from ..models.responses.cache_health_response import CacheHealthResponse
from ..models.responses.cache_metrics_response import CacheMetricsResponse
from ..models.responses.operation_response import OperationResponse

logger = logging.getLogger(__name__)


cache_router = APIRouter(
    prefix="/cache",
    tags=["Cache"],
)


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


def _raise_http_error(action: str, error: Exception) -> NoReturn:
    """Translate a cache failure into an HTTP error with the standard body."""
    if isinstance(error, TRANSPORT_ERRORS):
        cache_error = CacheConnectionError(
            f"Redis unavailable: {error}",
            details={"action": action},
        )
    elif isinstance(error, CacheError):
        cache_error = error
    elif isinstance(error, ValueError):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Failed to {action}: {error}"
        ) from error
    else:
        raise error

    logger.error(f"Failed to {action}: {error}")
    raise HTTPException(
        status_code=get_http_status_code(cache_error),
        detail=create_error_response(cache_error)["error"],
    ) from error


@cache_router.get(
    "/metrics",
    response_model=CacheMetricsResponse,
    summary="Get cache metrics",
    description="Merged in-process tier metrics and coordinator counters"
)
async def get_cache_metrics(cache: HybridCacheDependency) -> CacheMetricsResponse:
    """Get cache metrics."""
    return CacheMetricsResponse.from_snapshot(cache.metrics())


@cache_router.get(
    "/health",
    response_model=CacheHealthResponse,
    summary="Check cache health",
    description="Liveness of the in-process and Redis tiers"
)
async def get_cache_health(cache: HybridCacheDependency) -> CacheHealthResponse:
    """Check cache health."""
    return CacheHealthResponse.from_tiers(await cache.health_check())


@cache_router.post(
    "/invalidate",
    response_model=OperationResponse,
    summary="Invalidate by pattern",
    description="Clear the in-process tier and delete matching Redis keys"
)
async def invalidate_cache_pattern(
    request: InvalidateRequest,
    cache: HybridCacheDependency,
) -> OperationResponse:
    """Invalidate cache entries matching a glob pattern."""
    start_time = time.perf_counter()
    try:
        await cache.invalidate_pattern(request.pattern)
    except Exception as e:
        _raise_http_error("invalidate cache pattern", e)

    if request.reason:
        logger.info(f"Cache pattern {request.pattern!r} invalidated: {request.reason}")

    return OperationResponse(
        success=True,
        message="Cache pattern invalidated",
        data={"pattern": request.pattern},
        operation_time_ms=_elapsed_ms(start_time),
    )


@cache_router.post(
    "/warm",
    response_model=OperationResponse,
    summary="Warm cache",
    description="Sequentially set entries under the configured write policy"
)
async def warm_cache(
    request: WarmCacheRequest,
    cache: HybridCacheDependency,
) -> OperationResponse:
    """Warm the cache. A failure part-way leaves earlier entries warmed."""
    start_time = time.perf_counter()
    entries = [entry.model_dump() for entry in request.entries]
    try:
        await cache.warm_cache(entries)
    except Exception as e:
        _raise_http_error("warm cache", e)

    return OperationResponse(
        success=True,
        message="Cache warmed",
        data={"entries": len(entries)},
        operation_time_ms=_elapsed_ms(start_time),
    )


@cache_router.delete(
    "/{key:path}",
    response_model=OperationResponse,
    summary="Delete cache entry",
    description="Remove a key from both tiers"
)
async def delete_cache_entry(key: str, cache: HybridCacheDependency) -> OperationResponse:
    """Delete a cache entry."""
    start_time = time.perf_counter()
    try:
        await cache.delete(key)
    except Exception as e:
        _raise_http_error("delete cache entry", e)

    return OperationResponse(
        success=True,
        message="Cache entry deleted",
        data={"key": key},
        operation_time_ms=_elapsed_ms(start_time),
    )
