"""Memoization helper over an explicit hybrid cache."""

import functools
import json
import logging
from typing import Any, Callable, Dict, Optional, Tuple

from .hybrid_cache import HybridCache

logger = logging.getLogger(__name__)

KeyBuilder = Callable[..., str]


def build_cache_key(func: Callable, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> str:
    """Default key: ``"<module>.<qualname>:<json args>"``."""
    arguments = json.dumps(
        {"args": list(args), "kwargs": kwargs},
        default=str,
        sort_keys=True,
        separators=(",", ":"),
    )
    return f"{func.__module__}.{func.__qualname__}:{arguments}"


def cached(
    cache: HybridCache,
    ttl_seconds: Optional[int] = 300,
    key_builder: Optional[KeyBuilder] = None,
):
    """Decorator caching the result of an async function.

    Args:
        cache: Coordinator to read and write through
        ttl_seconds: TTL for cached results
        key_builder: Called with the function's ``*args, **kwargs`` to
            derive the key; ``build_cache_key`` when omitted

    ``None`` results are never cached, so a function returning None runs
    on every call.

    Usage:
        @cached(cache, ttl_seconds=600)
        async def load_listing(listing_id: str) -> dict:
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            if key_builder is not None:
                key = key_builder(*args, **kwargs)
            else:
                key = build_cache_key(func, args, kwargs)

            value = await cache.get(key)
            if value is not None:
                return value

            result = await func(*args, **kwargs)
            if result is not None:
                await cache.set(key, result, ttl_seconds)
            else:
                logger.debug(f"Not caching None result for {key}")
            return result

        wrapper.cache = cache
        return wrapper
    return decorator
