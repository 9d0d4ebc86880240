"""Cache application services."""

from .hybrid_cache import HybridCache
from .memoize import build_cache_key, cached

__all__ = [
    "HybridCache",
    "build_cache_key",
    "cached",
]
