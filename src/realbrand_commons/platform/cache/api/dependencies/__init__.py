"""Cache API dependencies."""

from .cache_dependencies import HybridCacheDependency, get_hybrid_cache

__all__ = ["HybridCacheDependency", "get_hybrid_cache"]
