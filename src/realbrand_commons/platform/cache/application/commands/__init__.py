"""Cache commands."""

from .warm_cache import WarmCacheEntry, WarmCacheInput, iter_warm_entries

__all__ = ["WarmCacheEntry", "WarmCacheInput", "iter_warm_entries"]
