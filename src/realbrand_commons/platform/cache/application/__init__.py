"""Cache application layer.

Commands and the services that orchestrate the cache tiers.
"""

from .commands import *
from .services import *

__all__ = [
    # Commands
    "WarmCacheEntry",
    "WarmCacheInput",
    "iter_warm_entries",

    # Services
    "HybridCache",
    "build_cache_key",
    "cached",
]
