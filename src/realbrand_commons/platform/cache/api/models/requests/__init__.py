"""Cache API request models.

One request model per file.
"""

from .invalidate_request import InvalidateRequest
from .warm_cache_request import WarmCacheEntryModel, WarmCacheRequest

__all__ = [
    "InvalidateRequest",
    "WarmCacheEntryModel",
    "WarmCacheRequest",
]
