"""Cache API models.

Request and response models.
"""

from .requests import *
from .responses import *

__all__ = [
    # Request Models
    "InvalidateRequest",
    "WarmCacheEntryModel",
    "WarmCacheRequest",

    # Response Models
    "CacheHealthResponse",
    "HealthStatus",
    "resolve_health_status",
    "CacheMetricsResponse",
    "OperationResponse",
]
