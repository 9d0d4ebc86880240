"""Cache API layer.

FastAPI router, dependencies and pydantic models exposing the hybrid
cache to operators.
"""

from .dependencies import *
from .models import *
from .routers import *

__all__ = [
    # Dependencies
    "HybridCacheDependency",
    "get_hybrid_cache",

    # Models
    "InvalidateRequest",
    "WarmCacheEntryModel",
    "WarmCacheRequest",
    "CacheHealthResponse",
    "HealthStatus",
    "resolve_health_status",
    "CacheMetricsResponse",
    "OperationResponse",

    # Routers
    "cache_router",
]
