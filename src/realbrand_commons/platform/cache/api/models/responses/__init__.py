"""Cache API response models.

One response model per file.
"""

from .cache_health_response import CacheHealthResponse, HealthStatus, resolve_health_status
from .cache_metrics_response import CacheMetricsResponse
from .operation_response import OperationResponse

__all__ = [
    "CacheHealthResponse",
    "HealthStatus",
    "resolve_health_status",
    "CacheMetricsResponse",
    "OperationResponse",
]
