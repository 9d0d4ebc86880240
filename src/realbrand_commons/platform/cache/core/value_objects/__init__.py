"""Cache value objects."""

from .cache_metrics import CacheMetricsSnapshot, safe_ratio
from .write_policy import WritePolicy

__all__ = [
    "CacheMetricsSnapshot",
    "WritePolicy",
    "safe_ratio",
]
