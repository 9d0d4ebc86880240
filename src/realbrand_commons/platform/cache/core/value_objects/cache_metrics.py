"""Cache metrics snapshot value object."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, defining x / 0 as 0.0 instead of raising."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator


@dataclass(frozen=True)
class CacheMetricsSnapshot:
    """Point-in-time read of hybrid cache counters.

    Derived on every ``metrics()`` call, never persisted. ``hit_rate`` is a
    fraction in [0, 1] and is 0.0 before the first lookup.
    """

    hits: int
    misses: int
    hit_rate: float
    memory_usage: int
    evictions: int
    average_response_time: float
    memory_hits: int = 0
    redis_hits: int = 0
    writes: int = 0
    errors: int = 0
    pending_writes: int = 0

    @property
    def total_lookups(self) -> int:
        return self.hits + self.misses

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
