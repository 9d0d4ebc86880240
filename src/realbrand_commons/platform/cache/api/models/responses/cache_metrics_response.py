"""Cache metrics response models.

ONLY metrics responses - exposes a coordinator metrics snapshot.
"""

from pydantic import BaseModel, Field

from ....core.value_objects.cache_metrics import CacheMetricsSnapshot


class CacheMetricsResponse(BaseModel):
    """Cache metrics response."""

    hits: int = Field(..., ge=0, description="Memory hits plus Redis hits")
    misses: int = Field(..., ge=0, description="Lookups found in neither tier")
    hit_rate: float = Field(..., ge=0, le=1, description="hits / (hits + misses), 0 before any lookup")
    memory_usage: int = Field(..., description="Estimated bytes held by the in-process tier")
    evictions: int = Field(..., ge=0, description="Capacity evictions from the in-process tier")
    average_response_time: float = Field(
        ...,
        ge=0,
        description="Average in-process lookup time in milliseconds"
    )
    memory_hits: int = Field(default=0, ge=0)
    redis_hits: int = Field(default=0, ge=0)
    writes: int = Field(default=0, ge=0)
    errors: int = Field(default=0, ge=0)
    pending_writes: int = Field(default=0, ge=0, description="Detached write-behind writes in flight")

    @classmethod
    def from_snapshot(cls, snapshot: CacheMetricsSnapshot) -> "CacheMetricsResponse":
        return cls(**snapshot.to_dict())
