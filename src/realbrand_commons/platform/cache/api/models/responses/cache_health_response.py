"""Cache health response models.

ONLY health check responses - structures tier liveness status.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    """Health status levels."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


def resolve_health_status(tiers: Dict[str, bool]) -> HealthStatus:
    """All tiers up is healthy, none up is unhealthy, anything else degraded."""
    if all(tiers.values()):
        return HealthStatus.HEALTHY
    if not any(tiers.values()):
        return HealthStatus.UNHEALTHY
    return HealthStatus.DEGRADED


class CacheHealthResponse(BaseModel):
    """Cache system health response."""

    status: HealthStatus = Field(
        ...,
        description="Overall cache health status"
    )

    memory: bool = Field(
        ...,
        description="In-process tier is queryable"
    )

    redis: bool = Field(
        ...,
        description="Remote tier answered a trivial exists call"
    )

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp"
    )

    @classmethod
    def from_tiers(cls, tiers: Dict[str, bool]) -> "CacheHealthResponse":
        return cls(
            status=resolve_health_status(tiers),
            memory=tiers["memory"],
            redis=tiers["redis"],
        )
