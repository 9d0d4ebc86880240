"""Operation response models.

ONLY operation responses - structures generic cache operation results.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class OperationResponse(BaseModel):
    """Generic cache operation response."""

    success: bool = Field(
        ...,
        description="Whether the operation was successful"
    )

    message: Optional[str] = Field(
        default=None,
        description="Operation message or error description"
    )

    data: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Additional operation data"
    )

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response timestamp"
    )

    operation_time_ms: Optional[float] = Field(
        default=None,
        ge=0,
        description="Time taken for operation in milliseconds"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "message": "Cache entry deleted",
                "data": {"key": "listings:mls-1"},
                "timestamp": "2026-01-01T12:00:00Z",
                "operation_time_ms": 1.2
            }
        }
    }
