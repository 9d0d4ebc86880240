"""Invalidate cache request model.

ONLY invalidation requests - validates glob-pattern cache invalidation.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class InvalidateRequest(BaseModel):
    """Request model for invalidating cache entries by glob pattern.

    The in-process tier is always cleared entirely; only the remote tier
    honours the pattern.
    """

    pattern: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Redis glob pattern, relative to the cache namespace"
    )

    reason: Optional[str] = Field(
        default=None,
        max_length=512,
        description="Reason for invalidation"
    )

    @field_validator('pattern')
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        if v.isspace():
            raise ValueError("Pattern cannot be whitespace only")
        return v.strip()

    model_config = {
        "json_schema_extra": {
            "example": {
                "pattern": "listings:*",
                "reason": "MLS feed refreshed"
            }
        }
    }
