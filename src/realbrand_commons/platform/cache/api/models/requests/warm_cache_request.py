"""Warm cache request model.

ONLY warm-up requests - validates entries to pre-populate the cache with.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class WarmCacheEntryModel(BaseModel):
    """One key/value pair to warm."""

    key: str = Field(
        ...,
        min_length=1,
        max_length=512,
        description="Cache key (without namespace)"
    )

    value: Any = Field(
        ...,
        description="JSON-serializable value, must not be null"
    )

    ttl_seconds: Optional[int] = Field(
        default=None,
        gt=0,
        description="TTL override in seconds"
    )

    @field_validator('value')
    @classmethod
    def validate_value(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("null cannot be cached; delete the key instead")
        return v


class WarmCacheRequest(BaseModel):
    """Request model for warming the cache."""

    entries: List[WarmCacheEntryModel] = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Entries applied sequentially under the write policy"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "entries": [
                    {"key": "brand:settings", "value": {"theme": "dark"}},
                    {"key": "listings:featured", "value": ["mls-1", "mls-2"], "ttl_seconds": 600}
                ]
            }
        }
    }
