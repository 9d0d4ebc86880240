"""Cache entry entity.

ONLY in-process cache entry - value plus the timestamps the bounded map
needs for recency ordering and expiry.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CacheEntry:
    """Entry held by the in-process tier.

    Timestamps come from ``time.monotonic()`` so wall-clock changes never
    expire or resurrect entries.
    """

    key: str
    value: Any
    inserted_at: float = field(default_factory=time.monotonic)
    last_accessed_at: Optional[float] = None
    expires_at: Optional[float] = None
    access_count: int = 0

    def __post_init__(self):
        if self.last_accessed_at is None:
            self.last_accessed_at = self.inserted_at

    @classmethod
    def create(cls, key: str, value: Any, ttl_seconds: Optional[float] = None) -> "CacheEntry":
        """Create entry expiring ``ttl_seconds`` from now (never if None)."""
        now = time.monotonic()
        expires_at = now + ttl_seconds if ttl_seconds is not None else None
        return cls(key=key, value=value, inserted_at=now, expires_at=expires_at)

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check whether the entry's TTL has elapsed."""
        if self.expires_at is None:
            return False
        return (now if now is not None else time.monotonic()) >= self.expires_at

    def touch(self) -> None:
        """Record an access."""
        self.last_accessed_at = time.monotonic()
        self.access_count += 1

    def time_until_expiry(self) -> Optional[float]:
        """Seconds left before expiry, None for unbounded entries."""
        if self.expires_at is None:
            return None
        return max(0.0, self.expires_at - time.monotonic())
