"""Remote cache client protocol.

ONLY the async key-value surface the remote tier wrapper needs from a
network client. ``redis.asyncio.Redis`` satisfies it.
"""

from typing import Any, List, Optional
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class RemoteCacheClient(Protocol):
    """Async key-value client consumed by the remote tier."""

    async def get(self, name: str) -> Optional[Any]:
        """Return the stored payload or None."""
        ...

    async def set(self, name: str, value: Any, ex: Optional[int] = None) -> Any:
        """Store a payload, expiring after ``ex`` seconds when given."""
        ...

    async def delete(self, *names: str) -> int:
        """Delete keys, returning how many existed."""
        ...

    async def exists(self, *names: str) -> int:
        """Count how many of the keys exist."""
        ...

    async def keys(self, pattern: str = "*") -> List[Any]:
        """List keys matching a glob pattern."""
        ...
