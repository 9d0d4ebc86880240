"""Warm cache command data.

ONLY cache warming inputs - entries to pre-populate at startup.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional, Union


@dataclass
class WarmCacheEntry:
    """Single entry for cache warming."""

    key: str
    value: Any
    ttl_seconds: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WarmCacheEntry":
        if "key" not in data or "value" not in data:
            raise ValueError(f"Warm cache entry needs 'key' and 'value': {dict(data)!r}")
        return cls(
            key=data["key"],
            value=data["value"],
            ttl_seconds=data.get("ttl_seconds", data.get("ttlSeconds")),
        )


WarmCacheInput = Union[WarmCacheEntry, Mapping[str, Any]]


def iter_warm_entries(entries: Iterable[WarmCacheInput]) -> Iterator[WarmCacheEntry]:
    """Yield entries as ``WarmCacheEntry`` objects, converting mappings."""
    for entry in entries:
        if isinstance(entry, WarmCacheEntry):
            yield entry
        else:
            yield WarmCacheEntry.from_mapping(entry)
