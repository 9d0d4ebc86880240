"""JSON cache serializer.

ONLY JSON serialization - encodes remote tier values as JSON text with
type preservation for common Python types.
"""

import json
import time
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict
from uuid import UUID

from .....core.exceptions import CacheSerializationError


@dataclass
class JSONSerializerStats:
    """JSON serializer performance statistics."""

    serialization_count: int = 0
    deserialization_count: int = 0
    total_serialization_time: float = 0.0
    total_deserialization_time: float = 0.0
    total_bytes_serialized: int = 0
    error_count: int = 0


class CustomJSONEncoder(json.JSONEncoder):
    """JSON encoder for extended type support.

    Unknown types are rejected rather than stringified so a value that
    cannot round-trip is reported instead of silently corrupted.
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        elif isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        elif isinstance(obj, Decimal):
            return {"__decimal__": str(obj)}
        elif isinstance(obj, UUID):
            return {"__uuid__": str(obj)}
        elif isinstance(obj, frozenset):
            return {"__frozenset__": list(obj)}
        elif isinstance(obj, set):
            return {"__set__": list(obj)}
        elif isinstance(obj, bytes):
            return {"__bytes__": obj.hex()}

        return super().default(obj)


def decode_json_object(obj: Dict[str, Any]) -> Any:
    """Decode custom JSON objects back to Python types.

    Only single-key objects whose key is a type marker are converted. A
    cached dict that is exactly ``{"__set__": [...]}`` (or another marker)
    therefore reads back as the marked type, not as a dict; callers must
    not use the ``__<type>__`` keys as the only key of their own dicts.
    """
    if len(obj) != 1:
        return obj
    if "__datetime__" in obj:
        return datetime.fromisoformat(obj["__datetime__"])
    elif "__date__" in obj:
        return date.fromisoformat(obj["__date__"])
    elif "__decimal__" in obj:
        return Decimal(obj["__decimal__"])
    elif "__uuid__" in obj:
        return UUID(obj["__uuid__"])
    elif "__set__" in obj:
        return set(obj["__set__"])
    elif "__frozenset__" in obj:
        return frozenset(obj["__frozenset__"])
    elif "__bytes__" in obj:
        return bytes.fromhex(obj["__bytes__"])

    return obj


class JSONCacheSerializer:
    """JSON cache serializer with extended type support.

    Produces compact UTF-8 JSON text; accepts ``str`` or ``bytes`` on the
    way back so it works with Redis clients with or without
    ``decode_responses``.
    """

    def __init__(self, ensure_ascii: bool = False, sort_keys: bool = False):
        self._ensure_ascii = ensure_ascii
        self._sort_keys = sort_keys
        self._stats = JSONSerializerStats()

    def serialize(self, value: Any) -> str:
        """Serialize value to JSON text.

        Raises:
            CacheSerializationError: Value is not JSON-encodable
        """
        start_time = time.perf_counter()

        try:
            result = json.dumps(
                value,
                cls=CustomJSONEncoder,
                ensure_ascii=self._ensure_ascii,
                separators=(",", ":"),
                sort_keys=self._sort_keys,
                allow_nan=False,
            )
        except (TypeError, ValueError, OverflowError, RecursionError) as e:
            self._stats.error_count += 1
            raise CacheSerializationError(
                f"JSON serialization failed: {e}",
                details={"value_type": type(value).__name__, "serializer": "json"},
            ) from e

        self._stats.serialization_count += 1
        self._stats.total_serialization_time += time.perf_counter() - start_time
        self._stats.total_bytes_serialized += len(result)
        return result

    def deserialize(self, data: Any) -> Any:
        """Deserialize JSON text or bytes back to a Python object.

        Raises:
            CacheSerializationError: Payload is not valid JSON
        """
        start_time = time.perf_counter()

        try:
            if isinstance(data, (bytes, bytearray)):
                data = bytes(data).decode("utf-8")
            result = json.loads(data, object_hook=decode_json_object)
        except (TypeError, ValueError) as e:
            # JSONDecodeError and UnicodeDecodeError are ValueErrors
            self._stats.error_count += 1
            raise CacheSerializationError(
                f"JSON deserialization failed: {e}",
                details={"payload_type": type(data).__name__, "serializer": "json"},
            ) from e

        self._stats.deserialization_count += 1
        self._stats.total_deserialization_time += time.perf_counter() - start_time
        return result

    def get_format_name(self) -> str:
        return "json"

    def get_performance_stats(self) -> Dict[str, Any]:
        """Get performance statistics."""
        stats = {
            "serialization_count": self._stats.serialization_count,
            "deserialization_count": self._stats.deserialization_count,
            "total_serialization_time": self._stats.total_serialization_time,
            "total_deserialization_time": self._stats.total_deserialization_time,
            "total_bytes_serialized": self._stats.total_bytes_serialized,
            "error_count": self._stats.error_count,
        }

        if self._stats.serialization_count > 0:
            stats["average_serialization_time"] = (
                self._stats.total_serialization_time / self._stats.serialization_count
            )

        if self._stats.deserialization_count > 0:
            stats["average_deserialization_time"] = (
                self._stats.total_deserialization_time / self._stats.deserialization_count
            )

        return stats


# Factory function for dependency injection
def create_json_serializer(ensure_ascii: bool = False, sort_keys: bool = False) -> JSONCacheSerializer:
    """Create JSON cache serializer."""
    return JSONCacheSerializer(ensure_ascii=ensure_ascii, sort_keys=sort_keys)
