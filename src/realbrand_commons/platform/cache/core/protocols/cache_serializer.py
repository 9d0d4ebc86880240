"""Cache serializer protocol."""

from typing import Any
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class CacheSerializer(Protocol):
    """Encodes values for the remote tier.

    Implementations raise ``CacheSerializationError`` on failure.
    """

    def serialize(self, value: Any) -> str:
        ...

    def deserialize(self, data: Any) -> Any:
        ...
