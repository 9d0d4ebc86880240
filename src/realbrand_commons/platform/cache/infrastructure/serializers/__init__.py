"""Cache serializers."""

from .json_serializer import (
    CustomJSONEncoder,
    JSONCacheSerializer,
    create_json_serializer,
    decode_json_object,
)

__all__ = [
    "CustomJSONEncoder",
    "JSONCacheSerializer",
    "create_json_serializer",
    "decode_json_object",
]
