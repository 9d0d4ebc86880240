"""Exceptions module for realbrand-commons."""

from .base import (
    RealBrandError,
    get_http_status_code,
    create_error_response,
)
from .infrastructure import (
    CacheError,
    CacheConnectionError,
    CacheSerializationError,
    CacheConfigurationError,
)

__all__ = [
    "RealBrandError",
    "get_http_status_code",
    "create_error_response",
    "CacheError",
    "CacheConnectionError",
    "CacheSerializationError",
    "CacheConfigurationError",
]
