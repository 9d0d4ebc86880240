"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .infrastructure import (
    CacheError,
    CacheConnectionError,
    CacheSerializationError,
    CacheConfigurationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 422 Unprocessable Entity
    CacheSerializationError: 422,

    # 500 Internal Server Error
    CacheConfigurationError: 500,
    CacheError: 500,

    # 503 Service Unavailable
    CacheConnectionError: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Walks the exception's MRO so subclasses inherit the status of their
    nearest mapped ancestor.
    """
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500
