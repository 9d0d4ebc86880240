"""Infrastructure-specific exceptions for realbrand-commons.

Exceptions raised by the cache tiers and their configuration.
"""

from .base import RealBrandError


# Cache Errors
class CacheError(RealBrandError):
    """Base class for cache-related errors."""
    pass


class CacheConnectionError(CacheError):
    """Raised when the remote cache tier cannot be reached."""
    pass


class CacheSerializationError(CacheError):
    """Raised when a cache value cannot be encoded or decoded."""
    pass


class CacheConfigurationError(CacheError):
    """Raised when cache configuration is invalid.

    Always fatal at construction time.
    """
    pass
