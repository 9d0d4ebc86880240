"""RealBrand-Commons - shared library for the real-estate brand app services.

Provides the hybrid in-process/Redis cache, its configuration and the
common exception and logging setup.

Logging is not configured on import; services call ``setup_logging()``
once at startup.
"""

from .__version__ import __version__

from .config import (
    LoggingConfig,
    setup_logging,
    get_logger,
)

from .core.exceptions import (
    RealBrandError,
    CacheError,
    CacheConnectionError,
    CacheSerializationError,
    CacheConfigurationError,
    create_error_response,
    get_http_status_code,
)

from .platform.cache import (
    HybridCache,
    HybridCacheConfig,
    MemoryCache,
    RedisCacheRepository,
    WritePolicy,
    cached,
    create_hybrid_cache,
    setup_cache,
)

__all__ = [
    "__version__",

    # Logging
    "LoggingConfig",
    "setup_logging",
    "get_logger",

    # Exceptions
    "RealBrandError",
    "CacheError",
    "CacheConnectionError",
    "CacheSerializationError",
    "CacheConfigurationError",
    "create_error_response",
    "get_http_status_code",

    # Cache
    "HybridCache",
    "HybridCacheConfig",
    "MemoryCache",
    "RedisCacheRepository",
    "WritePolicy",
    "cached",
    "create_hybrid_cache",
    "setup_cache",
]
