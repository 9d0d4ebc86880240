"""Cache protocols."""

from .cache_serializer import CacheSerializer
from .remote_cache_client import RemoteCacheClient

__all__ = ["CacheSerializer", "RemoteCacheClient"]
