"""RealBrand-Commons Platform Modules.

Modules:
- cache: Hybrid in-process/Redis cache with configurable write policy
"""

from . import cache

__all__ = ["cache"]
