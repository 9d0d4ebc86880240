"""Cache service dependencies.

ONLY cache service dependencies - provides FastAPI dependency injection
for the hybrid cache attached at application startup.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from ...application.services.hybrid_cache import HybridCache


async def get_hybrid_cache(request: Request) -> HybridCache:
    """Get the hybrid cache attached by ``setup_cache``.

    Usage in feature endpoints:

    ```python
    from fastapi import Depends
    from realbrand_commons.platform.cache.api.dependencies import get_hybrid_cache

    @router.get("/listings/{listing_id}")
    async def get_listing(listing_id: str, cache: HybridCache = Depends(get_hybrid_cache)):
        listing = await cache.get(f"listings:{listing_id}")
        if listing is None:
            listing = await mls.fetch_listing(listing_id)
            await cache.set(f"listings:{listing_id}", listing, ttl_seconds=600)
        return listing
    ```
    """
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Cache is not configured for this application"
        )
    return cache


HybridCacheDependency = Annotated[HybridCache, Depends(get_hybrid_cache)]
