"""
Catalog cache service.

Caches the public brand lists. Entries are dropped whenever a brand is
created, edited, moved through its lifecycle or deleted, so a banned
brand leaves the public list on the next read.
"""
import logging
from typing import List, Optional

from brands.application.dto.brand_dto import BrandDTO
from core.infrastructure.cache import CachePort

logger = logging.getLogger(__name__)

CACHE_TTL_PUBLIC_BRANDS = 60  # 1 minute


class CatalogCacheService:
    """Service for caching public catalog reads."""

    def __init__(self, cache: CachePort, timeout: int = CACHE_TTL_PUBLIC_BRANDS):
        """Initialize with a cache port."""
        self.cache = cache
        self.timeout = timeout

    @staticmethod
    def _public_brands_key(featured_only: bool) -> str:
        """Generate cache key for a public brand list."""
        return f"catalog:brands:{'featured' if featured_only else 'all'}"

    async def get_public_brands(self, featured_only: bool) -> Optional[List[BrandDTO]]:
        """
        Get a cached public brand list.

        Args:
            featured_only: Which list

        Returns:
            Cached list of BrandDTO or None
        """
        return await self.cache.get(self._public_brands_key(featured_only))

    async def set_public_brands(self, featured_only: bool, brands: List[BrandDTO]) -> None:
        """Cache a public brand list."""
        await self.cache.set(self._public_brands_key(featured_only), brands, timeout=self.timeout)

    async def invalidate(self) -> None:
        """Drop every cached public brand list."""
        for featured_only in (False, True):
            await self.cache.delete(self._public_brands_key(featured_only))
        logger.debug("Public catalog cache invalidated")
