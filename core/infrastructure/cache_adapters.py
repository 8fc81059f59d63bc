"""
Cache adapter implementations.

Provides the Django cache implementation of CachePort used for the
public catalog pages.
"""

import logging
from typing import Any, Optional

from asgiref.sync import sync_to_async
from django.core.cache import cache

from core.infrastructure.cache import CachePort

logger = logging.getLogger(__name__)


class DjangoCacheAdapter(CachePort):
    """
    Django cache adapter implementing CachePort.

    Uses Django's cache framework: Redis in production, local memory in
    tests. Backend errors are logged and behave like a miss, so a cache
    outage never blocks the directory.
    """

    async def get(self, key: str) -> Optional[Any]:
        """
        Get a value from cache.

        Args:
            key: Cache key, e.g. a public brand list page

        Returns:
            Cached value, or None on a miss or a backend error
        """
        try:
            value = await sync_to_async(cache.get)(key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Backend connection errors (redis, memcached) share no base class.
            logger.error("Cache read failed for %s: %s", key, e, exc_info=True)
            return None
        logger.debug("Cache %s: %s", "hit" if value is not None else "miss", key)
        return value

    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Set a value in cache.

        Args:
            key: Cache key
            value: Picklable value, usually serialized catalog rows
            timeout: Lifetime in seconds (None uses the backend default)
        """
        try:
            await sync_to_async(cache.set)(key, value, timeout=timeout)
            logger.debug("Cache set: %s (timeout=%s)", key, timeout)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Cache write failed for %s: %s", key, e, exc_info=True)

    async def delete(self, key: str) -> None:
        """
        Delete a value from cache.

        Args:
            key: Cache key
        """
        try:
            await sync_to_async(cache.delete)(key)
            logger.debug("Cache delete: %s", key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Cache delete failed for %s: %s", key, e, exc_info=True)


# Global cache instance
cache_adapter = DjangoCacheAdapter()
