"""
Cache port.

Read-side caching sits behind this interface so application services
never touch a cache backend directly. A cache is an optimization only:
implementations must treat backend failures as misses.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional


class CachePort(ABC):
    """Key/value cache used by application services."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Read a cached value.

        Args:
            key: Cache key

        Returns:
            Cached value, or None on a miss
        """

    @abstractmethod
    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Store a value.

        Args:
            key: Cache key
            value: Picklable value
            timeout: Lifetime in seconds (None uses the backend default)
        """

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Drop a cached value."""
