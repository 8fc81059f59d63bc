"""
Favorite repository port (interface).
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from brands.domain.favorite import Favorite


class FavoriteRepository(ABC):
    """Abstract repository for client favorites."""

    @abstractmethod
    async def add(self, favorite: Favorite) -> Favorite:
        """
        Insert a favorite.

        Raises:
            ConflictError: If the product is already a favorite of the principal
        """
        pass

    @abstractmethod
    async def find(self, principal_id: uuid.UUID, product_id: uuid.UUID) -> Optional[Favorite]:
        """Find a principal's favorite for a product."""
        pass

    @abstractmethod
    async def remove(self, principal_id: uuid.UUID, product_id: uuid.UUID) -> bool:
        """Delete a favorite; True if one existed."""
        pass

    @abstractmethod
    async def list_product_ids(self, principal_id: uuid.UUID) -> List[uuid.UUID]:
        """List the product IDs a principal has favorited, newest first."""
        pass
