"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from brands.domain.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """
        Insert or update a product.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, product_id: uuid.UUID) -> bool:
        """
        Delete a product and the favorites pointing at it.

        Args:
            product_id: Product UUID

        Returns:
            True if a record was deleted
        """
        pass

    @abstractmethod
    async def list_by_brand(self, brand_id: uuid.UUID) -> List[Product]:
        """
        List all products of a brand, newest first.

        Args:
            brand_id: Brand UUID

        Returns:
            List of Product entities
        """
        pass

    @abstractmethod
    async def list_public(self, search: Optional[str] = None) -> List[Product]:
        """
        List products whose brand is approved, newest first.

        Args:
            search: Optional case-insensitive name/description filter

        Returns:
            List of Product entities
        """
        pass
