"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from brands.domain.brand import Brand
from core.domain.value_objects import BrandStatus


class BrandRepository(ABC):
    """
    Abstract repository for Brand entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    ``write_status`` is the only method that changes a stored status.
    """

    @abstractmethod
    async def create(self, brand: Brand) -> Brand:
        """
        Insert a new brand, including its initial status.

        Args:
            brand: Brand entity to insert

        Returns:
            Saved brand entity

        Raises:
            ConflictError: If the name or owner is already taken
        """
        pass

    @abstractmethod
    async def save_profile(self, brand: Brand) -> Brand:
        """
        Persist the descriptive fields of an existing brand.

        The stored status is left untouched whatever ``brand.status`` holds.

        Args:
            brand: Brand entity carrying the new profile

        Returns:
            Brand entity as stored

        Raises:
            ResourceNotFoundError: If the brand no longer exists
            ConflictError: If the new name is already taken
        """
        pass

    @abstractmethod
    async def write_status(
        self,
        brand_id: uuid.UUID,
        expected_current: BrandStatus,
        new_status: BrandStatus,
    ) -> bool:
        """
        Compare-and-set the brand status.

        Args:
            brand_id: Brand UUID
            expected_current: Status the caller read
            new_status: Status to write

        Returns:
            True if the stored status was ``expected_current`` and is now
            ``new_status``; False if it changed underneath or the brand is gone
        """
        pass

    @abstractmethod
    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: uuid.UUID) -> Optional[Brand]:
        """
        Find the brand owned by a principal.

        Args:
            owner_id: Principal UUID

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Brand]:
        """
        Find a brand by name, case-insensitively.

        Args:
            name: Brand name

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, brand_id: uuid.UUID) -> bool:
        """
        Delete a brand and, through the store, its products.

        Args:
            brand_id: Brand UUID

        Returns:
            True if a record was deleted
        """
        pass

    @abstractmethod
    async def list_by_status(
        self, status: Optional[BrandStatus] = None, featured_only: bool = False
    ) -> List[Brand]:
        """
        List brands, newest first.

        Args:
            status: Status filter, or None for every status
            featured_only: Restrict to featured brands

        Returns:
            List of Brand entities
        """
        pass
