"""
Credential store port (interface).

This defines the contract for principal persistence and secret checks.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from accounts.domain.principal import Principal
from core.domain.value_objects import Role


class CredentialStore(ABC):
    """
    Abstract store for Principal records.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def hash_secret(self, raw_secret: str) -> str:
        """
        Hash a raw secret with the store's slow hasher.

        Args:
            raw_secret: Plain-text secret

        Returns:
            Encoded hash suitable for Principal.secret_hash
        """
        pass

    @abstractmethod
    async def create(self, principal: Principal) -> Principal:
        """
        Persist a new principal.

        Args:
            principal: Principal entity to insert

        Returns:
            Saved principal entity

        Raises:
            ConflictError: If the email is already registered
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Principal]:
        """
        Find a principal by email, case-insensitively.

        Args:
            email: Login email

        Returns:
            Principal entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_id(self, principal_id: uuid.UUID) -> Optional[Principal]:
        """
        Find a principal by ID.

        Args:
            principal_id: Principal UUID

        Returns:
            Principal entity or None if not found
        """
        pass

    @abstractmethod
    async def verify_secret(self, principal: Principal, presented_secret: str) -> bool:
        """
        Compare a presented secret with the stored hash in constant time.

        Args:
            principal: Principal whose hash is checked
            presented_secret: Plain-text secret presented at sign-in

        Returns:
            True if the secret matches
        """
        pass

    @abstractmethod
    async def update(self, principal: Principal) -> bool:
        """
        Write a principal's profile fields and secret hash.

        Role and the brand binding are never written.

        Args:
            principal: Principal entity with the new values

        Returns:
            True if a record was updated

        Raises:
            ConflictError: If the new email belongs to another principal
        """
        pass

    @abstractmethod
    async def list_by_role(self, role: Optional[Role] = None) -> List[Principal]:
        """
        List principals, optionally filtered by role.

        Args:
            role: Role filter

        Returns:
            List of Principal entities
        """
        pass
