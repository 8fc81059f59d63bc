"""
Favorite commands.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class AddFavoriteCommand:
    """Command to bookmark a product."""

    product_id: uuid.UUID
    actor: Optional[PrincipalDescriptor]


@dataclass
class RemoveFavoriteCommand:
    """Command to remove a bookmark."""

    product_id: uuid.UUID
    actor: Optional[PrincipalDescriptor]
