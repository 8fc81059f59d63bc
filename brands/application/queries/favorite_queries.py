"""
Favorite queries.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class ListFavoritesQuery:
    """Query for a client's favorite products."""

    actor: Optional[PrincipalDescriptor]


@dataclass
class CheckFavoriteQuery:
    """Query whether a product is among a client's favorites."""

    product_id: uuid.UUID
    actor: Optional[PrincipalDescriptor]
