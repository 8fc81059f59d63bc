"""
Favorite domain entity.

A client's bookmark on a product.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Favorite:
    """Favorite domain entity."""

    id: uuid.UUID
    principal_id: uuid.UUID
    product_id: uuid.UUID
    created_at: datetime

    @classmethod
    def create(
        cls,
        principal_id: uuid.UUID,
        product_id: uuid.UUID,
        favorite_id: Optional[uuid.UUID] = None,
    ) -> "Favorite":
        return cls(
            id=favorite_id or uuid.uuid4(),
            principal_id=principal_id,
            product_id=product_id,
            created_at=datetime.now(timezone.utc),
        )
