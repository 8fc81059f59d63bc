"""
Django implementation of FavoriteRepository port.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from brands.domain.favorite import Favorite
from brands.ports.favorite_repository import FavoriteRepository
from core.domain.exceptions import ConflictError
from products.infrastructure.models import Favorite as FavoriteModel


class DjangoFavoriteRepository(FavoriteRepository):
    """Django ORM implementation of FavoriteRepository."""

    def _to_domain(self, model: FavoriteModel) -> Favorite:
        return Favorite(
            id=model.id,
            principal_id=model.principal_id,
            product_id=model.product_id,
            created_at=model.created_at,
        )

    def _insert(self, favorite: Favorite) -> FavoriteModel:
        model = FavoriteModel(
            id=favorite.id,
            principal_id=favorite.principal_id,
            product_id=favorite.product_id,
        )
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except IntegrityError as e:
            raise ConflictError("Product already in favorites") from e
        return model

    async def add(self, favorite: Favorite) -> Favorite:
        """Insert a favorite."""
        model = await sync_to_async(self._insert)(favorite)
        return self._to_domain(model)

    async def find(self, principal_id: uuid.UUID, product_id: uuid.UUID) -> Optional[Favorite]:
        """Find a principal's favorite for a product."""
        # pylint: disable=no-member
        qs = FavoriteModel.objects.filter(principal_id=principal_id, product_id=product_id)
        model = await sync_to_async(qs.first)()
        return self._to_domain(model) if model else None

    async def remove(self, principal_id: uuid.UUID, product_id: uuid.UUID) -> bool:
        """Delete a favorite; True if one existed."""
        # pylint: disable=no-member
        qs = FavoriteModel.objects.filter(principal_id=principal_id, product_id=product_id)
        deleted, _ = await sync_to_async(qs.delete)()
        return deleted > 0

    async def list_product_ids(self, principal_id: uuid.UUID) -> List[uuid.UUID]:
        """List the product IDs a principal has favorited, newest first."""
        # pylint: disable=no-member
        qs = (
            FavoriteModel.objects.filter(principal_id=principal_id)
            .order_by("-created_at")
            .values_list("product_id", flat=True)
        )
        return await sync_to_async(list)(qs)
