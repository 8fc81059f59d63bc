"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q

from brands.domain.product import Product
from brands.ports.product_repository import ProductRepository
from core.domain.exceptions import DomainValidationError
from core.domain.value_objects import BrandStatus, ImageRef
from products.infrastructure.models import Favorite as FavoriteModel
from products.infrastructure.models import Product as ProductModel


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            brand_id=model.brand_id,
            name=model.name,
            description=model.description,
            price=model.price,
            images=tuple(
                ImageRef(public_id=image["public_id"], image_url=image["image_url"])
                for image in model.images
            ),
            purchase_link=model.purchase_link,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _save(self, product: Product) -> ProductModel:
        # pylint: disable=no-member
        model = ProductModel.objects.filter(id=product.id).first()
        if model is None:
            model = ProductModel(id=product.id, brand_id=product.brand_id)
        model.name = product.name
        model.description = product.description
        model.price = product.price
        model.images = [image.to_dict() for image in product.images]
        model.purchase_link = product.purchase_link
        try:
            model.save()
        except ValidationError as e:
            raise DomainValidationError("; ".join(e.messages)) from e
        return model

    def _delete(self, product_id: uuid.UUID) -> bool:
        with transaction.atomic():
            # pylint: disable=no-member
            FavoriteModel.objects.filter(product_id=product_id).delete()
            _, details = ProductModel.objects.filter(id=product_id).delete()
        return details.get(ProductModel._meta.label, 0) > 0

    async def save(self, product: Product) -> Product:
        """
        Insert or update a product.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity

        Raises:
            DomainValidationError: If the store rejects a field (e.g. price precision)
        """
        model = await sync_to_async(self._save)(product)
        return self._to_domain(model)

    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(ProductModel.objects.get)(id=product_id)
            return self._to_domain(model)
        except ProductModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def delete(self, product_id: uuid.UUID) -> bool:
        """
        Delete a product and the favorites pointing at it.

        Args:
            product_id: Product UUID

        Returns:
            True if a record was deleted
        """
        return await sync_to_async(self._delete)(product_id)

    async def list_by_brand(self, brand_id: uuid.UUID) -> List[Product]:
        """
        List all products of a brand, newest first.

        Args:
            brand_id: Brand UUID

        Returns:
            List of Product entities
        """
        # pylint: disable=no-member
        qs = ProductModel.objects.filter(brand_id=brand_id).order_by("-created_at")
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]

    async def list_public(self, search: Optional[str] = None) -> List[Product]:
        """
        List products whose brand is approved, newest first.

        Args:
            search: Optional case-insensitive name/description filter

        Returns:
            List of Product entities
        """
        # pylint: disable=no-member
        qs = ProductModel.objects.filter(brand__status=BrandStatus.APPROVED.value)
        if search and search.strip():
            term = search.strip()
            qs = qs.filter(Q(name__icontains=term) | Q(description__icontains=term))
        models = await sync_to_async(list)(qs.order_by("-created_at"))
        return [self._to_domain(model) for model in models]
