"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction
from django.utils import timezone

from brands.domain.brand import PROFILE_FIELDS, Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import ConflictError, ResourceNotFoundError
from core.domain.value_objects import BrandStatus


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: BrandModel) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model

        Returns:
            Brand domain entity
        """
        return Brand(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            status=BrandStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
            is_featured=model.is_featured,
            **{field: getattr(model, field) for field in PROFILE_FIELDS if field != "name"},
        )

    def _insert(self, brand: Brand) -> BrandModel:
        model = BrandModel(
            id=brand.id,
            owner_id=brand.owner_id,
            name=brand.name,
            status=brand.status.value,
            is_featured=brand.is_featured,
            **{field: getattr(brand, field) for field in PROFILE_FIELDS if field != "name"},
        )
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except IntegrityError as e:
            raise ConflictError("A brand with this name or owner already exists") from e
        return model

    def _update_profile(self, brand: Brand) -> BrandModel:
        values = {field: getattr(brand, field) for field in PROFILE_FIELDS}
        try:
            with transaction.atomic():
                # pylint: disable=no-member
                updated = BrandModel.objects.filter(id=brand.id).update(
                    updated_at=timezone.now(), **values
                )
        except IntegrityError as e:
            raise ConflictError("A brand with this name already exists") from e
        if not updated:
            raise ResourceNotFoundError(f"Brand {brand.id} not found")
        return BrandModel.objects.get(id=brand.id)  # pylint: disable=no-member

    async def create(self, brand: Brand) -> Brand:
        """
        Insert a new brand, including its initial status.

        Args:
            brand: Brand entity to insert

        Returns:
            Saved brand entity
        """
        model = await sync_to_async(self._insert)(brand)
        return self._to_domain(model)

    async def save_profile(self, brand: Brand) -> Brand:
        """
        Persist the descriptive fields of an existing brand.

        Args:
            brand: Brand entity carrying the new profile

        Returns:
            Brand entity as stored
        """
        model = await sync_to_async(self._update_profile)(brand)
        return self._to_domain(model)

    async def write_status(
        self,
        brand_id: uuid.UUID,
        expected_current: BrandStatus,
        new_status: BrandStatus,
    ) -> bool:
        """
        Compare-and-set the brand status in one conditional UPDATE.

        Args:
            brand_id: Brand UUID
            expected_current: Status the caller read
            new_status: Status to write

        Returns:
            True if exactly one row moved from expected_current to new_status
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.filter(id=brand_id, status=expected_current.value)
        updated = await sync_to_async(qs.update)(
            status=new_status.value, updated_at=timezone.now()
        )
        return updated == 1

    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(BrandModel.objects.get)(id=brand_id)
            return self._to_domain(model)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_owner(self, owner_id: uuid.UUID) -> Optional[Brand]:
        """
        Find the brand owned by a principal.

        Args:
            owner_id: Principal UUID

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(BrandModel.objects.get)(owner_id=owner_id)
            return self._to_domain(model)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_name(self, name: str) -> Optional[Brand]:
        """
        Find a brand by name, case-insensitively.

        Args:
            name: Brand name

        Returns:
            Brand entity or None if not found
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.filter(name__iexact=(name or "").strip())
        model = await sync_to_async(qs.first)()
        return self._to_domain(model) if model else None

    async def delete(self, brand_id: uuid.UUID) -> bool:
        """
        Delete a brand; products and their favorites cascade.

        Args:
            brand_id: Brand UUID

        Returns:
            True if a record was deleted
        """
        # pylint: disable=no-member
        qs = BrandModel.objects.filter(id=brand_id)
        _, details = await sync_to_async(qs.delete)()
        return details.get(BrandModel._meta.label, 0) > 0

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
        # pylint: disable=no-member
        qs = BrandModel.objects.all().order_by("-created_at")
        if status is not None:
            qs = qs.filter(status=status.value)
        if featured_only:
            qs = qs.filter(is_featured=True)
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]
