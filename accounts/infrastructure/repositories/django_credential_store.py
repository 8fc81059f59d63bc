"""
Django implementation of CredentialStore port.

Secrets are hashed with Django's configured password hashers.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction

from accounts.domain.principal import Principal
from accounts.infrastructure.models import Principal as PrincipalModel
from accounts.ports.credential_store import CredentialStore
from core.domain.exceptions import ConflictError
from core.domain.value_objects import Email, Role


class DjangoCredentialStore(CredentialStore):
    """
    Django ORM implementation of CredentialStore.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: PrincipalModel) -> Principal:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Principal model

        Returns:
            Principal domain entity
        """
        return Principal(
            id=model.id,
            email=Email(model.email),
            secret_hash=model.secret_hash,
            role=Role(model.role),
            owned_brand_id=model.owned_brand_id,
            full_name=model.full_name,
            phone=model.phone,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _insert(self, principal: Principal) -> PrincipalModel:
        model = PrincipalModel(
            id=principal.id,
            email=str(principal.email),
            secret_hash=principal.secret_hash,
            role=principal.role.value,
            owned_brand_id=principal.owned_brand_id,
            full_name=principal.full_name,
            phone=principal.phone,
        )
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except IntegrityError as e:
            raise ConflictError("An account with this email already exists") from e
        return model

    async def hash_secret(self, raw_secret: str) -> str:
        """
        Hash a raw secret with the configured password hasher.

        Args:
            raw_secret: Plain-text secret

        Returns:
            Encoded hash
        """
        return await sync_to_async(make_password)(raw_secret)

    async def create(self, principal: Principal) -> Principal:
        """
        Persist a new principal.

        Args:
            principal: Principal entity to insert

        Returns:
            Saved principal entity
        """
        model = await sync_to_async(self._insert)(principal)
        return self._to_domain(model)

    async def find_by_email(self, email: str) -> Optional[Principal]:
        """
        Find a principal by email, case-insensitively.

        Args:
            email: Login email

        Returns:
            Principal entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(PrincipalModel.objects.get)(
                email=(email or "").strip().lower()
            )
            return self._to_domain(model)
        except PrincipalModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_id(self, principal_id: uuid.UUID) -> Optional[Principal]:
        """
        Find a principal by ID.

        Args:
            principal_id: Principal UUID

        Returns:
            Principal entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(PrincipalModel.objects.get)(id=principal_id)
            return self._to_domain(model)
        except PrincipalModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def verify_secret(self, principal: Principal, presented_secret: str) -> bool:
        """
        Compare a presented secret with the stored hash.

        ``check_password`` compares in constant time.

        Args:
            principal: Principal whose hash is checked
            presented_secret: Plain-text secret

        Returns:
            True if the secret matches
        """
        return await sync_to_async(check_password)(presented_secret, principal.secret_hash)

    def _update(self, principal: Principal) -> int:
        # pylint: disable=no-member
        qs = PrincipalModel.objects.filter(id=principal.id)
        try:
            with transaction.atomic():
                return qs.update(
                    email=str(principal.email),
                    secret_hash=principal.secret_hash,
                    full_name=principal.full_name,
                    phone=principal.phone,
                    updated_at=principal.updated_at,
                )
        except IntegrityError as e:
            raise ConflictError("An account with this email already exists") from e

    async def update(self, principal: Principal) -> bool:
        """
        Write a principal's profile fields and secret hash.

        Args:
            principal: Principal entity with the new values

        Returns:
            True if a record was updated
        """
        return await sync_to_async(self._update)(principal) > 0

    async def list_by_role(self, role: Optional[Role] = None) -> List[Principal]:
        """
        List principals, newest first.

        Args:
            role: Role filter

        Returns:
            List of Principal entities
        """
        # pylint: disable=no-member
        qs = PrincipalModel.objects.all().order_by("-created_at")
        if role is not None:
            qs = qs.filter(role=role.value)
        models = await sync_to_async(list)(qs)
        return [self._to_domain(model) for model in models]
