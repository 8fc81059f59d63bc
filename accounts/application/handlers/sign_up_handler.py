"""
SignUpHandler.

Handles the sign-up command. A brand owner sign-up creates the brand
and the principal together or not at all.
"""
import asyncio
import logging
import uuid
from typing import Optional, Tuple

from accounts.application.commands.sign_up import SignUpCommand
from accounts.application.dto.principal_dto import PrincipalDTO, SignUpResultDTO
from accounts.domain.events import AccountProvisioned
from accounts.domain.principal import MIN_SECRET_LENGTH, Principal
from accounts.ports.credential_store import CredentialStore
from accounts.ports.token_codec import TokenCodec
from brands.application.dto.brand_dto import BrandDTO
from brands.domain.brand import Brand
from brands.domain.events import BrandCreated
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import ConflictError, DomainValidationError
from core.domain.value_objects import BrandStatus, Email, Role
from core.infrastructure.events import event_bus
from core.metrics import signup_compensations_total, signups_total

logger = logging.getLogger(__name__)

SELF_SERVICE_ROLES = (Role.CLIENT, Role.BRAND_OWNER)


class SignUpHandler:
    """Handler for SignUpCommand."""

    def __init__(
        self,
        credential_store: CredentialStore,
        brand_repository: BrandRepository,
        token_codec: TokenCodec,
        initial_brand_status: BrandStatus = BrandStatus.APPROVED,
    ):
        """Initialize handler with the stores and the brand sign-up status."""
        self.credential_store = credential_store
        self.brand_repository = brand_repository
        self.token_codec = token_codec
        self.initial_brand_status = initial_brand_status

    async def handle(self, command: SignUpCommand) -> SignUpResultDTO:
        """
        Handle sign-up command.

        Every check that can fail the operation runs before the first write.

        Args:
            command: SignUpCommand

        Returns:
            SignUpResultDTO with the principal, its token and, for a brand
            owner, the new brand

        Raises:
            DomainValidationError: If the input is malformed
            ConflictError: If the email (or brand name) is already taken
        """
        role = self._parse_kind(command.kind)
        email = self._parse_email(command.email)
        if not command.password or len(command.password) < MIN_SECRET_LENGTH:
            raise DomainValidationError(
                f"Password must be at least {MIN_SECRET_LENGTH} characters"
            )

        if await self.credential_store.find_by_email(email.value):
            raise ConflictError("An account with this email already exists")

        secret_hash = await self.credential_store.hash_secret(command.password)

        if role == Role.CLIENT:
            principal = self._build_principal(command, email, secret_hash, Role.CLIENT)
            saved = await asyncio.shield(self.credential_store.create(principal))
            brand = None
        else:
            saved, brand = await self._sign_up_brand_owner(command, email, secret_hash)

        signups_total.labels(kind=role.value).inc()
        logger.info(
            "Account provisioned",
            extra={
                "principal_id": str(saved.id),
                "role": role.value,
                "brand_id": str(brand.id) if brand else None,
            },
        )

        if brand:
            await event_bus.publish(
                BrandCreated(
                    aggregate_id=str(brand.id),
                    owner_id=saved.id,
                    name=brand.name,
                    status=brand.status.value,
                )
            )
        await event_bus.publish(
            AccountProvisioned(
                aggregate_id=str(saved.id),
                role=role.value,
                brand_id=brand.id if brand else None,
            )
        )

        return SignUpResultDTO(
            principal=PrincipalDTO.from_entity(saved),
            token=self.token_codec.issue(saved),
            brand=BrandDTO.from_entity(brand) if brand else None,
        )

    async def _sign_up_brand_owner(
        self, command: SignUpCommand, email: Email, secret_hash: str
    ) -> Tuple[Principal, Brand]:
        name = (command.brand_name or "").strip()
        if not name:
            raise DomainValidationError("Brand name is required for a brand owner")
        if await self.brand_repository.find_by_name(name):
            raise ConflictError("A brand with this name already exists")

        principal_id = uuid.uuid4()
        try:
            brand = Brand.create(
                owner_id=principal_id,
                name=name,
                status=self.initial_brand_status,
                **(command.brand_profile or {}),
            )
        except (TypeError, ValueError) as e:
            raise DomainValidationError(str(e)) from e

        principal = self._build_principal(
            command,
            email,
            secret_hash,
            Role.BRAND_OWNER,
            owned_brand_id=brand.id,
            principal_id=principal_id,
        )
        return await asyncio.shield(self._write_brand_then_principal(brand, principal))

    async def _write_brand_then_principal(
        self, brand: Brand, principal: Principal
    ) -> Tuple[Principal, Brand]:
        # Brand first, so no stored principal ever points at a missing brand.
        saved_brand = await self.brand_repository.create(brand)
        try:
            saved_principal = await self.credential_store.create(principal)
        except Exception:
            logger.warning(
                "Principal write failed; removing orphan brand",
                extra={"brand_id": str(saved_brand.id), "principal_id": str(principal.id)},
            )
            await self._remove_orphan_brand(saved_brand.id)
            raise
        return saved_principal, saved_brand

    async def _remove_orphan_brand(self, brand_id: uuid.UUID) -> None:
        signup_compensations_total.inc()
        try:
            await self.brand_repository.delete(brand_id)
        except Exception:  # pylint: disable=broad-exception-caught
            # The principal-write failure is re-raised by the caller.
            logger.exception("Failed to remove orphan brand", extra={"brand_id": str(brand_id)})

    @staticmethod
    def _parse_kind(kind: str) -> Role:
        try:
            role = Role(kind)
        except ValueError as e:
            raise DomainValidationError(
                'Invalid account kind. Must be "client" or "brand_owner"'
            ) from e
        if role not in SELF_SERVICE_ROLES:
            raise DomainValidationError(
                'Invalid account kind. Must be "client" or "brand_owner"'
            )
        return role

    @staticmethod
    def _parse_email(value: str) -> Email:
        try:
            return Email(value)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

    @staticmethod
    def _build_principal(
        command: SignUpCommand,
        email: Email,
        secret_hash: str,
        role: Role,
        owned_brand_id: Optional[uuid.UUID] = None,
        principal_id: Optional[uuid.UUID] = None,
    ) -> Principal:
        try:
            return Principal.create(
                email=email.value,
                secret_hash=secret_hash,
                role=role,
                full_name=command.full_name,
                phone=command.phone,
                owned_brand_id=owned_brand_id,
                principal_id=principal_id,
            )
        except ValueError as e:
            raise DomainValidationError(str(e)) from e
