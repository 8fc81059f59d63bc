"""
Brand profile handlers.

Handlers for a brand owner's own-brand view and profile edits.
"""
import logging

from authorization.kernel import AuthorizationKernel
from authorization.policy import Action, ResourceRef
from brands.application.commands.update_brand_profile import UpdateBrandProfileCommand
from brands.application.dto.brand_dto import BrandDTO, OwnBrandDTO, ProductDTO
from brands.application.queries.get_own_brand import GetOwnBrandQuery
from brands.domain.events import BrandProfileUpdated
from brands.ports.brand_repository import BrandRepository
from brands.ports.product_repository import ProductRepository
from core.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    ResourceNotFoundError,
)
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class GetOwnBrandHandler:
    """Handler for GetOwnBrandQuery."""

    def __init__(
        self,
        brand_repository: BrandRepository,
        product_repository: ProductRepository,
        kernel: AuthorizationKernel,
    ):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.product_repository = product_repository
        self.kernel = kernel

    async def handle(self, query: GetOwnBrandQuery) -> OwnBrandDTO:
        """
        Handle own brand query.

        A banned owner can still read their brand and see its status.

        Args:
            query: GetOwnBrandQuery

        Returns:
            OwnBrandDTO with every product of the brand

        Raises:
            UnauthenticatedError: If there is no principal
            WrongRoleError: If the principal is not a brand owner
            ResourceNotFoundError: If the principal has no brand
        """
        actor = query.actor
        brand = await self.brand_repository.find_by_owner(actor.principal_id) if actor else None
        await self.kernel.require(
            actor, Action.READ_OWN_BRAND, ResourceRef.brand(brand.id if brand else None)
        )

        products = await self.product_repository.list_by_brand(brand.id)
        return OwnBrandDTO(
            brand=BrandDTO.from_entity(brand),
            products=[ProductDTO.from_entity(p, brand_name=brand.name) for p in products],
        )


class UpdateBrandProfileHandler:
    """Handler for UpdateBrandProfileCommand."""

    def __init__(self, brand_repository: BrandRepository, kernel: AuthorizationKernel):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.kernel = kernel

    async def handle(self, command: UpdateBrandProfileCommand) -> BrandDTO:
        """
        Handle update brand profile command.

        Args:
            command: UpdateBrandProfileCommand

        Returns:
            Updated BrandDTO

        Raises:
            AuthorizationError: If the kernel denies UPDATE_BRAND
            DomainValidationError: If a change is malformed or targets status
            ConflictError: If the new name belongs to another brand
        """
        await self.kernel.require(
            command.actor, Action.UPDATE_BRAND, ResourceRef.brand(command.brand_id)
        )

        brand = await self.brand_repository.find_by_id(command.brand_id)
        if brand is None:
            raise ResourceNotFoundError(f"Brand {command.brand_id} not found")

        try:
            updated = brand.update_profile(**command.changes)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        if updated.name.lower() != brand.name.lower():
            existing = await self.brand_repository.find_by_name(updated.name)
            if existing and existing.id != brand.id:
                raise ConflictError("A brand with this name already exists")

        saved = await self.brand_repository.save_profile(updated)

        logger.info(
            "Brand profile updated",
            extra={
                "brand_id": str(saved.id),
                "actor_id": str(command.actor.principal_id),
                "fields": sorted(command.changes),
            },
        )
        await event_bus.publish(
            BrandProfileUpdated(aggregate_id=str(saved.id), actor_id=command.actor.principal_id)
        )
        return BrandDTO.from_entity(saved)
