"""
Product handlers.

Handlers for creating, updating and deleting products. Each one asks
the authorization kernel before touching the repository.
"""
import logging
import uuid
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor
from authorization.kernel import AuthorizationKernel
from authorization.policy import Action, ResourceRef
from brands.application.commands.product_commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from brands.application.dto.brand_dto import ProductDTO
from brands.domain.events import ProductCreated, ProductDeleted, ProductUpdated
from brands.domain.product import Product
from brands.ports.brand_repository import BrandRepository
from brands.ports.product_repository import ProductRepository
from core.domain.exceptions import DomainValidationError, ResourceNotFoundError
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class CreateProductHandler:
    """Handler for CreateProductCommand."""

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

    async def handle(self, command: CreateProductCommand) -> ProductDTO:
        """
        Handle create product command.

        Args:
            command: CreateProductCommand

        Returns:
            ProductDTO for the new product

        Raises:
            AuthorizationError: If the kernel denies CREATE_PRODUCT
            DomainValidationError: If the product fields are malformed
        """
        brand_id = await self._resolve_brand_id(command.actor, command.brand_id)
        await self.kernel.require(command.actor, Action.CREATE_PRODUCT, ResourceRef.brand(brand_id))

        try:
            product = Product.create(
                brand_id=brand_id,
                name=command.name,
                price=command.price,
                images=command.images,
                purchase_link=command.purchase_link,
                description=command.description,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DomainValidationError(str(e)) from e

        saved = await self.product_repository.save(product)

        logger.info(
            "Product created",
            extra={"product_id": str(saved.id), "brand_id": str(brand_id)},
        )
        await event_bus.publish(
            ProductCreated(
                aggregate_id=str(saved.id),
                brand_id=brand_id,
                actor_id=command.actor.principal_id,
                name=saved.name,
            )
        )
        return ProductDTO.from_entity(saved)

    async def _resolve_brand_id(
        self, actor: Optional[PrincipalDescriptor], brand_id: Optional[uuid.UUID]
    ) -> Optional[uuid.UUID]:
        if brand_id is not None or actor is None:
            return brand_id
        if actor.is_admin:
            raise DomainValidationError("brand_id is required")
        # Clients own nothing; the kernel denies their role.
        brand = await self.brand_repository.find_by_owner(actor.principal_id)
        return brand.id if brand else None


class UpdateProductHandler:
    """Handler for UpdateProductCommand."""

    def __init__(self, product_repository: ProductRepository, kernel: AuthorizationKernel):
        """Initialize handler with repositories."""
        self.product_repository = product_repository
        self.kernel = kernel

    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        """
        Handle update product command.

        Args:
            command: UpdateProductCommand

        Returns:
            Updated ProductDTO

        Raises:
            AuthorizationError: If the kernel denies UPDATE_PRODUCT
            DomainValidationError: If a change is malformed
        """
        await self.kernel.require(
            command.actor, Action.UPDATE_PRODUCT, ResourceRef.product(command.product_id)
        )

        product = await self.product_repository.find_by_id(command.product_id)
        if product is None:
            raise ResourceNotFoundError(f"Product {command.product_id} not found")

        try:
            updated = product.update(**command.changes)
        except (KeyError, TypeError, ValueError) as e:
            raise DomainValidationError(str(e)) from e

        saved = await self.product_repository.save(updated)

        await event_bus.publish(
            ProductUpdated(
                aggregate_id=str(saved.id),
                brand_id=saved.brand_id,
                actor_id=command.actor.principal_id,
            )
        )
        return ProductDTO.from_entity(saved)


class DeleteProductHandler:
    """Handler for DeleteProductCommand."""

    def __init__(self, product_repository: ProductRepository, kernel: AuthorizationKernel):
        """Initialize handler with repositories."""
        self.product_repository = product_repository
        self.kernel = kernel

    async def handle(self, command: DeleteProductCommand) -> None:
        """
        Handle delete product command.

        Favorites pointing at the product go with it.

        Args:
            command: DeleteProductCommand

        Raises:
            AuthorizationError: If the kernel denies DELETE_PRODUCT
        """
        await self.kernel.require(
            command.actor, Action.DELETE_PRODUCT, ResourceRef.product(command.product_id)
        )

        product = await self.product_repository.find_by_id(command.product_id)
        if product is None or not await self.product_repository.delete(product.id):
            raise ResourceNotFoundError(f"Product {command.product_id} not found")

        logger.info(
            "Product deleted",
            extra={"product_id": str(product.id), "brand_id": str(product.brand_id)},
        )
        await event_bus.publish(
            ProductDeleted(
                aggregate_id=str(product.id),
                brand_id=product.brand_id,
                actor_id=command.actor.principal_id,
            )
        )
