"""
Favorite handlers.

Handlers for a client's product bookmarks.
"""
from typing import List

from authorization.kernel import AuthorizationKernel
from authorization.policy import Action
from brands.application.commands.favorite_commands import (
    AddFavoriteCommand,
    RemoveFavoriteCommand,
)
from brands.application.dto.brand_dto import FavoriteStatusDTO, ProductDTO
from brands.application.queries.favorite_queries import CheckFavoriteQuery, ListFavoritesQuery
from brands.domain.favorite import Favorite
from brands.ports.brand_repository import BrandRepository
from brands.ports.favorite_repository import FavoriteRepository
from brands.ports.product_repository import ProductRepository
from core.domain.exceptions import ResourceNotFoundError


class AddFavoriteHandler:
    """Handler for AddFavoriteCommand."""

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        product_repository: ProductRepository,
        brand_repository: BrandRepository,
        kernel: AuthorizationKernel,
    ):
        """Initialize handler with repositories."""
        self.favorite_repository = favorite_repository
        self.product_repository = product_repository
        self.brand_repository = brand_repository
        self.kernel = kernel

    async def handle(self, command: AddFavoriteCommand) -> ProductDTO:
        """
        Handle add favorite command.

        Only products visible in the public catalog can be bookmarked.

        Returns:
            ProductDTO of the bookmarked product

        Raises:
            ResourceNotFoundError: If the product is not publicly visible
            ConflictError: If it is already a favorite
        """
        await self.kernel.require(command.actor, Action.MANAGE_FAVORITES)

        product = await self.product_repository.find_by_id(command.product_id)
        brand = await self.brand_repository.find_by_id(product.brand_id) if product else None
        if brand is None or not brand.is_public:
            raise ResourceNotFoundError("Product not found")

        await self.favorite_repository.add(
            Favorite.create(principal_id=command.actor.principal_id, product_id=product.id)
        )
        return ProductDTO.from_entity(product, brand_name=brand.name)


class RemoveFavoriteHandler:
    """Handler for RemoveFavoriteCommand."""

    def __init__(self, favorite_repository: FavoriteRepository, kernel: AuthorizationKernel):
        """Initialize handler with repositories."""
        self.favorite_repository = favorite_repository
        self.kernel = kernel

    async def handle(self, command: RemoveFavoriteCommand) -> None:
        """
        Handle remove favorite command.

        Raises:
            ResourceNotFoundError: If the product was not a favorite
        """
        await self.kernel.require(command.actor, Action.MANAGE_FAVORITES)
        removed = await self.favorite_repository.remove(
            command.actor.principal_id, command.product_id
        )
        if not removed:
            raise ResourceNotFoundError("Favorite not found")


class ListFavoritesHandler:
    """Handler for ListFavoritesQuery."""

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        product_repository: ProductRepository,
        brand_repository: BrandRepository,
        kernel: AuthorizationKernel,
    ):
        """Initialize handler with repositories."""
        self.favorite_repository = favorite_repository
        self.product_repository = product_repository
        self.brand_repository = brand_repository
        self.kernel = kernel

    async def handle(self, query: ListFavoritesQuery) -> List[ProductDTO]:
        """
        Handle list favorites query.

        Favorites whose brand is no longer approved are hidden, not removed.

        Returns:
            List of ProductDTO, most recently bookmarked first
        """
        await self.kernel.require(query.actor, Action.MANAGE_FAVORITES)

        result = []
        for product_id in await self.favorite_repository.list_product_ids(
            query.actor.principal_id
        ):
            product = await self.product_repository.find_by_id(product_id)
            if product is None:
                continue
            brand = await self.brand_repository.find_by_id(product.brand_id)
            if brand is None or not brand.is_public:
                continue
            result.append(ProductDTO.from_entity(product, brand_name=brand.name))
        return result


class CheckFavoriteHandler:
    """Handler for CheckFavoriteQuery."""

    def __init__(self, favorite_repository: FavoriteRepository, kernel: AuthorizationKernel):
        """Initialize handler with repositories."""
        self.favorite_repository = favorite_repository
        self.kernel = kernel

    async def handle(self, query: CheckFavoriteQuery) -> FavoriteStatusDTO:
        """Handle check favorite query."""
        await self.kernel.require(query.actor, Action.MANAGE_FAVORITES)
        favorite = await self.favorite_repository.find(query.actor.principal_id, query.product_id)
        return FavoriteStatusDTO(product_id=query.product_id, is_favorite=favorite is not None)
