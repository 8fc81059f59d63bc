"""
Catalog handlers.

Public directory reads and the admin brand list. Public reads never
show a brand that is not approved, nor products of such a brand.
"""
from typing import List, Optional

from authorization.kernel import AuthorizationKernel
from authorization.policy import Action
from brands.application.dto.brand_dto import BrandDTO, ProductDTO, PublicBrandDTO
from brands.application.queries.list_brands_for_admin import ListBrandsForAdminQuery
from brands.application.queries.public_catalog import (
    GetPublicBrandQuery,
    GetPublicProductQuery,
    ListPublicBrandsQuery,
    ListPublicProductsQuery,
)
from brands.application.services.catalog_cache_service import CatalogCacheService
from brands.ports.brand_repository import BrandRepository
from brands.ports.product_repository import ProductRepository
from core.domain.exceptions import DomainValidationError, ResourceNotFoundError
from core.domain.value_objects import BrandStatus


class ListPublicBrandsHandler:
    """Handler for ListPublicBrandsQuery."""

    def __init__(
        self,
        brand_repository: BrandRepository,
        cache_service: Optional[CatalogCacheService] = None,
    ):
        """Initialize handler with the brand repository and optional cache."""
        self.brand_repository = brand_repository
        self.cache_service = cache_service

    async def handle(self, query: ListPublicBrandsQuery) -> List[BrandDTO]:
        """
        Handle list public brands query.

        Args:
            query: ListPublicBrandsQuery

        Returns:
            List of approved BrandDTO, newest first
        """
        if self.cache_service:
            cached = await self.cache_service.get_public_brands(query.featured_only)
            if cached is not None:
                return cached

        brands = await self.brand_repository.list_by_status(
            BrandStatus.APPROVED, featured_only=query.featured_only
        )
        result = [BrandDTO.from_entity(brand) for brand in brands]

        if self.cache_service:
            await self.cache_service.set_public_brands(query.featured_only, result)
        return result


class GetPublicBrandHandler:
    """Handler for GetPublicBrandQuery."""

    def __init__(self, brand_repository: BrandRepository, product_repository: ProductRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.product_repository = product_repository

    async def handle(self, query: GetPublicBrandQuery) -> PublicBrandDTO:
        """
        Handle get public brand query.

        Raises:
            ResourceNotFoundError: If the brand does not exist or is not approved
        """
        brand = await self.brand_repository.find_by_id(query.brand_id)
        if brand is None or not brand.is_public:
            raise ResourceNotFoundError("Brand not found")

        products = await self.product_repository.list_by_brand(brand.id)
        return PublicBrandDTO(
            brand=BrandDTO.from_entity(brand),
            products=[ProductDTO.from_entity(p, brand_name=brand.name) for p in products],
        )


class ListPublicProductsHandler:
    """Handler for ListPublicProductsQuery."""

    def __init__(self, brand_repository: BrandRepository, product_repository: ProductRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.product_repository = product_repository

    async def handle(self, query: ListPublicProductsQuery) -> List[ProductDTO]:
        """
        Handle list public products query.

        Args:
            query: ListPublicProductsQuery

        Returns:
            List of ProductDTO whose brand is approved

        Raises:
            ResourceNotFoundError: If a brand filter names a brand that is not public
        """
        if query.brand_id is not None:
            brand = await self.brand_repository.find_by_id(query.brand_id)
            if brand is None or not brand.is_public:
                raise ResourceNotFoundError("Brand not found")
            products = await self.product_repository.list_by_brand(brand.id)
            if query.search:
                needle = query.search.strip().lower()
                products = [
                    p
                    for p in products
                    if needle in p.name.lower() or needle in (p.description or "").lower()
                ]
            return [ProductDTO.from_entity(p, brand_name=brand.name) for p in products]

        products = await self.product_repository.list_public(search=query.search)
        names = {}
        result = []
        for product in products:
            if product.brand_id not in names:
                brand = await self.brand_repository.find_by_id(product.brand_id)
                names[product.brand_id] = brand.name if brand else None
            result.append(ProductDTO.from_entity(product, brand_name=names[product.brand_id]))
        return result


class GetPublicProductHandler:
    """Handler for GetPublicProductQuery."""

    def __init__(self, brand_repository: BrandRepository, product_repository: ProductRepository):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.product_repository = product_repository

    async def handle(self, query: GetPublicProductQuery) -> ProductDTO:
        """
        Handle get public product query.

        Raises:
            ResourceNotFoundError: If the product does not exist or its brand
                is not approved
        """
        product = await self.product_repository.find_by_id(query.product_id)
        if product is None:
            raise ResourceNotFoundError("Product not found")
        brand = await self.brand_repository.find_by_id(product.brand_id)
        if brand is None or not brand.is_public:
            raise ResourceNotFoundError("Product not found")
        return ProductDTO.from_entity(product, brand_name=brand.name)


class ListBrandsForAdminHandler:
    """Handler for ListBrandsForAdminQuery."""

    def __init__(self, brand_repository: BrandRepository, kernel: AuthorizationKernel):
        """Initialize handler with repositories."""
        self.brand_repository = brand_repository
        self.kernel = kernel

    async def handle(self, query: ListBrandsForAdminQuery) -> List[BrandDTO]:
        """
        Handle admin brand list query.

        Args:
            query: ListBrandsForAdminQuery

        Returns:
            List of BrandDTO in every status, or the requested one

        Raises:
            AuthorizationError: If the actor is not an admin
            DomainValidationError: If the status filter is unknown
        """
        await self.kernel.require(query.actor, Action.ADMIN_LIST_BRANDS)

        status = None
        if query.status:
            try:
                status = BrandStatus(query.status)
            except ValueError as e:
                raise DomainValidationError(f"Unknown brand status: {query.status}") from e

        brands = await self.brand_repository.list_by_status(status)
        return [BrandDTO.from_entity(brand) for brand in brands]
