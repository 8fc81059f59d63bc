"""
Brand API views.

Public catalog reads for every visitor, plus the brand owner's console:
their own brand and profile edits.
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.brands.serializers import (
    BrandDTOSerializer,
    BrandProfileSerializer,
    BrandWithProductsSerializer,
    ProductDTOSerializer,
)
from authorization.kernel import AuthorizationKernel
from brands.application.commands.update_brand_profile import UpdateBrandProfileCommand
from brands.application.handlers.brand_profile_handlers import (
    GetOwnBrandHandler,
    UpdateBrandProfileHandler,
)
from brands.application.handlers.catalog_handlers import (
    GetPublicBrandHandler,
    ListPublicBrandsHandler,
    ListPublicProductsHandler,
)
from brands.application.queries.get_own_brand import GetOwnBrandQuery
from brands.application.queries.public_catalog import (
    GetPublicBrandQuery,
    ListPublicBrandsQuery,
    ListPublicProductsQuery,
)
from brands.application.services.catalog_cache_service import CatalogCacheService
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.infrastructure.repositories.django_product_repository import DjangoProductRepository
from core.infrastructure.cache_adapters import cache_adapter
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_brand_repo = DjangoBrandRepository()
_product_repo = DjangoProductRepository()
_kernel = AuthorizationKernel(brand_repository=_brand_repo, product_repository=_product_repo)
_catalog_cache = CatalogCacheService(cache_adapter)

tracer = get_tracer(__name__)

TRUTHY = ("1", "true", "yes")


class ListBrandsView(APIView):
    """View for the public brand list."""

    featured_only = False

    @extend_schema(
        operation_id="list_brands",
        summary="List Brands",
        description="List approved brands, newest first. Pass featured=true for featured brands only.",
        tags=["Brands"],
        parameters=[
            OpenApiParameter(
                name="featured",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only featured brands",
            ),
        ],
        responses={200: BrandDTOSerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List public brands."""
        return async_to_sync(self._handle_list_brands)(request)

    async def _handle_list_brands(self, request: Request) -> Response:
        """Async handler for list brands."""
        with tracer.start_as_current_span("list_public_brands") as span:
            featured_only = self.featured_only or (
                request.query_params.get("featured", "").lower() in TRUTHY
            )
            span.set_attribute("operation", "list_public_brands")
            span.set_attribute("featured_only", featured_only)

            handler = ListPublicBrandsHandler(
                brand_repository=_brand_repo, cache_service=_catalog_cache
            )
            result = await handler.handle(ListPublicBrandsQuery(featured_only=featured_only))

            span.set_attribute("brands.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(BrandDTOSerializer(result, many=True).data, status=status.HTTP_200_OK)


class ListFeaturedBrandsView(ListBrandsView):
    """View for featured brands."""

    featured_only = True


class OwnBrandView(APIView):
    """View for the brand owner's own brand."""

    products_only = False

    @extend_schema(
        operation_id="get_own_brand",
        summary="Get Own Brand",
        description=(
            "Return the signed-in brand owner's brand with all of its products, "
            "whatever the brand's status."
        ),
        tags=["Brands"],
        responses={
            200: BrandWithProductsSerializer,
            401: {"description": "Unauthorized - Missing or invalid token"},
            403: {"description": "Not a brand owner"},
            404: {"description": "Brand not found"},
        },
    )
    def get(self, request: Request) -> Response:
        """Get own brand."""
        return async_to_sync(self._handle_get_own_brand)(request)

    async def _handle_get_own_brand(self, request: Request) -> Response:
        """Async handler for own brand."""
        with tracer.start_as_current_span("get_own_brand") as span:
            span.set_attribute("operation", "get_own_brand")

            handler = GetOwnBrandHandler(
                brand_repository=_brand_repo,
                product_repository=_product_repo,
                kernel=_kernel,
            )
            result = await handler.handle(
                GetOwnBrandQuery(actor=getattr(request, "principal", None))
            )

            span.set_attribute("brand.id", str(result.brand.id))
            span.set_attribute("brand.status", result.brand.status)
            span.set_status(Status(StatusCode.OK))
            if self.products_only:
                return Response(
                    ProductDTOSerializer(result.products, many=True).data,
                    status=status.HTTP_200_OK,
                )
            return Response(BrandWithProductsSerializer(result).data, status=status.HTTP_200_OK)


class OwnBrandProductsView(OwnBrandView):
    """View for the brand owner's product list."""

    products_only = True


class BrandDetailView(APIView):
    """View for a public brand page and profile edits."""

    @extend_schema(
        operation_id="get_brand",
        summary="Get Brand",
        description="Return an approved brand with its products.",
        tags=["Brands"],
        responses={
            200: BrandWithProductsSerializer,
            404: {"description": "Brand not found"},
        },
    )
    def get(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Get a public brand."""
        return async_to_sync(self._handle_get_brand)(request, brand_id)

    async def _handle_get_brand(self, _request: Request, brand_id: uuid.UUID) -> Response:
        """Async handler for get brand."""
        with tracer.start_as_current_span("get_public_brand") as span:
            span.set_attribute("operation", "get_public_brand")
            span.set_attribute("brand.id", str(brand_id))

            handler = GetPublicBrandHandler(
                brand_repository=_brand_repo, product_repository=_product_repo
            )
            result = await handler.handle(GetPublicBrandQuery(brand_id=brand_id))

            span.set_status(Status(StatusCode.OK))
            return Response(BrandWithProductsSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_brand",
        summary="Update Brand Profile",
        description=(
            "Edit a brand's descriptive fields. Allowed for the owning brand owner "
            "(unless the brand is banned) and for admins. Status cannot be changed here."
        ),
        tags=["Brands"],
        request=BrandProfileSerializer,
        responses={
            200: BrandDTOSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid token"},
            403: {"description": "Not the owner, or the brand is banned"},
            404: {"description": "Brand not found"},
            409: {"description": "Brand name already taken"},
        },
    )
    def patch(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Update a brand profile."""
        return async_to_sync(self._handle_update_brand)(request, brand_id)

    async def _handle_update_brand(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Async handler for update brand."""
        with tracer.start_as_current_span("update_brand_profile") as span:
            span.set_attribute("operation", "update_brand_profile")
            span.set_attribute("brand.id", str(brand_id))

            serializer = BrandProfileSerializer(data=request.data, partial=True)
            serializer.is_valid(raise_exception=True)
            span.set_attribute("changes", ",".join(sorted(serializer.validated_data)))

            handler = UpdateBrandProfileHandler(brand_repository=_brand_repo, kernel=_kernel)
            result = await handler.handle(
                UpdateBrandProfileCommand(
                    brand_id=brand_id,
                    actor=getattr(request, "principal", None),
                    changes=dict(serializer.validated_data),
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(BrandDTOSerializer(result).data, status=status.HTTP_200_OK)


class BrandProductsView(APIView):
    """View for an approved brand's products."""

    @extend_schema(
        operation_id="list_brand_products",
        summary="List Brand Products",
        description="List the products of an approved brand.",
        tags=["Brands"],
        parameters=[
            OpenApiParameter(
                name="search",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Match against product name or description",
            ),
        ],
        responses={
            200: ProductDTOSerializer(many=True),
            404: {"description": "Brand not found"},
        },
    )
    def get(self, request: Request, brand_id: uuid.UUID) -> Response:
        """List a brand's products."""
        return async_to_sync(self._handle_list_brand_products)(request, brand_id)

    async def _handle_list_brand_products(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Async handler for brand products."""
        with tracer.start_as_current_span("list_brand_products") as span:
            span.set_attribute("operation", "list_brand_products")
            span.set_attribute("brand.id", str(brand_id))

            handler = ListPublicProductsHandler(
                brand_repository=_brand_repo, product_repository=_product_repo
            )
            result = await handler.handle(
                ListPublicProductsQuery(
                    search=request.query_params.get("search"), brand_id=brand_id
                )
            )

            span.set_attribute("products.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result, many=True).data, status=status.HTTP_200_OK)
