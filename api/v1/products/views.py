"""
Product API views.

Public product reads, and product management for brand owners
(their own brand only) and admins.
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.brands.serializers import ProductDTOSerializer
from api.v1.products.serializers import (
    CreateProductRequestSerializer,
    UpdateProductRequestSerializer,
)
from authorization.kernel import AuthorizationKernel
from brands.application.commands.product_commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from brands.application.handlers.catalog_handlers import (
    GetPublicProductHandler,
    ListPublicProductsHandler,
)
from brands.application.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from brands.application.queries.public_catalog import (
    GetPublicProductQuery,
    ListPublicProductsQuery,
)
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.infrastructure.repositories.django_product_repository import DjangoProductRepository
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_brand_repo = DjangoBrandRepository()
_product_repo = DjangoProductRepository()
_kernel = AuthorizationKernel(brand_repository=_brand_repo, product_repository=_product_repo)

tracer = get_tracer(__name__)


def _images(validated_images):
    return [dict(image) for image in validated_images]


class ProductListView(APIView):
    """View for the public product list and product creation."""

    @extend_schema(
        operation_id="list_products",
        summary="List Products",
        description="List products of approved brands, newest first.",
        tags=["Products"],
        parameters=[
            OpenApiParameter(
                name="search",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Match against product name or description",
            ),
            OpenApiParameter(
                name="brand_id",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only products of this brand",
            ),
        ],
        responses={200: ProductDTOSerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List public products."""
        return async_to_sync(self._handle_list_products)(request)

    async def _handle_list_products(self, request: Request) -> Response:
        """Async handler for list products."""
        with tracer.start_as_current_span("list_public_products") as span:
            span.set_attribute("operation", "list_public_products")

            brand_id = request.query_params.get("brand_id")
            if brand_id:
                try:
                    brand_id = uuid.UUID(brand_id)
                except ValueError:
                    span.set_status(Status(StatusCode.ERROR, "Invalid brand_id"))
                    return Response(
                        {"error": {"code": "VALIDATION_ERROR", "message": "brand_id must be a UUID"}},
                        status=status.HTTP_400_BAD_REQUEST,
                    )

            handler = ListPublicProductsHandler(
                brand_repository=_brand_repo, product_repository=_product_repo
            )
            result = await handler.handle(
                ListPublicProductsQuery(
                    search=request.query_params.get("search"), brand_id=brand_id or None
                )
            )

            span.set_attribute("products.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_product",
        summary="Create Product",
        description=(
            "Add a product. Brand owners add to their own brand; admins must pass brand_id. "
            "Banned brands cannot add products."
        ),
        tags=["Products"],
        request=CreateProductRequestSerializer,
        responses={
            201: ProductDTOSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid token"},
            403: {"description": "Wrong role, not the owner, or the brand is banned"},
            404: {"description": "Brand not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a product."""
        return async_to_sync(self._handle_create_product)(request)

    async def _handle_create_product(self, request: Request) -> Response:
        """Async handler for create product."""
        with tracer.start_as_current_span("create_product") as span:
            span.set_attribute("operation", "create_product")

            serializer = CreateProductRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            data = serializer.validated_data

            handler = CreateProductHandler(
                brand_repository=_brand_repo,
                product_repository=_product_repo,
                kernel=_kernel,
            )
            result = await handler.handle(
                CreateProductCommand(
                    actor=getattr(request, "principal", None),
                    name=data["name"],
                    price=data["price"],
                    images=_images(data["images"]),
                    purchase_link=data["purchase_link"],
                    description=data.get("description"),
                    brand_id=data.get("brand_id"),
                )
            )

            span.set_attribute("product.id", str(result.id))
            span.set_attribute("brand.id", str(result.brand_id))
            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result).data, status=status.HTTP_201_CREATED)


class ProductDetailView(APIView):
    """View for reading, updating and deleting one product."""

    @extend_schema(
        operation_id="get_product",
        summary="Get Product",
        description="Return a product of an approved brand.",
        tags=["Products"],
        responses={
            200: ProductDTOSerializer,
            404: {"description": "Product not found"},
        },
    )
    def get(self, request: Request, product_id: uuid.UUID) -> Response:
        """Get a public product."""
        return async_to_sync(self._handle_get_product)(request, product_id)

    async def _handle_get_product(self, _request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for get product."""
        with tracer.start_as_current_span("get_public_product") as span:
            span.set_attribute("operation", "get_public_product")
            span.set_attribute("product.id", str(product_id))

            handler = GetPublicProductHandler(
                brand_repository=_brand_repo, product_repository=_product_repo
            )
            result = await handler.handle(GetPublicProductQuery(product_id=product_id))

            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_product",
        summary="Update Product",
        description="Edit a product. Allowed for the owning brand owner and for admins.",
        tags=["Products"],
        request=UpdateProductRequestSerializer,
        responses={
            200: ProductDTOSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid token"},
            403: {"description": "Wrong role, not the owner, or the brand is banned"},
            404: {"description": "Product not found"},
        },
    )
    def patch(self, request: Request, product_id: uuid.UUID) -> Response:
        """Update a product."""
        return async_to_sync(self._handle_update_product)(request, product_id)

    async def _handle_update_product(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for update product."""
        with tracer.start_as_current_span("update_product") as span:
            span.set_attribute("operation", "update_product")
            span.set_attribute("product.id", str(product_id))

            serializer = UpdateProductRequestSerializer(data=request.data, partial=True)
            serializer.is_valid(raise_exception=True)
            changes = dict(serializer.validated_data)
            if "images" in changes:
                changes["images"] = _images(changes["images"])

            handler = UpdateProductHandler(product_repository=_product_repo, kernel=_kernel)
            result = await handler.handle(
                UpdateProductCommand(
                    product_id=product_id,
                    actor=getattr(request, "principal", None),
                    changes=changes,
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_product",
        summary="Delete Product",
        description="Delete a product and every favorite pointing at it.",
        tags=["Products"],
        responses={
            204: None,
            401: {"description": "Unauthorized - Missing or invalid token"},
            403: {"description": "Wrong role, not the owner, or the brand is banned"},
            404: {"description": "Product not found"},
        },
    )
    def delete(self, request: Request, product_id: uuid.UUID) -> Response:
        """Delete a product."""
        return async_to_sync(self._handle_delete_product)(request, product_id)

    async def _handle_delete_product(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for delete product."""
        with tracer.start_as_current_span("delete_product") as span:
            span.set_attribute("operation", "delete_product")
            span.set_attribute("product.id", str(product_id))

            handler = DeleteProductHandler(product_repository=_product_repo, kernel=_kernel)
            await handler.handle(
                DeleteProductCommand(
                    product_id=product_id, actor=getattr(request, "principal", None)
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)
