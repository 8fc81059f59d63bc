"""
Favorites API views.

A client's list of saved products. Only clients may use these endpoints.
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.brands.serializers import ProductDTOSerializer
from api.v1.favorites.serializers import AddFavoriteRequestSerializer, FavoriteStatusSerializer
from authorization.kernel import AuthorizationKernel
from brands.application.commands.favorite_commands import AddFavoriteCommand, RemoveFavoriteCommand
from brands.application.handlers.favorite_handlers import (
    AddFavoriteHandler,
    CheckFavoriteHandler,
    ListFavoritesHandler,
    RemoveFavoriteHandler,
)
from brands.application.queries.favorite_queries import CheckFavoriteQuery, ListFavoritesQuery
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.infrastructure.repositories.django_favorite_repository import DjangoFavoriteRepository
from brands.infrastructure.repositories.django_product_repository import DjangoProductRepository
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_brand_repo = DjangoBrandRepository()
_product_repo = DjangoProductRepository()
_favorite_repo = DjangoFavoriteRepository()
_kernel = AuthorizationKernel(brand_repository=_brand_repo, product_repository=_product_repo)

tracer = get_tracer(__name__)

CLIENT_ERRORS = {
    401: {"description": "Unauthorized - Missing or invalid token"},
    403: {"description": "Only clients have favorites"},
}


class FavoriteListView(APIView):
    """View for listing and adding favorites."""

    @extend_schema(
        operation_id="list_favorites",
        summary="List Favorites",
        description="List the client's favorite products, hiding products of brands that are not approved.",
        tags=["Favorites"],
        responses={200: ProductDTOSerializer(many=True), **CLIENT_ERRORS},
    )
    def get(self, request: Request) -> Response:
        """List favorites."""
        return async_to_sync(self._handle_list_favorites)(request)

    async def _handle_list_favorites(self, request: Request) -> Response:
        """Async handler for list favorites."""
        with tracer.start_as_current_span("list_favorites") as span:
            span.set_attribute("operation", "list_favorites")

            handler = ListFavoritesHandler(
                favorite_repository=_favorite_repo,
                product_repository=_product_repo,
                brand_repository=_brand_repo,
                kernel=_kernel,
            )
            result = await handler.handle(
                ListFavoritesQuery(actor=getattr(request, "principal", None))
            )

            span.set_attribute("favorites.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="add_favorite",
        summary="Add Favorite",
        description="Save a product of an approved brand to the client's favorites.",
        tags=["Favorites"],
        request=AddFavoriteRequestSerializer,
        responses={
            201: ProductDTOSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Product not found"},
            409: {"description": "Already a favorite"},
            **CLIENT_ERRORS,
        },
    )
    def post(self, request: Request) -> Response:
        """Add a favorite."""
        return async_to_sync(self._handle_add_favorite)(request)

    async def _handle_add_favorite(self, request: Request) -> Response:
        """Async handler for add favorite."""
        with tracer.start_as_current_span("add_favorite") as span:
            span.set_attribute("operation", "add_favorite")

            serializer = AddFavoriteRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            product_id = serializer.validated_data["product_id"]
            span.set_attribute("product.id", str(product_id))

            handler = AddFavoriteHandler(
                favorite_repository=_favorite_repo,
                product_repository=_product_repo,
                brand_repository=_brand_repo,
                kernel=_kernel,
            )
            result = await handler.handle(
                AddFavoriteCommand(product_id=product_id, actor=getattr(request, "principal", None))
            )

            span.set_status(Status(StatusCode.OK))
            return Response(ProductDTOSerializer(result).data, status=status.HTTP_201_CREATED)


class FavoriteDetailView(APIView):
    """View for removing a favorite."""

    @extend_schema(
        operation_id="remove_favorite",
        summary="Remove Favorite",
        description="Remove a product from the client's favorites.",
        tags=["Favorites"],
        responses={
            204: None,
            404: {"description": "Not a favorite"},
            **CLIENT_ERRORS,
        },
    )
    def delete(self, request: Request, product_id: uuid.UUID) -> Response:
        """Remove a favorite."""
        return async_to_sync(self._handle_remove_favorite)(request, product_id)

    async def _handle_remove_favorite(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for remove favorite."""
        with tracer.start_as_current_span("remove_favorite") as span:
            span.set_attribute("operation", "remove_favorite")
            span.set_attribute("product.id", str(product_id))

            handler = RemoveFavoriteHandler(favorite_repository=_favorite_repo, kernel=_kernel)
            await handler.handle(
                RemoveFavoriteCommand(product_id=product_id, actor=getattr(request, "principal", None))
            )

            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)


class FavoriteCheckView(APIView):
    """View for checking whether a product is a favorite."""

    @extend_schema(
        operation_id="check_favorite",
        summary="Check Favorite",
        description="Tell whether a product is in the client's favorites.",
        tags=["Favorites"],
        responses={200: FavoriteStatusSerializer, **CLIENT_ERRORS},
    )
    def get(self, request: Request, product_id: uuid.UUID) -> Response:
        """Check a favorite."""
        return async_to_sync(self._handle_check_favorite)(request, product_id)

    async def _handle_check_favorite(self, request: Request, product_id: uuid.UUID) -> Response:
        """Async handler for check favorite."""
        with tracer.start_as_current_span("check_favorite") as span:
            span.set_attribute("operation", "check_favorite")
            span.set_attribute("product.id", str(product_id))

            handler = CheckFavoriteHandler(favorite_repository=_favorite_repo, kernel=_kernel)
            result = await handler.handle(
                CheckFavoriteQuery(product_id=product_id, actor=getattr(request, "principal", None))
            )

            span.set_attribute("is_favorite", result.is_favorite)
            span.set_status(Status(StatusCode.OK))
            return Response(FavoriteStatusSerializer(result).data, status=status.HTTP_200_OK)
