"""
Admin back-office API views.

These endpoints are used by admins to:
- Sign in to the back-office
- Review every brand and move it through its lifecycle
- List, edit and delete accounts
"""

import uuid

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.commands.delete_account import DeleteAccountCommand
from accounts.application.commands.sign_in import SignInCommand
from accounts.application.commands.update_profile import UpdateProfileCommand
from accounts.application.handlers.account_query_handlers import ListPrincipalsHandler
from accounts.application.handlers.delete_account_handler import DeleteAccountHandler
from accounts.application.handlers.profile_handlers import UpdateProfileHandler
from accounts.application.handlers.sign_in_handler import SignInHandler
from accounts.application.queries.list_principals import ListPrincipalsQuery
from accounts.infrastructure.repositories.django_account_eraser import DjangoAccountEraser
from accounts.infrastructure.repositories.django_credential_store import DjangoCredentialStore
from accounts.infrastructure.tokens.jwt_token_codec import JWTTokenCodec
from api.v1.admin.serializers import (
    BrandStatusFilterSerializer,
    RoleFilterSerializer,
    TransitionBrandStatusRequestSerializer,
)
from api.v1.auth.serializers import (
    PrincipalDTOSerializer,
    SignInRequestSerializer,
    SignInResponseSerializer,
    UpdateProfileRequestSerializer,
)
from api.v1.brands.serializers import BrandDTOSerializer
from authorization.kernel import AuthorizationKernel
from brands.application.commands.transition_brand_status import TransitionBrandStatusCommand
from brands.application.handlers.brand_lifecycle_handlers import TransitionBrandStatusHandler
from brands.application.handlers.catalog_handlers import ListBrandsForAdminHandler
from brands.application.queries.list_brands_for_admin import ListBrandsForAdminQuery
from brands.domain.services import BrandLifecycleManager
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.infrastructure.repositories.django_product_repository import DjangoProductRepository
from core.domain.value_objects import Role
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_credential_store = DjangoCredentialStore()
_account_eraser = DjangoAccountEraser()
_brand_repo = DjangoBrandRepository()
_product_repo = DjangoProductRepository()
_kernel = AuthorizationKernel(brand_repository=_brand_repo, product_repository=_product_repo)

tracer = get_tracer(__name__)

ADMIN_ERRORS = {
    401: {"description": "Unauthorized - Missing or invalid token"},
    403: {"description": "Admins only"},
}


class AdminSignInView(APIView):
    """View for back-office sign-in."""

    @extend_schema(
        operation_id="admin_sign_in",
        summary="Admin Sign In",
        description="Sign in to the back-office. Only admin accounts are accepted.",
        tags=["Admin"],
        request=SignInRequestSerializer,
        responses={
            200: SignInResponseSerializer,
            401: {"description": "Invalid credentials"},
            403: {"description": "Not an admin account"},
        },
    )
    def post(self, request: Request) -> Response:
        """Admin sign in."""
        return async_to_sync(self._handle_admin_sign_in)(request)

    async def _handle_admin_sign_in(self, request: Request) -> Response:
        """Async handler for admin sign in."""
        with tracer.start_as_current_span("admin_sign_in") as span:
            span.set_attribute("operation", "admin_sign_in")

            serializer = SignInRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            handler = SignInHandler(
                credential_store=_credential_store,
                token_codec=JWTTokenCodec.from_settings(),
            )
            result = await handler.handle(
                SignInCommand(
                    email=serializer.validated_data["email"],
                    password=serializer.validated_data["password"],
                    required_role=Role.ADMIN,
                )
            )

            span.set_attribute("principal.id", str(result.principal.id))
            span.set_status(Status(StatusCode.OK))
            return Response(SignInResponseSerializer(result).data, status=status.HTTP_200_OK)


class AdminBrandListView(APIView):
    """View for the back-office brand list."""

    @extend_schema(
        operation_id="admin_list_brands",
        summary="List All Brands",
        description="List brands in every status, newest first, optionally filtered by status.",
        tags=["Admin"],
        parameters=[
            OpenApiParameter(
                name="status",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                enum=["pending", "approved", "rejected", "banned"],
                description="Only brands in this status",
            ),
        ],
        responses={200: BrandDTOSerializer(many=True), **ADMIN_ERRORS},
    )
    def get(self, request: Request) -> Response:
        """List every brand."""
        return async_to_sync(self._handle_admin_list_brands)(request)

    async def _handle_admin_list_brands(self, request: Request) -> Response:
        """Async handler for admin brand list."""
        with tracer.start_as_current_span("admin_list_brands") as span:
            span.set_attribute("operation", "admin_list_brands")

            filters = BrandStatusFilterSerializer(data=request.query_params)
            filters.is_valid(raise_exception=True)
            status_filter = filters.validated_data.get("status")
            if status_filter:
                span.set_attribute("status_filter", status_filter)

            handler = ListBrandsForAdminHandler(brand_repository=_brand_repo, kernel=_kernel)
            result = await handler.handle(
                ListBrandsForAdminQuery(
                    actor=getattr(request, "principal", None), status=status_filter
                )
            )

            span.set_attribute("brands.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(BrandDTOSerializer(result, many=True).data, status=status.HTTP_200_OK)


class AdminBrandStatusView(APIView):
    """View for brand status changes."""

    @extend_schema(
        operation_id="transition_brand_status",
        summary="Change Brand Status",
        description=(
            "Move a brand through its lifecycle: pending to approved or rejected, "
            "approved to banned. Rejected and banned are final."
        ),
        tags=["Admin"],
        request=TransitionBrandStatusRequestSerializer,
        responses={
            200: BrandDTOSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Brand not found"},
            409: {"description": "Transition not allowed from the current status"},
            **ADMIN_ERRORS,
        },
    )
    def post(self, request: Request, brand_id: uuid.UUID) -> Response:
        """Change a brand's status."""
        return async_to_sync(self._handle_transition_brand_status)(request, brand_id)

    async def _handle_transition_brand_status(
        self, request: Request, brand_id: uuid.UUID
    ) -> Response:
        """Async handler for brand status change."""
        with tracer.start_as_current_span("transition_brand_status") as span:
            span.set_attribute("operation", "transition_brand_status")
            span.set_attribute("brand.id", str(brand_id))

            serializer = TransitionBrandStatusRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            target = serializer.validated_data["status"]
            span.set_attribute("brand.target_status", target)

            handler = TransitionBrandStatusHandler(
                lifecycle_manager=BrandLifecycleManager(brand_repository=_brand_repo, kernel=_kernel)
            )
            result = await handler.handle(
                TransitionBrandStatusCommand(
                    brand_id=brand_id,
                    target_status=target,
                    actor=getattr(request, "principal", None),
                    reason=serializer.validated_data.get("reason") or None,
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(BrandDTOSerializer(result).data, status=status.HTTP_200_OK)


class AdminUserListView(APIView):
    """View for the back-office account list."""

    @extend_schema(
        operation_id="admin_list_users",
        summary="List Accounts",
        description="List accounts, newest first, optionally filtered by role.",
        tags=["Admin"],
        parameters=[
            OpenApiParameter(
                name="role",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                enum=["client", "brand_owner", "admin"],
                description="Only accounts with this role",
            ),
        ],
        responses={200: PrincipalDTOSerializer(many=True), **ADMIN_ERRORS},
    )
    def get(self, request: Request) -> Response:
        """List accounts."""
        return async_to_sync(self._handle_admin_list_users)(request)

    async def _handle_admin_list_users(self, request: Request) -> Response:
        """Async handler for account list."""
        with tracer.start_as_current_span("admin_list_users") as span:
            span.set_attribute("operation", "admin_list_users")

            filters = RoleFilterSerializer(data=request.query_params)
            filters.is_valid(raise_exception=True)
            role = filters.validated_data.get("role")

            handler = ListPrincipalsHandler(credential_store=_credential_store, kernel=_kernel)
            result = await handler.handle(
                ListPrincipalsQuery(
                    actor=getattr(request, "principal", None),
                    role=Role(role) if role else None,
                )
            )

            span.set_attribute("users.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(PrincipalDTOSerializer(result, many=True).data, status=status.HTTP_200_OK)


class AdminUserDetailView(APIView):
    """View for editing or deleting an account."""

    @extend_schema(
        operation_id="admin_update_user",
        summary="Edit Account",
        description="Edit another account's name, email or phone. Role and brand stay fixed.",
        tags=["Admin"],
        request=UpdateProfileRequestSerializer,
        responses={
            200: PrincipalDTOSerializer,
            400: {"description": "Bad Request"},
            404: {"description": "Account not found"},
            409: {"description": "Email already in use"},
            **ADMIN_ERRORS,
        },
    )
    def patch(self, request: Request, principal_id: uuid.UUID) -> Response:
        """Edit an account."""
        return async_to_sync(self._handle_admin_update_user)(request, principal_id)

    async def _handle_admin_update_user(self, request: Request, principal_id: uuid.UUID) -> Response:
        """Async handler for an admin account edit."""
        with tracer.start_as_current_span("admin_update_user") as span:
            span.set_attribute("operation", "admin_update_user")
            span.set_attribute("target.principal_id", str(principal_id))

            serializer = UpdateProfileRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            handler = UpdateProfileHandler(credential_store=_credential_store, kernel=_kernel)
            result = await handler.handle(
                UpdateProfileCommand(
                    actor=getattr(request, "principal", None),
                    changes=dict(serializer.validated_data),
                    principal_id=principal_id,
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(PrincipalDTOSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="admin_delete_user",
        summary="Delete Account",
        description=(
            "Delete an account. A client's favorites go with it; a brand owner's "
            "brand and products go with it. Admins cannot delete themselves."
        ),
        tags=["Admin"],
        responses={
            204: None,
            404: {"description": "Account not found"},
            **ADMIN_ERRORS,
        },
    )
    def delete(self, request: Request, principal_id: uuid.UUID) -> Response:
        """Delete an account."""
        return async_to_sync(self._handle_admin_delete_user)(request, principal_id)

    async def _handle_admin_delete_user(self, request: Request, principal_id: uuid.UUID) -> Response:
        """Async handler for account deletion."""
        with tracer.start_as_current_span("admin_delete_user") as span:
            span.set_attribute("operation", "admin_delete_user")
            span.set_attribute("target.principal_id", str(principal_id))

            handler = DeleteAccountHandler(
                credential_store=_credential_store,
                account_eraser=_account_eraser,
                kernel=_kernel,
            )
            await handler.handle(
                DeleteAccountCommand(
                    principal_id=principal_id, actor=getattr(request, "principal", None)
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(status=status.HTTP_204_NO_CONTENT)
