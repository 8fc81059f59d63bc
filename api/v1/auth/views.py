"""
Authentication API views.

These endpoints let clients and brand owners:
- Sign up (a brand owner account comes with its brand)
- Sign in and receive a bearer token
- Sign out
- Read and edit their own account
- Change their password
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.commands.sign_in import SignInCommand
from accounts.application.commands.sign_up import SignUpCommand
from accounts.application.commands.update_profile import (
    ChangePasswordCommand,
    UpdateProfileCommand,
)
from accounts.application.handlers.account_query_handlers import GetCurrentPrincipalHandler
from accounts.application.handlers.profile_handlers import (
    ChangePasswordHandler,
    UpdateProfileHandler,
)
from accounts.application.handlers.sign_in_handler import SignInHandler
from accounts.application.handlers.sign_up_handler import SignUpHandler
from accounts.application.queries.get_current_principal import GetCurrentPrincipalQuery
from accounts.infrastructure.repositories.django_credential_store import DjangoCredentialStore
from accounts.infrastructure.tokens.jwt_token_codec import JWTTokenCodec
from api.v1.auth.serializers import (
    ChangePasswordRequestSerializer,
    CurrentPrincipalSerializer,
    PrincipalDTOSerializer,
    SignInRequestSerializer,
    SignInResponseSerializer,
    SignUpRequestSerializer,
    SignUpResponseSerializer,
    UpdateProfileRequestSerializer,
)
from authorization.kernel import AuthorizationKernel
from brands.domain.services import BrandLifecycleManager
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.infrastructure.repositories.django_product_repository import DjangoProductRepository
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_credential_store = DjangoCredentialStore()
_brand_repo = DjangoBrandRepository()
_product_repo = DjangoProductRepository()
_kernel = AuthorizationKernel(brand_repository=_brand_repo, product_repository=_product_repo)

tracer = get_tracer(__name__)


class SignUpView(APIView):
    """View for account sign-up."""

    @extend_schema(
        operation_id="sign_up",
        summary="Sign Up",
        description=(
            "Create a client account, or a brand owner account together with its brand. "
            "Returns the new account and a bearer token."
        ),
        tags=["Auth"],
        request=SignUpRequestSerializer,
        responses={
            201: SignUpResponseSerializer,
            400: {"description": "Bad Request"},
            409: {"description": "Email or brand name already taken"},
        },
    )
    def post(self, request: Request) -> Response:
        """Sign up."""
        return async_to_sync(self._handle_sign_up)(request)

    async def _handle_sign_up(self, request: Request) -> Response:
        """Async handler for sign up."""
        with tracer.start_as_current_span("sign_up") as span:
            span.set_attribute("operation", "sign_up")

            serializer = SignUpRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            data = serializer.validated_data
            span.set_attribute("signup.kind", data["kind"])
            brand_profile = dict(data.get("brand") or {})
            brand_profile.pop("name", None)

            handler = SignUpHandler(
                credential_store=_credential_store,
                brand_repository=_brand_repo,
                token_codec=JWTTokenCodec.from_settings(),
                initial_brand_status=BrandLifecycleManager.initial_status(
                    settings.BRAND_SIGNUP_STATUS
                ),
            )
            command = SignUpCommand(
                kind=data["kind"],
                email=data["email"],
                password=data["password"],
                full_name=data.get("full_name"),
                phone=data.get("phone"),
                brand_name=data.get("brand_name"),
                brand_profile=brand_profile,
            )

            result = await handler.handle(command)

            span.set_attribute("principal.id", str(result.principal.id))
            if result.brand:
                span.set_attribute("brand.id", str(result.brand.id))
            span.set_status(Status(StatusCode.OK))
            return Response(SignUpResponseSerializer(result).data, status=status.HTTP_201_CREATED)


class SignInView(APIView):
    """View for account sign-in."""

    @extend_schema(
        operation_id="sign_in",
        summary="Sign In",
        description="Exchange an email and password for a bearer token.",
        tags=["Auth"],
        request=SignInRequestSerializer,
        responses={
            200: SignInResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid credentials"},
        },
    )
    def post(self, request: Request) -> Response:
        """Sign in."""
        return async_to_sync(self._handle_sign_in)(request)

    async def _handle_sign_in(self, request: Request) -> Response:
        """Async handler for sign in."""
        with tracer.start_as_current_span("sign_in") as span:
            span.set_attribute("operation", "sign_in")

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
                )
            )

            span.set_attribute("principal.id", str(result.principal.id))
            span.set_attribute("principal.role", result.principal.role)
            span.set_status(Status(StatusCode.OK))
            return Response(SignInResponseSerializer(result).data, status=status.HTTP_200_OK)


class SignOutView(APIView):
    """
    View for sign-out.

    Tokens are stateless, so signing out means the client discards its
    token; the endpoint only acknowledges.
    """

    @extend_schema(
        operation_id="sign_out",
        summary="Sign Out",
        description="Acknowledge a sign-out. The client must discard its token.",
        tags=["Auth"],
        request=None,
        responses={200: {"description": "Signed out"}},
    )
    def post(self, _request: Request) -> Response:
        """Sign out."""
        return Response({"success": True}, status=status.HTTP_200_OK)


class CurrentPrincipalView(APIView):
    """View for the signed-in account."""

    @extend_schema(
        operation_id="get_current_principal",
        summary="Current Account",
        description="Return the signed-in account, with its brand for a brand owner.",
        tags=["Auth"],
        responses={
            200: CurrentPrincipalSerializer,
            401: {"description": "Unauthorized - Missing or invalid token"},
        },
    )
    def get(self, request: Request) -> Response:
        """Get the current account."""
        return async_to_sync(self._handle_get_current_principal)(request)

    async def _handle_get_current_principal(self, request: Request) -> Response:
        """Async handler for the current account."""
        with tracer.start_as_current_span("get_current_principal") as span:
            span.set_attribute("operation", "get_current_principal")

            handler = GetCurrentPrincipalHandler(
                credential_store=_credential_store,
                brand_repository=_brand_repo,
                kernel=_kernel,
            )
            result = await handler.handle(
                GetCurrentPrincipalQuery(actor=getattr(request, "principal", None))
            )

            span.set_attribute("principal.id", str(result.principal.id))
            span.set_status(Status(StatusCode.OK))
            return Response(CurrentPrincipalSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_current_principal",
        summary="Update Account",
        description=(
            "Edit the signed-in account's name, email or phone. "
            "Role and brand cannot be changed."
        ),
        tags=["Auth"],
        request=UpdateProfileRequestSerializer,
        responses={
            200: PrincipalDTOSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid token"},
            403: {"description": "Role and brand cannot be changed"},
            409: {"description": "Email already in use"},
        },
    )
    def patch(self, request: Request) -> Response:
        """Update the current account."""
        return async_to_sync(self._handle_update_current_principal)(request)

    async def _handle_update_current_principal(self, request: Request) -> Response:
        """Async handler for a profile edit."""
        with tracer.start_as_current_span("update_current_principal") as span:
            span.set_attribute("operation", "update_current_principal")

            serializer = UpdateProfileRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            handler = UpdateProfileHandler(credential_store=_credential_store, kernel=_kernel)
            result = await handler.handle(
                UpdateProfileCommand(
                    actor=getattr(request, "principal", None),
                    changes=dict(serializer.validated_data),
                )
            )

            span.set_attribute("principal.id", str(result.id))
            span.set_status(Status(StatusCode.OK))
            return Response(PrincipalDTOSerializer(result).data, status=status.HTTP_200_OK)


class ChangePasswordView(APIView):
    """View for changing the signed-in account's password."""

    @extend_schema(
        operation_id="change_password",
        summary="Change Password",
        description="Replace the password after confirming the current one.",
        tags=["Auth"],
        request=ChangePasswordRequestSerializer,
        responses={
            200: {"description": "Password updated"},
            400: {"description": "Bad Request"},
            401: {"description": "Missing token or wrong current password"},
        },
    )
    def patch(self, request: Request) -> Response:
        """Change the password."""
        return async_to_sync(self._handle_change_password)(request)

    async def _handle_change_password(self, request: Request) -> Response:
        """Async handler for a password change."""
        with tracer.start_as_current_span("change_password") as span:
            span.set_attribute("operation", "change_password")

            serializer = ChangePasswordRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            handler = ChangePasswordHandler(credential_store=_credential_store, kernel=_kernel)
            await handler.handle(
                ChangePasswordCommand(
                    actor=getattr(request, "principal", None),
                    current_password=serializer.validated_data["current_password"],
                    new_password=serializer.validated_data["new_password"],
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response({"message": "Password updated successfully"}, status=status.HTTP_200_OK)
