"""
Bearer token authentication middleware.

This middleware verifies the ``Authorization: Bearer <token>`` header
and attaches the verified principal (or None) to the request as
``request.principal``. It never decides whether a request is allowed;
that is the authorization kernel's job.
"""

import logging
from typing import Optional

from asgiref.sync import async_to_sync
from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from accounts.application.services.authentication_service import AuthenticationService
from accounts.infrastructure.repositories.django_credential_store import (
    DjangoCredentialStore,
)
from accounts.infrastructure.tokens.jwt_token_codec import JWTTokenCodec
from core.domain.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)

DEFAULT_EXEMPT_PATHS = (
    "/admin/",
    "/health/",
    "/health",
    "/metrics",
    "/api/docs/",
    "/api/schema/",
    "/static/",
    "/media/",
)


class TokenAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for bearer token authentication.

    This middleware:
    1. Leaves anonymous requests through with ``request.principal = None``
    2. Verifies presented tokens and sets ``request.principal``
    3. Returns 401 Unauthorized if a presented token is invalid
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and verify the bearer token.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if a token is invalid, None otherwise
        """
        request.principal = None  # type: ignore

        if self._should_skip_auth(request.path):
            return None

        header = request.headers.get(getattr(settings, "AUTH_HEADER", "Authorization"))
        if not header:
            return None

        try:
            request.principal = async_to_sync(  # type: ignore
                self._authentication_service().authenticate_header
            )(header)
        except UnauthenticatedError as e:
            logger.warning(
                "Rejected bearer token",
                extra={"path": request.path, "reason": e.message},
            )
            return JsonResponse(
                {"error": {"code": e.code, "message": e.message}},
                status=401,
            )
        return None

    def _authentication_service(self) -> AuthenticationService:
        return AuthenticationService(
            token_codec=JWTTokenCodec.from_settings(),
            credential_store=DjangoCredentialStore(),
        )

    def _should_skip_auth(self, path: str) -> bool:
        """
        Check if authentication should be skipped for this path.

        Args:
            path: Request path

        Returns:
            True if auth should be skipped
        """
        skip_paths = getattr(settings, "AUTH_EXEMPT_PATHS", DEFAULT_EXEMPT_PATHS)
        return any(path.startswith(skip) for skip in skip_paths)
