"""
API exception handlers.

Maps domain exceptions onto HTTP responses. Every error body has the
shape ``{"error": {"code": ..., "message": ...}}``.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    ConflictError,
    DomainException,
    DomainValidationError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTransitionError,
    NotOwnerError,
    ResourceBannedError,
    ResourceNotFoundError,
    UnauthenticatedError,
    WrongRoleError,
)

logger = logging.getLogger(__name__)

DOMAIN_STATUS_CODES = (
    ((UnauthenticatedError, InvalidCredentialsError), status.HTTP_401_UNAUTHORIZED),
    ((WrongRoleError, NotOwnerError, ResourceBannedError, ForbiddenError), status.HTTP_403_FORBIDDEN),
    ((ResourceNotFoundError,), status.HTTP_404_NOT_FOUND),
    ((InvalidTransitionError, ConflictError), status.HTTP_409_CONFLICT),
    ((DomainValidationError,), status.HTTP_400_BAD_REQUEST),
)


def error_body(code: str, message: str) -> Dict[str, Any]:
    """Build the standard error envelope."""
    return {"error": {"code": code, "message": message}}


def domain_status_code(exc: DomainException) -> int:
    """Return the HTTP status for a domain exception."""
    for exception_types, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exception_types):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
    elif isinstance(exc, ValidationError):
        response = Response(
            error_body("VALIDATION_ERROR", _flatten_validation_detail(exc.detail)),
            status=status.HTTP_400_BAD_REQUEST,
        )
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = str(exc.default_code).upper().replace("-", "_")
        response.data = error_body(code, str(exc.detail))
    elif isinstance(exc, Http404):
        response = Response(
            error_body("RESOURCE_NOT_FOUND", "Resource not found"),
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _flatten_validation_detail(detail: Any) -> str:
    """Render serializer errors as one message: ``field: reason; ...``."""
    if isinstance(detail, dict):
        parts = []
        for field, errors in detail.items():
            parts.append(f"{field}: {_flatten_validation_detail(errors)}")
        return "; ".join(parts)
    if isinstance(detail, list):
        return " ".join(_flatten_validation_detail(item) for item in detail)
    return str(detail)


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = domain_status_code(exc)
    logger.warning(
        "Domain exception: %s - %s",
        exc.code,
        exc.message,
        extra={"trace_id": trace_id, "status_code": status_code},
    )
    return Response(error_body(exc.code, exc.message), status=status_code)


def _handle_unexpected_exception(exc: Exception, trace_id: Optional[str]) -> Response:
    """Log an unexpected exception and hide its details from the client."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    return Response(
        error_body("INTERNAL_ERROR", "An internal error occurred"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
