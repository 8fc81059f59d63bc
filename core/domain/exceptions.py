"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions. Every exception carries
a machine-readable code so the API layer can choose a response
without re-deriving the policy that raised it.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class AuthorizationError(DomainException):
    """Base exception for authentication and authorization denials."""

    pass


class UnauthenticatedError(AuthorizationError):
    """Raised when no valid token was presented."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="UNAUTHENTICATED")


class WrongRoleError(AuthorizationError):
    """Raised when the principal's role does not permit the action."""

    def __init__(self, message: str = "Role not permitted for this action"):
        super().__init__(message, code="WRONG_ROLE")


class NotOwnerError(AuthorizationError):
    """Raised when a brand owner acts on a resource of another brand."""

    def __init__(self, message: str = "You do not own this resource"):
        super().__init__(message, code="NOT_OWNER")


class ResourceBannedError(AuthorizationError):
    """Raised when the owning brand of the resource is banned."""

    def __init__(self, message: str = "Brand is banned"):
        super().__init__(message, code="RESOURCE_BANNED")


class ResourceNotFoundError(AuthorizationError):
    """Raised when the target resource does not exist or is not visible."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, code="RESOURCE_NOT_FOUND")


class ForbiddenError(AuthorizationError):
    """Raised when an operation is refused to an otherwise valid principal."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, code="FORBIDDEN")


class InvalidTransitionError(DomainException):
    """Raised when a brand status change has no edge in the lifecycle table."""

    def __init__(self, message: str = "Invalid brand status transition"):
        super().__init__(message, code="INVALID_TRANSITION")


class ConflictError(DomainException):
    """Raised when a uniqueness rule would be violated."""

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message, code="CONFLICT")


class DomainValidationError(DomainException):
    """Raised when input is malformed."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="VALIDATION_ERROR")


class InvalidCredentialsError(DomainException):
    """Raised when sign-in credentials do not match a principal."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")
