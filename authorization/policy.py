"""
Authorization policy vocabulary.

Actions, resource references, deny reasons and decisions shared by the
kernel and every caller that asks it for a decision.
"""
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.domain.exceptions import (
    AuthorizationError,
    NotOwnerError,
    ResourceBannedError,
    ResourceNotFoundError,
    UnauthenticatedError,
    WrongRoleError,
)


class ActionScope(Enum):
    """Which policy rule governs an action."""

    PUBLIC_READ = "public_read"
    ADMIN = "admin"
    OWNER_MUTATION = "owner_mutation"
    OWNER_READ = "owner_read"
    CLIENT = "client"
    AUTHENTICATED = "authenticated"


class Action(Enum):
    """
    Protected actions.

    Each member carries its scope and whether an admin may perform it
    on any brand's resources.
    """

    READ_BRAND = ("read_brand", ActionScope.PUBLIC_READ, False)
    LIST_BRANDS = ("list_brands", ActionScope.PUBLIC_READ, False)
    READ_PRODUCT = ("read_product", ActionScope.PUBLIC_READ, False)
    LIST_PRODUCTS = ("list_products", ActionScope.PUBLIC_READ, False)

    READ_PROFILE = ("read_profile", ActionScope.AUTHENTICATED, False)
    UPDATE_PROFILE = ("update_profile", ActionScope.AUTHENTICATED, False)
    CHANGE_PASSWORD = ("change_password", ActionScope.AUTHENTICATED, False)

    TRANSITION_BRAND_STATUS = ("transition_brand_status", ActionScope.ADMIN, False)
    ADMIN_LIST_BRANDS = ("admin_list_brands", ActionScope.ADMIN, False)
    LIST_PRINCIPALS = ("list_principals", ActionScope.ADMIN, False)
    EDIT_ACCOUNT = ("edit_account", ActionScope.ADMIN, False)
    DELETE_ACCOUNT = ("delete_account", ActionScope.ADMIN, False)

    READ_OWN_BRAND = ("read_own_brand", ActionScope.OWNER_READ, False)
    UPDATE_BRAND = ("update_brand", ActionScope.OWNER_MUTATION, True)
    CREATE_PRODUCT = ("create_product", ActionScope.OWNER_MUTATION, True)
    UPDATE_PRODUCT = ("update_product", ActionScope.OWNER_MUTATION, True)
    DELETE_PRODUCT = ("delete_product", ActionScope.OWNER_MUTATION, True)

    MANAGE_FAVORITES = ("manage_favorites", ActionScope.CLIENT, False)

    def __init__(self, key: str, scope: ActionScope, admin_override: bool):
        self.key = key
        self.scope = scope
        self.admin_override = admin_override

    def __str__(self) -> str:
        return self.key


class ResourceKind(Enum):
    """Kinds of resource whose ownership the kernel can resolve."""

    BRAND = "brand"
    PRODUCT = "product"


@dataclass(frozen=True)
class ResourceRef:
    """Reference to the resource an action targets."""

    kind: ResourceKind
    id: Optional[uuid.UUID]

    @classmethod
    def brand(cls, brand_id: Optional[uuid.UUID]) -> "ResourceRef":
        return cls(kind=ResourceKind.BRAND, id=brand_id)

    @classmethod
    def product(cls, product_id: Optional[uuid.UUID]) -> "ResourceRef":
        return cls(kind=ResourceKind.PRODUCT, id=product_id)


class DenyReason(Enum):
    """Why a decision denied access."""

    UNAUTHENTICATED = "unauthenticated"
    WRONG_ROLE = "wrong_role"
    NOT_OWNER = "not_owner"
    RESOURCE_BANNED = "resource_banned"
    RESOURCE_NOT_FOUND = "resource_not_found"

    def __str__(self) -> str:
        return self.value


_REASON_ERRORS = {
    DenyReason.UNAUTHENTICATED: UnauthenticatedError,
    DenyReason.WRONG_ROLE: WrongRoleError,
    DenyReason.NOT_OWNER: NotOwnerError,
    DenyReason.RESOURCE_BANNED: ResourceBannedError,
    DenyReason.RESOURCE_NOT_FOUND: ResourceNotFoundError,
}


@dataclass(frozen=True)
class AuthorizationDecision:
    """Outcome of a policy evaluation: Allow, or Deny with a reason."""

    allowed: bool
    reason: Optional[DenyReason] = None
    detail: Optional[str] = None

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenyReason, detail: Optional[str] = None) -> "AuthorizationDecision":
        return cls(allowed=False, reason=reason, detail=detail)

    def to_error(self) -> AuthorizationError:
        """Build the domain exception matching the deny reason."""
        if self.allowed:
            raise ValueError("An allow decision has no error")
        error_class = _REASON_ERRORS[self.reason]
        return error_class(self.detail) if self.detail else error_class()

    def raise_if_denied(self) -> None:
        """
        Raise the matching AuthorizationError for a deny.

        Raises:
            AuthorizationError: If the decision is a deny
        """
        if not self.allowed:
            raise self.to_error()
