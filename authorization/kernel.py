"""
Authorization kernel.

The single allow/deny evaluator used by every protected operation.
Rules are evaluated in order and the first match wins:

1. public-read actions are allowed for everyone; any other action
   from an anonymous caller is denied as unauthenticated
2. admin actions are allowed only for admins
3. brand/product owner actions are allowed for the owning brand owner
   (and for admins where the action permits it), never on a banned brand
4. client actions are allowed only for clients
5. anything else is denied

Ownership and status are re-read from the repositories on every call;
nothing is cached across calls.
"""
import logging
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor
from authorization.policy import (
    Action,
    ActionScope,
    AuthorizationDecision,
    DenyReason,
    ResourceKind,
    ResourceRef,
)
from brands.domain.brand import Brand
from brands.ports.brand_repository import BrandRepository
from brands.ports.product_repository import ProductRepository
from core.domain.value_objects import BrandStatus, Role
from core.metrics import authorization_decisions_total

logger = logging.getLogger(__name__)

_OWNER_SCOPES = (ActionScope.OWNER_MUTATION, ActionScope.OWNER_READ)


class AuthorizationKernel:
    """Policy evaluator composing role and ownership checks."""

    def __init__(
        self,
        brand_repository: BrandRepository,
        product_repository: ProductRepository,
    ):
        """Initialize kernel with the repositories used to resolve ownership."""
        self.brand_repository = brand_repository
        self.product_repository = product_repository

    async def authorize(
        self,
        principal: Optional[PrincipalDescriptor],
        action: Action,
        resource: Optional[ResourceRef] = None,
    ) -> AuthorizationDecision:
        """
        Decide whether a principal may perform an action on a resource.

        Args:
            principal: Verified principal, or None for an anonymous caller
            action: Requested action
            resource: Target resource; required for owner-scoped actions

        Returns:
            AuthorizationDecision (allow, or deny with a reason)
        """
        decision = await self._evaluate(principal, action, resource)
        reason = str(decision.reason) if decision.reason else ""
        authorization_decisions_total.labels(
            action=action.key,
            outcome="allow" if decision.allowed else "deny",
            reason=reason,
        ).inc()
        if not decision.allowed:
            logger.info(
                "Authorization denied",
                extra={
                    "action": action.key,
                    "reason": reason,
                    "principal_id": str(principal.principal_id) if principal else None,
                    "resource_kind": resource.kind.value if resource else None,
                    "resource_id": str(resource.id) if resource and resource.id else None,
                },
            )
        return decision

    async def require(
        self,
        principal: Optional[PrincipalDescriptor],
        action: Action,
        resource: Optional[ResourceRef] = None,
    ) -> None:
        """
        Authorize and raise on deny.

        Raises:
            AuthorizationError: Subclass matching the deny reason
        """
        decision = await self.authorize(principal, action, resource)
        decision.raise_if_denied()

    async def _evaluate(
        self,
        principal: Optional[PrincipalDescriptor],
        action: Action,
        resource: Optional[ResourceRef],
    ) -> AuthorizationDecision:
        if action.scope == ActionScope.PUBLIC_READ:
            return AuthorizationDecision.allow()
        if principal is None:
            return AuthorizationDecision.deny(DenyReason.UNAUTHENTICATED)

        if action.scope == ActionScope.ADMIN:
            if principal.is_admin:
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny(DenyReason.WRONG_ROLE, "Admin role required")

        if action.scope in _OWNER_SCOPES:
            return await self._evaluate_ownership(principal, action, resource)

        if action.scope == ActionScope.CLIENT:
            if principal.role == Role.CLIENT:
                return AuthorizationDecision.allow()
            return AuthorizationDecision.deny(DenyReason.WRONG_ROLE, "Client role required")

        if action.scope == ActionScope.AUTHENTICATED:
            return AuthorizationDecision.allow()

        return AuthorizationDecision.deny(DenyReason.WRONG_ROLE)

    async def _evaluate_ownership(
        self,
        principal: PrincipalDescriptor,
        action: Action,
        resource: Optional[ResourceRef],
    ) -> AuthorizationDecision:
        if resource is None:
            raise ValueError(f"Action {action.key} requires a resource reference")

        admin_acting = principal.is_admin and action.admin_override
        if not admin_acting and principal.role != Role.BRAND_OWNER:
            return AuthorizationDecision.deny(DenyReason.WRONG_ROLE, "Brand owner role required")

        brand = await self._resolve_owning_brand(resource)
        if brand is None:
            return AuthorizationDecision.deny(
                DenyReason.RESOURCE_NOT_FOUND, f"{resource.kind.value.capitalize()} not found"
            )

        if not admin_acting and brand.owner_id != principal.principal_id:
            return AuthorizationDecision.deny(DenyReason.NOT_OWNER)

        # A ban freezes the brand for admins too.
        if action.scope == ActionScope.OWNER_MUTATION and brand.is_banned:
            return AuthorizationDecision.deny(DenyReason.RESOURCE_BANNED)

        return AuthorizationDecision.allow()

    async def _resolve_owning_brand(self, resource: ResourceRef) -> Optional[Brand]:
        if resource.id is None:
            return None
        if resource.kind == ResourceKind.BRAND:
            return await self.brand_repository.find_by_id(resource.id)
        product = await self.product_repository.find_by_id(resource.id)
        if product is None:
            return None
        return await self.brand_repository.find_by_id(product.brand_id)
