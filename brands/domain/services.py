"""
Brand domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
import asyncio
import logging
import uuid
from typing import Dict, FrozenSet, Optional

from accounts.domain.principal import PrincipalDescriptor
from authorization.kernel import AuthorizationKernel
from authorization.policy import Action
from brands.domain.brand import Brand
from brands.domain.events import BrandStatusChanged
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import (
    ForbiddenError,
    InvalidTransitionError,
    ResourceNotFoundError,
)
from core.domain.value_objects import BrandStatus
from core.infrastructure.events import event_bus
from core.metrics import brand_status_transitions_total

logger = logging.getLogger(__name__)

# Allowed edges of the brand status machine. Rejected and banned are terminal.
BRAND_TRANSITIONS: Dict[BrandStatus, FrozenSet[BrandStatus]] = {
    BrandStatus.PENDING: frozenset({BrandStatus.APPROVED, BrandStatus.REJECTED}),
    BrandStatus.APPROVED: frozenset({BrandStatus.BANNED}),
    BrandStatus.REJECTED: frozenset(),
    BrandStatus.BANNED: frozenset(),
}

INITIAL_STATUSES = frozenset({BrandStatus.APPROVED, BrandStatus.PENDING})


class BrandLifecycleManager:
    """
    Domain service owning the brand status machine.

    This is the only component that writes ``Brand.status`` after
    creation. Writes are a single compare-and-set on the current status
    so two racing admins cannot both succeed.
    """

    def __init__(self, brand_repository: BrandRepository, kernel: AuthorizationKernel):
        """Initialize lifecycle manager with the brand repository and the kernel."""
        self.brand_repository = brand_repository
        self.kernel = kernel

    @staticmethod
    def initial_status(configured: str = BrandStatus.APPROVED.value) -> BrandStatus:
        """
        Resolve the status a newly signed-up brand starts in.

        Args:
            configured: ``approved`` for the direct path, ``pending`` for
                the moderation-queue path

        Returns:
            Initial BrandStatus

        Raises:
            ValueError: If the configured value is not a valid initial status
        """
        status = BrandStatus(configured)
        if status not in INITIAL_STATUSES:
            raise ValueError(f"Brands cannot start in status {status.value}")
        return status

    @staticmethod
    def can_transition(current: BrandStatus, target: BrandStatus) -> bool:
        """
        Check whether the table has an edge from current to target.

        Args:
            current: Current status
            target: Requested status

        Returns:
            True if the edge exists
        """
        return target in BRAND_TRANSITIONS[current]

    async def transition(
        self,
        brand_id: uuid.UUID,
        target: BrandStatus,
        acting_principal: Optional[PrincipalDescriptor],
        reason: Optional[str] = None,
    ) -> Brand:
        """
        Move a brand to a new status.

        The write runs to completion even if the caller is cancelled.

        Args:
            brand_id: Brand UUID
            target: Requested status
            acting_principal: Principal performing the change
            reason: Optional note recorded on the BrandStatusChanged event

        Returns:
            Brand entity at its new status

        Raises:
            ForbiddenError: If the acting principal is not an admin
            ResourceNotFoundError: If the brand does not exist
            InvalidTransitionError: If the table has no edge, including a
                request for the current status
        """
        decision = await self.kernel.authorize(acting_principal, Action.TRANSITION_BRAND_STATUS)
        if not decision.allowed:
            raise ForbiddenError("Only admins can change brand status")
        return await asyncio.shield(
            self._transition(brand_id, target, acting_principal, reason)
        )

    async def _transition(
        self,
        brand_id: uuid.UUID,
        target: BrandStatus,
        acting_principal: PrincipalDescriptor,
        reason: Optional[str],
    ) -> Brand:
        brand = await self.brand_repository.find_by_id(brand_id)
        if brand is None:
            raise ResourceNotFoundError(f"Brand {brand_id} not found")

        current = brand.status
        if not self.can_transition(current, target):
            brand_status_transitions_total.labels(
                from_status=current.value, to_status=target.value, outcome="rejected"
            ).inc()
            raise InvalidTransitionError(
                f"Brand cannot move from {current.value} to {target.value}"
            )

        written = await self.brand_repository.write_status(brand_id, current, target)
        if not written:
            fresh = await self.brand_repository.find_by_id(brand_id)
            brand_status_transitions_total.labels(
                from_status=current.value, to_status=target.value, outcome="conflict"
            ).inc()
            if fresh is None:
                raise ResourceNotFoundError(f"Brand {brand_id} not found")
            logger.warning(
                "Brand status changed concurrently",
                extra={
                    "brand_id": str(brand_id),
                    "expected_status": current.value,
                    "found_status": fresh.status.value,
                    "target_status": target.value,
                },
            )
            raise InvalidTransitionError(
                f"Brand status changed concurrently to {fresh.status.value}; "
                f"cannot move to {target.value}"
            )

        brand_status_transitions_total.labels(
            from_status=current.value, to_status=target.value, outcome="applied"
        ).inc()
        logger.info(
            "Brand status changed",
            extra={
                "brand_id": str(brand_id),
                "from_status": current.value,
                "to_status": target.value,
            },
        )
        await event_bus.publish(
            BrandStatusChanged(
                aggregate_id=str(brand_id),
                previous_status=current.value,
                new_status=target.value,
                actor_id=acting_principal.principal_id,
                reason=reason,
            )
        )
        return brand.with_status(target)
