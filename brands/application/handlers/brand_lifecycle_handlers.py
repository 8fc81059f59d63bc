"""
Brand lifecycle handlers.

Handler for the admin brand status transition.
"""
from brands.application.commands.transition_brand_status import TransitionBrandStatusCommand
from brands.application.dto.brand_dto import BrandDTO
from brands.domain.services import BrandLifecycleManager
from core.domain.exceptions import DomainValidationError
from core.domain.value_objects import BrandStatus


class TransitionBrandStatusHandler:
    """Handler for TransitionBrandStatusCommand."""

    def __init__(self, lifecycle_manager: BrandLifecycleManager):
        """Initialize handler with the lifecycle manager."""
        self.lifecycle_manager = lifecycle_manager

    async def handle(self, command: TransitionBrandStatusCommand) -> BrandDTO:
        """
        Handle transition brand status command.

        Args:
            command: TransitionBrandStatusCommand

        Returns:
            BrandDTO at its new status

        Raises:
            DomainValidationError: If the target is not a known status
            ForbiddenError: If the actor is not an admin
            ResourceNotFoundError: If the brand does not exist
            InvalidTransitionError: If the lifecycle has no such edge
        """
        try:
            target = BrandStatus(command.target_status)
        except ValueError as e:
            raise DomainValidationError(f"Unknown brand status: {command.target_status}") from e

        brand = await self.lifecycle_manager.transition(
            command.brand_id, target, command.actor, reason=command.reason
        )
        return BrandDTO.from_entity(brand)
