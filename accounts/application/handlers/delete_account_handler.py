"""
DeleteAccountHandler.

Handles the admin delete-account command.
"""
import asyncio
import logging

from accounts.application.commands.delete_account import DeleteAccountCommand
from accounts.domain.events import AccountDeleted
from accounts.ports.account_eraser import AccountEraser
from accounts.ports.credential_store import CredentialStore
from authorization.kernel import AuthorizationKernel
from authorization.policy import Action
from brands.domain.events import BrandDeleted
from core.domain.exceptions import ForbiddenError, ResourceNotFoundError
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class DeleteAccountHandler:
    """Handler for DeleteAccountCommand."""

    def __init__(
        self,
        credential_store: CredentialStore,
        account_eraser: AccountEraser,
        kernel: AuthorizationKernel,
    ):
        """Initialize handler with the credential store and the eraser."""
        self.credential_store = credential_store
        self.account_eraser = account_eraser
        self.kernel = kernel

    async def handle(self, command: DeleteAccountCommand) -> None:
        """
        Handle delete account command.

        The principal and everything it owns are removed as one unit, so
        a failure part way leaves the account and its brand untouched.

        Args:
            command: DeleteAccountCommand

        Raises:
            ForbiddenError: If an admin targets their own account
            ResourceNotFoundError: If the principal does not exist
        """
        await self.kernel.require(command.actor, Action.DELETE_ACCOUNT)
        if command.principal_id == command.actor.principal_id:
            raise ForbiddenError("You cannot delete your own account")

        principal = await self.credential_store.find_by_id(command.principal_id)
        if principal is None:
            raise ResourceNotFoundError(f"User {command.principal_id} not found")

        await asyncio.shield(self.account_eraser.erase(principal))

        logger.info(
            "Account deleted",
            extra={
                "principal_id": str(principal.id),
                "role": principal.role.value,
                "actor_id": str(command.actor.principal_id),
            },
        )
        if principal.owned_brand_id:
            await event_bus.publish(
                BrandDeleted(aggregate_id=str(principal.owned_brand_id), owner_id=principal.id)
            )
        await event_bus.publish(
            AccountDeleted(
                aggregate_id=str(principal.id),
                role=principal.role.value,
                actor_id=command.actor.principal_id,
                brand_id=principal.owned_brand_id,
            )
        )
