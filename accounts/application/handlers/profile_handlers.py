"""
Account profile handlers.

Handlers for profile edits and password changes. Role and the brand
binding are fixed at creation and cannot be edited here.
"""
import logging

from accounts.application.commands.update_profile import (
    ChangePasswordCommand,
    UpdateProfileCommand,
)
from accounts.application.dto.principal_dto import PrincipalDTO
from accounts.domain.events import AccountPasswordChanged, AccountProfileUpdated
from accounts.domain.principal import IMMUTABLE_FIELDS, MIN_SECRET_LENGTH
from accounts.ports.credential_store import CredentialStore
from authorization.kernel import AuthorizationKernel
from authorization.policy import Action
from core.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    ForbiddenError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    UnauthenticatedError,
)
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class UpdateProfileHandler:
    """Handler for UpdateProfileCommand."""

    def __init__(self, credential_store: CredentialStore, kernel: AuthorizationKernel):
        """Initialize handler with the credential store."""
        self.credential_store = credential_store
        self.kernel = kernel

    async def handle(self, command: UpdateProfileCommand) -> PrincipalDTO:
        """
        Handle update profile command.

        Args:
            command: UpdateProfileCommand

        Returns:
            Updated PrincipalDTO

        Raises:
            ForbiddenError: If the changes touch role or the brand binding
            ConflictError: If the new email is already in use
            DomainValidationError: If a change is malformed
            ResourceNotFoundError: If an admin targets a missing account
        """
        actor = command.actor
        self_service = command.principal_id is None or (
            actor is not None and command.principal_id == actor.principal_id
        )
        action = Action.UPDATE_PROFILE if self_service else Action.EDIT_ACCOUNT
        await self.kernel.require(actor, action)

        locked = IMMUTABLE_FIELDS & set(command.changes)
        if locked:
            raise ForbiddenError("Role and brand cannot be changed")

        target_id = actor.principal_id if self_service else command.principal_id
        principal = await self.credential_store.find_by_id(target_id)
        if principal is None:
            if self_service:
                raise UnauthenticatedError("Account no longer exists")
            raise ResourceNotFoundError(f"User {target_id} not found")

        try:
            updated = principal.update_profile(**command.changes)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        if updated.email != principal.email:
            holder = await self.credential_store.find_by_email(updated.email.value)
            if holder is not None and holder.id != principal.id:
                raise ConflictError("Email already in use")

        if not await self.credential_store.update(updated):
            raise ResourceNotFoundError(f"User {target_id} not found")

        changed = ",".join(sorted(command.changes))
        logger.info(
            "Account profile updated",
            extra={
                "principal_id": str(principal.id),
                "actor_id": str(actor.principal_id),
                "fields": changed,
            },
        )
        await event_bus.publish(
            AccountProfileUpdated(
                aggregate_id=str(principal.id), actor_id=actor.principal_id, changed_fields=changed
            )
        )
        return PrincipalDTO.from_entity(updated)


class ChangePasswordHandler:
    """Handler for ChangePasswordCommand."""

    def __init__(self, credential_store: CredentialStore, kernel: AuthorizationKernel):
        """Initialize handler with the credential store."""
        self.credential_store = credential_store
        self.kernel = kernel

    async def handle(self, command: ChangePasswordCommand) -> None:
        """
        Handle change password command.

        Args:
            command: ChangePasswordCommand

        Raises:
            DomainValidationError: If a password is missing or too short
            InvalidCredentialsError: If the current password is wrong
            UnauthenticatedError: If the account no longer exists
        """
        await self.kernel.require(command.actor, Action.CHANGE_PASSWORD)

        if not command.current_password or not command.new_password:
            raise DomainValidationError("Current password and new password are required")
        if len(command.new_password) < MIN_SECRET_LENGTH:
            raise DomainValidationError(
                f"Password must be at least {MIN_SECRET_LENGTH} characters"
            )

        principal = await self.credential_store.find_by_id(command.actor.principal_id)
        if principal is None:
            raise UnauthenticatedError("Account no longer exists")
        if not await self.credential_store.verify_secret(principal, command.current_password):
            raise InvalidCredentialsError("Current password is incorrect")

        secret_hash = await self.credential_store.hash_secret(command.new_password)
        if not await self.credential_store.update(principal.with_secret_hash(secret_hash)):
            raise UnauthenticatedError("Account no longer exists")

        logger.info("Password changed", extra={"principal_id": str(principal.id)})
        await event_bus.publish(AccountPasswordChanged(aggregate_id=str(principal.id)))
