"""
SignInHandler.

Handles the sign-in command.
"""
import logging

from accounts.application.commands.sign_in import SignInCommand
from accounts.application.dto.principal_dto import PrincipalDTO, SignInResultDTO
from accounts.domain.events import PrincipalSignedIn
from accounts.ports.credential_store import CredentialStore
from accounts.ports.token_codec import TokenCodec
from core.domain.exceptions import InvalidCredentialsError, WrongRoleError
from core.infrastructure.events import event_bus
from core.metrics import signins_total

logger = logging.getLogger(__name__)


class SignInHandler:
    """Handler for SignInCommand."""

    def __init__(self, credential_store: CredentialStore, token_codec: TokenCodec):
        """Initialize handler with the credential store and token codec."""
        self.credential_store = credential_store
        self.token_codec = token_codec

    async def handle(self, command: SignInCommand) -> SignInResultDTO:
        """
        Handle sign-in command.

        Unknown email and wrong password fail identically.

        Args:
            command: SignInCommand

        Returns:
            SignInResultDTO with the principal and a fresh token

        Raises:
            InvalidCredentialsError: If the credentials do not match
            WrongRoleError: If ``required_role`` is set and differs
        """
        if not command.email or not command.password:
            signins_total.labels(outcome="invalid_credentials").inc()
            raise InvalidCredentialsError("Email and password are required")

        principal = await self.credential_store.find_by_email(command.email.strip().lower())
        if principal is None or not await self.credential_store.verify_secret(
            principal, command.password
        ):
            signins_total.labels(outcome="invalid_credentials").inc()
            raise InvalidCredentialsError()

        if command.required_role and principal.role != command.required_role:
            signins_total.labels(outcome="wrong_role").inc()
            logger.info(
                "Sign-in refused for role",
                extra={"principal_id": str(principal.id), "role": principal.role.value},
            )
            raise WrongRoleError(f"Access restricted to {command.required_role.value} accounts")

        signins_total.labels(outcome="success").inc()
        await event_bus.publish(
            PrincipalSignedIn(aggregate_id=str(principal.id), role=principal.role.value)
        )

        return SignInResultDTO(
            principal=PrincipalDTO.from_entity(principal),
            token=self.token_codec.issue(principal),
        )
