"""
Authentication service.

Turns a presented bearer token into a verified principal descriptor.
"""
import logging
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor
from accounts.ports.credential_store import CredentialStore
from accounts.ports.token_codec import TokenCodec
from core.domain.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AuthenticationService:
    """Service verifying bearer tokens."""

    def __init__(
        self,
        token_codec: TokenCodec,
        credential_store: Optional[CredentialStore] = None,
    ):
        """
        Initialize the service.

        Args:
            token_codec: Codec that verifies token signatures and expiry
            credential_store: When given, the principal must still exist
        """
        self.token_codec = token_codec
        self.credential_store = credential_store

    async def authenticate(self, token: str) -> PrincipalDescriptor:
        """
        Verify a token.

        Args:
            token: Encoded token

        Returns:
            PrincipalDescriptor asserted by the token

        Raises:
            UnauthenticatedError: If the token is missing, invalid, expired,
                or names a principal that no longer exists
        """
        if not token:
            raise UnauthenticatedError("No token provided")

        descriptor = self.token_codec.verify(token)

        if self.credential_store is not None:
            principal = await self.credential_store.find_by_id(descriptor.principal_id)
            if principal is None:
                logger.info(
                    "Token for missing principal",
                    extra={"principal_id": str(descriptor.principal_id)},
                )
                raise UnauthenticatedError("Account no longer exists")
            # Role comes from the store, never from the token alone.
            descriptor = principal.descriptor()

        return descriptor

    async def authenticate_header(self, header: Optional[str]) -> Optional[PrincipalDescriptor]:
        """
        Verify an ``Authorization`` header value.

        Args:
            header: Raw header value, or None

        Returns:
            PrincipalDescriptor, or None when no header was sent

        Raises:
            UnauthenticatedError: If a header was sent but is not a valid bearer token
        """
        if not header:
            return None
        if not header.startswith(BEARER_PREFIX):
            raise UnauthenticatedError("Authorization header must use the Bearer scheme")
        return await self.authenticate(header[len(BEARER_PREFIX):].strip())
