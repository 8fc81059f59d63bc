"""
JWT implementation of TokenCodec port.

Tokens are signed JWTs carrying the principal id (``sub``), its role,
and issue/expiry timestamps. They never carry the owned brand.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from accounts.domain.principal import Principal, PrincipalDescriptor
from accounts.ports.token_codec import TokenCodec
from core.domain.exceptions import UnauthenticatedError
from core.domain.value_objects import Role

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 7 * 24 * 60 * 60


class JWTTokenCodec(TokenCodec):
    """python-jose backed token codec."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ):
        """
        Initialize the codec.

        Args:
            secret: Signing key
            algorithm: JWS algorithm
            ttl_seconds: Token lifetime
        """
        if not secret:
            raise ValueError("Token secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_settings(cls) -> "JWTTokenCodec":
        """Build a codec from Django settings."""
        from django.conf import settings

        return cls(
            secret=settings.TOKEN_SECRET,
            algorithm=settings.TOKEN_ALGORITHM,
            ttl_seconds=settings.TOKEN_TTL_SECONDS,
        )

    def issue(self, principal: Principal) -> str:
        """
        Issue a token for a principal.

        Args:
            principal: Principal the token asserts

        Returns:
            Encoded JWT
        """
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(principal.id),
            "role": principal.role.value,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self.ttl_seconds)).timestamp()),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> PrincipalDescriptor:
        """
        Verify a token and return the identity it asserts.

        Args:
            token: Encoded JWT

        Returns:
            PrincipalDescriptor

        Raises:
            UnauthenticatedError: If the token is malformed, forged or expired
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.info("JWT validation failed: %s", e)
            raise UnauthenticatedError("Invalid or expired token") from e

        try:
            return PrincipalDescriptor(
                principal_id=uuid.UUID(payload["sub"]),
                role=Role(payload["role"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UnauthenticatedError("Invalid token claims") from e
