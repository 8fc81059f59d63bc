"""
Token codec port (interface).

Issues and verifies signed, time-bounded assertions of principal
identity and role.
"""

from abc import ABC, abstractmethod

from accounts.domain.principal import Principal, PrincipalDescriptor


class TokenCodec(ABC):
    """Abstract codec for bearer tokens."""

    @abstractmethod
    def issue(self, principal: Principal) -> str:
        """
        Issue a token for a principal.

        Args:
            principal: Principal the token asserts

        Returns:
            Encoded token
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> PrincipalDescriptor:
        """
        Verify a token and return the identity it asserts.

        Args:
            token: Encoded token

        Returns:
            PrincipalDescriptor

        Raises:
            UnauthenticatedError: If the token is malformed, forged or expired
        """
        pass
