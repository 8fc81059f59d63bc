"""
Account query handlers.

Handlers for the current-principal and admin user-list queries.
"""
from typing import List

from accounts.application.dto.principal_dto import CurrentPrincipalDTO, PrincipalDTO
from accounts.application.queries.get_current_principal import GetCurrentPrincipalQuery
from accounts.application.queries.list_principals import ListPrincipalsQuery
from accounts.ports.credential_store import CredentialStore
from authorization.kernel import AuthorizationKernel
from authorization.policy import Action
from brands.application.dto.brand_dto import BrandDTO
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import UnauthenticatedError


class GetCurrentPrincipalHandler:
    """Handler for GetCurrentPrincipalQuery."""

    def __init__(
        self,
        credential_store: CredentialStore,
        brand_repository: BrandRepository,
        kernel: AuthorizationKernel,
    ):
        """Initialize handler with repositories."""
        self.credential_store = credential_store
        self.brand_repository = brand_repository
        self.kernel = kernel

    async def handle(self, query: GetCurrentPrincipalQuery) -> CurrentPrincipalDTO:
        """
        Handle current principal query.

        Args:
            query: GetCurrentPrincipalQuery

        Returns:
            CurrentPrincipalDTO, with the owned brand for a brand owner

        Raises:
            UnauthenticatedError: If there is no principal or it no longer exists
        """
        await self.kernel.require(query.actor, Action.READ_PROFILE)

        principal = await self.credential_store.find_by_id(query.actor.principal_id)
        if principal is None:
            raise UnauthenticatedError("Account no longer exists")

        brand = None
        if principal.owned_brand_id:
            brand = await self.brand_repository.find_by_id(principal.owned_brand_id)

        return CurrentPrincipalDTO(
            principal=PrincipalDTO.from_entity(principal),
            brand=BrandDTO.from_entity(brand) if brand else None,
        )


class ListPrincipalsHandler:
    """Handler for ListPrincipalsQuery."""

    def __init__(self, credential_store: CredentialStore, kernel: AuthorizationKernel):
        """Initialize handler with the credential store."""
        self.credential_store = credential_store
        self.kernel = kernel

    async def handle(self, query: ListPrincipalsQuery) -> List[PrincipalDTO]:
        """
        Handle list principals query.

        Args:
            query: ListPrincipalsQuery

        Returns:
            List of PrincipalDTO, newest first
        """
        await self.kernel.require(query.actor, Action.LIST_PRINCIPALS)
        principals = await self.credential_store.list_by_role(query.role)
        return [PrincipalDTO.from_entity(principal) for principal in principals]
