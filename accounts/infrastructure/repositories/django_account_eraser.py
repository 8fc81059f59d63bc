"""
Django implementation of AccountEraser port.
"""

from asgiref.sync import sync_to_async
from django.db import transaction

from accounts.domain.principal import Principal
from accounts.infrastructure.models import Principal as PrincipalModel
from accounts.ports.account_eraser import AccountEraser
from brands.infrastructure.models import Brand as BrandModel
from products.infrastructure.models import Favorite as FavoriteModel


class DjangoAccountEraser(AccountEraser):
    """Deletes an account and what it owns in one database transaction."""

    def _erase(self, principal: Principal) -> None:
        # pylint: disable=no-member
        with transaction.atomic():
            FavoriteModel.objects.filter(principal_id=principal.id).delete()
            # The principal goes first; its brand link is protected.
            PrincipalModel.objects.filter(id=principal.id).delete()
            if principal.owned_brand_id:
                # Products and their favorites cascade.
                BrandModel.objects.filter(id=principal.owned_brand_id).delete()

    async def erase(self, principal: Principal) -> None:
        """
        Remove a principal and what it owns as one unit.

        Args:
            principal: Principal to remove
        """
        await sync_to_async(self._erase)(principal)
