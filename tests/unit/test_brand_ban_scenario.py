"""
End-to-end scenario over the in-memory stores: a brand owner signs up,
an admin bans the brand, and the owner is locked out of every mutation
while still able to sign in and read their brand.
"""
import pytest

from accounts.application.commands.sign_in import SignInCommand
from accounts.application.commands.sign_up import SignUpCommand
from accounts.application.handlers.sign_in_handler import SignInHandler
from accounts.application.handlers.sign_up_handler import SignUpHandler
from accounts.application.services.authentication_service import AuthenticationService
from authorization.policy import Action, DenyReason, ResourceRef
from brands.application.commands.product_commands import CreateProductCommand
from brands.application.commands.update_brand_profile import UpdateBrandProfileCommand
from brands.application.handlers.brand_profile_handlers import (
    GetOwnBrandHandler,
    UpdateBrandProfileHandler,
)
from brands.application.handlers.catalog_handlers import (
    GetPublicBrandHandler,
    ListPublicBrandsHandler,
)
from brands.application.handlers.product_handlers import CreateProductHandler
from brands.application.queries.get_own_brand import GetOwnBrandQuery
from brands.application.queries.public_catalog import GetPublicBrandQuery, ListPublicBrandsQuery
from core.domain.exceptions import (
    ForbiddenError,
    InvalidTransitionError,
    ResourceBannedError,
    ResourceNotFoundError,
)
from core.domain.value_objects import BrandStatus
from tests.fakes import SAMPLE_IMAGES


@pytest.mark.asyncio
class TestBrandBanScenario:
    """Alice signs up "Alice Wear"; an admin bans it."""

    async def test_ban_locks_owner_out(
        self,
        credential_store,
        brand_repository,
        product_repository,
        kernel,
        lifecycle_manager,
        token_codec,
        admin,
    ):
        """Test the owner keeps read access but loses every mutation."""
        signed_up = await SignUpHandler(credential_store, brand_repository, token_codec).handle(
            SignUpCommand(
                kind="brand_owner",
                email="alice@x.tn",
                password="secret123",
                brand_name="Alice Wear",
            )
        )
        brand_id = signed_up.brand.id
        assert signed_up.brand.status == "approved"

        auth = AuthenticationService(token_codec=token_codec, credential_store=credential_store)
        alice = await auth.authenticate(signed_up.token)

        # The owner can edit before the ban.
        update = UpdateBrandProfileHandler(brand_repository, kernel)
        await update.handle(
            UpdateBrandProfileCommand(brand_id=brand_id, actor=alice, changes={"category": "Fashion"})
        )

        # The owner cannot ban or approve their own brand.
        with pytest.raises(ForbiddenError):
            await lifecycle_manager.transition(brand_id, BrandStatus.BANNED, alice)

        banned = await lifecycle_manager.transition(brand_id, BrandStatus.BANNED, admin)
        assert banned.status == BrandStatus.BANNED

        decision = await kernel.authorize(alice, Action.UPDATE_BRAND, ResourceRef.brand(brand_id))
        assert decision.reason == DenyReason.RESOURCE_BANNED

        with pytest.raises(ResourceBannedError):
            await update.handle(
                UpdateBrandProfileCommand(brand_id=brand_id, actor=alice, changes={"category": "X"})
            )
        with pytest.raises(ResourceBannedError):
            await CreateProductHandler(brand_repository, product_repository, kernel).handle(
                CreateProductCommand(
                    actor=alice,
                    name="Linen Shirt",
                    price="49.90",
                    images=SAMPLE_IMAGES,
                    purchase_link="https://shop.example.com/linen-shirt",
                )
            )

        # Sign-in still works and the console shows the ban.
        signed_in = await SignInHandler(credential_store, token_codec).handle(
            SignInCommand(email="alice@x.tn", password="secret123")
        )
        assert signed_in.principal.brand_id == brand_id
        own = await GetOwnBrandHandler(brand_repository, product_repository, kernel).handle(
            GetOwnBrandQuery(actor=alice)
        )
        assert own.brand.status == "banned"
        assert own.brand.category == "Fashion"

        # The brand has left the public directory.
        public = await ListPublicBrandsHandler(brand_repository).handle(ListPublicBrandsQuery())
        assert public == []
        with pytest.raises(ResourceNotFoundError):
            await GetPublicBrandHandler(brand_repository, product_repository).handle(
                GetPublicBrandQuery(brand_id=brand_id)
            )

        # The ban is terminal.
        with pytest.raises(InvalidTransitionError):
            await lifecycle_manager.transition(brand_id, BrandStatus.APPROVED, admin)
