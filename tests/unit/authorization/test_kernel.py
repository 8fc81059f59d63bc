"""
Unit tests for the AuthorizationKernel.
"""
import uuid

import pytest

from accounts.domain.principal import PrincipalDescriptor
from authorization.policy import Action, AuthorizationDecision, DenyReason, ResourceRef
from core.domain.exceptions import (
    NotOwnerError,
    ResourceBannedError,
    UnauthenticatedError,
    WrongRoleError,
)
from core.domain.value_objects import BrandStatus, Role

PUBLIC_ACTIONS = [Action.READ_BRAND, Action.LIST_BRANDS, Action.READ_PRODUCT, Action.LIST_PRODUCTS]
ADMIN_ACTIONS = [
    Action.TRANSITION_BRAND_STATUS,
    Action.ADMIN_LIST_BRANDS,
    Action.LIST_PRINCIPALS,
    Action.EDIT_ACCOUNT,
    Action.DELETE_ACCOUNT,
]


@pytest.mark.asyncio
class TestPublicAndAdminRules:
    """Tests for public-read and admin-only actions."""

    @pytest.mark.parametrize("action", PUBLIC_ACTIONS)
    async def test_public_reads_allowed_for_anonymous(self, kernel, action):
        """Test anonymous callers can read the directory."""
        decision = await kernel.authorize(None, action)
        assert decision.allowed

    @pytest.mark.parametrize("action", ADMIN_ACTIONS)
    async def test_admin_actions_require_authentication(self, kernel, action):
        """Test anonymous callers are unauthenticated for admin actions."""
        decision = await kernel.authorize(None, action)
        assert decision == AuthorizationDecision.deny(DenyReason.UNAUTHENTICATED)

    @pytest.mark.parametrize("action", ADMIN_ACTIONS)
    async def test_admin_actions_allowed_for_admin(self, kernel, admin, action):
        """Test admins pass admin actions."""
        assert (await kernel.authorize(admin, action)).allowed

    @pytest.mark.parametrize("role", [Role.CLIENT, Role.BRAND_OWNER])
    async def test_admin_actions_denied_for_other_roles(self, kernel, role):
        """Test other roles get WrongRole on admin actions."""
        principal = PrincipalDescriptor(principal_id=uuid.uuid4(), role=role)
        decision = await kernel.authorize(principal, Action.TRANSITION_BRAND_STATUS)
        assert not decision.allowed
        assert decision.reason == DenyReason.WRONG_ROLE

    async def test_read_profile_allowed_for_any_principal(self, kernel, client_principal, admin):
        """Test every signed-in principal can read their profile."""
        assert (await kernel.authorize(client_principal, Action.READ_PROFILE)).allowed
        assert (await kernel.authorize(admin, Action.READ_PROFILE)).allowed
        denied = await kernel.authorize(None, Action.READ_PROFILE)
        assert denied.reason == DenyReason.UNAUTHENTICATED


@pytest.mark.asyncio
class TestClientRule:
    """Tests for client-only actions."""

    async def test_client_can_manage_favorites(self, kernel, client_principal):
        """Test clients manage favorites."""
        assert (await kernel.authorize(client_principal, Action.MANAGE_FAVORITES)).allowed

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.BRAND_OWNER])
    async def test_other_roles_cannot_manage_favorites(self, kernel, role):
        """Test favorites are client-only."""
        principal = PrincipalDescriptor(principal_id=uuid.uuid4(), role=role)
        decision = await kernel.authorize(principal, Action.MANAGE_FAVORITES)
        assert decision.reason == DenyReason.WRONG_ROLE


@pytest.mark.asyncio
class TestOwnershipRule:
    """Tests for brand and product owner actions."""

    async def test_owner_can_update_brand(self, kernel, seed_brand):
        """Test the owner passes owner mutations."""
        brand, owner = await seed_brand()
        decision = await kernel.authorize(owner, Action.UPDATE_BRAND, ResourceRef.brand(brand.id))
        assert decision.allowed

    async def test_other_owner_is_not_owner(self, kernel, seed_brand):
        """Test another brand's owner is denied."""
        brand, _ = await seed_brand()
        _, other_owner = await seed_brand(name="Bob Shoes")
        decision = await kernel.authorize(
            other_owner, Action.UPDATE_BRAND, ResourceRef.brand(brand.id)
        )
        assert decision.reason == DenyReason.NOT_OWNER

    async def test_client_has_wrong_role(self, kernel, seed_brand, client_principal):
        """Test clients cannot mutate brands."""
        brand, _ = await seed_brand()
        decision = await kernel.authorize(
            client_principal, Action.UPDATE_BRAND, ResourceRef.brand(brand.id)
        )
        assert decision.reason == DenyReason.WRONG_ROLE

    async def test_anonymous_is_unauthenticated(self, kernel, seed_brand):
        """Test anonymous callers cannot mutate brands."""
        brand, _ = await seed_brand()
        decision = await kernel.authorize(None, Action.UPDATE_BRAND, ResourceRef.brand(brand.id))
        assert decision.reason == DenyReason.UNAUTHENTICATED

    async def test_missing_brand_is_not_found(self, kernel, seed_brand):
        """Test an unknown brand id."""
        _, owner = await seed_brand()
        decision = await kernel.authorize(
            owner, Action.UPDATE_BRAND, ResourceRef.brand(uuid.uuid4())
        )
        assert decision.reason == DenyReason.RESOURCE_NOT_FOUND

    async def test_product_ownership_resolves_through_brand(
        self, kernel, seed_brand, seed_product
    ):
        """Test product actions check the owning brand."""
        brand, owner = await seed_brand()
        _, other_owner = await seed_brand(name="Bob Shoes")
        product = await seed_product(brand.id)

        allowed = await kernel.authorize(
            owner, Action.DELETE_PRODUCT, ResourceRef.product(product.id)
        )
        denied = await kernel.authorize(
            other_owner, Action.DELETE_PRODUCT, ResourceRef.product(product.id)
        )

        assert allowed.allowed
        assert denied.reason == DenyReason.NOT_OWNER

    async def test_missing_product_is_not_found(self, kernel, seed_brand):
        """Test an unknown product id."""
        _, owner = await seed_brand()
        decision = await kernel.authorize(
            owner, Action.UPDATE_PRODUCT, ResourceRef.product(uuid.uuid4())
        )
        assert decision.reason == DenyReason.RESOURCE_NOT_FOUND

    async def test_admin_override_on_owner_mutations(self, kernel, admin, seed_brand):
        """Test admins may mutate any brand's resources."""
        brand, _ = await seed_brand()
        decision = await kernel.authorize(admin, Action.CREATE_PRODUCT, ResourceRef.brand(brand.id))
        assert decision.allowed

    async def test_admin_has_no_own_brand(self, kernel, admin, seed_brand):
        """Test reading an own brand is for brand owners only."""
        brand, _ = await seed_brand()
        decision = await kernel.authorize(admin, Action.READ_OWN_BRAND, ResourceRef.brand(brand.id))
        assert decision.reason == DenyReason.WRONG_ROLE

    async def test_owner_action_requires_resource(self, kernel, seed_brand):
        """Test owner actions must name a resource."""
        _, owner = await seed_brand()
        with pytest.raises(ValueError):
            await kernel.authorize(owner, Action.UPDATE_BRAND)


@pytest.mark.asyncio
class TestBannedBrandLockout:
    """Tests for the banned-brand rule."""

    @pytest.mark.parametrize(
        "action", [Action.UPDATE_BRAND, Action.CREATE_PRODUCT]
    )
    async def test_banned_owner_cannot_mutate_brand(self, kernel, seed_brand, action):
        """Test a banned brand's owner is locked out of brand mutations."""
        brand, owner = await seed_brand(status=BrandStatus.BANNED)
        decision = await kernel.authorize(owner, action, ResourceRef.brand(brand.id))
        assert decision.reason == DenyReason.RESOURCE_BANNED

    @pytest.mark.parametrize("action", [Action.UPDATE_PRODUCT, Action.DELETE_PRODUCT])
    async def test_banned_owner_cannot_mutate_products(
        self, kernel, seed_brand, seed_product, brand_repository, action
    ):
        """Test the lockout also covers the brand's products."""
        brand, owner = await seed_brand()
        product = await seed_product(brand.id)
        await brand_repository.write_status(brand.id, BrandStatus.APPROVED, BrandStatus.BANNED)

        decision = await kernel.authorize(owner, action, ResourceRef.product(product.id))
        assert decision.reason == DenyReason.RESOURCE_BANNED

    async def test_banned_owner_can_still_read_own_brand(self, kernel, seed_brand):
        """Test a banned owner can see their brand and its status."""
        brand, owner = await seed_brand(status=BrandStatus.BANNED)
        decision = await kernel.authorize(owner, Action.READ_OWN_BRAND, ResourceRef.brand(brand.id))
        assert decision.allowed

    async def test_not_owner_wins_over_banned(self, kernel, seed_brand):
        """Test a foreign owner learns nothing about the ban."""
        brand, _ = await seed_brand(status=BrandStatus.BANNED)
        _, other_owner = await seed_brand(name="Bob Shoes")
        decision = await kernel.authorize(
            other_owner, Action.UPDATE_BRAND, ResourceRef.brand(brand.id)
        )
        assert decision.reason == DenyReason.NOT_OWNER

    @pytest.mark.parametrize(
        "action,kind",
        [
            (Action.UPDATE_BRAND, "brand"),
            (Action.CREATE_PRODUCT, "brand"),
            (Action.UPDATE_PRODUCT, "product"),
            (Action.DELETE_PRODUCT, "product"),
        ],
    )
    async def test_admin_override_stops_at_ban(
        self, kernel, admin, seed_brand, seed_product, brand_repository, action, kind
    ):
        """Test admins cannot mutate a banned brand or its products either."""
        brand, _ = await seed_brand()
        product = await seed_product(brand.id)
        await brand_repository.write_status(brand.id, BrandStatus.APPROVED, BrandStatus.BANNED)
        resource = ResourceRef.brand(brand.id) if kind == "brand" else ResourceRef.product(product.id)

        decision = await kernel.authorize(admin, action, resource)

        assert decision == AuthorizationDecision.deny(DenyReason.RESOURCE_BANNED)

    async def test_pending_brand_owner_can_edit(self, kernel, seed_brand):
        """Test only a ban locks the owner out."""
        brand, owner = await seed_brand(status=BrandStatus.PENDING)
        decision = await kernel.authorize(owner, Action.UPDATE_BRAND, ResourceRef.brand(brand.id))
        assert decision.allowed


@pytest.mark.asyncio
class TestRequire:
    """Tests for AuthorizationKernel.require."""

    async def test_require_allows_silently(self, kernel, admin):
        """Test an allow returns None."""
        assert await kernel.require(admin, Action.LIST_PRINCIPALS) is None

    @pytest.mark.parametrize(
        "status,principal_kind,error",
        [
            (BrandStatus.APPROVED, "anonymous", UnauthenticatedError),
            (BrandStatus.APPROVED, "client", WrongRoleError),
            (BrandStatus.APPROVED, "stranger", NotOwnerError),
            (BrandStatus.BANNED, "owner", ResourceBannedError),
        ],
    )
    async def test_require_raises_matching_error(
        self, kernel, seed_brand, client_principal, status, principal_kind, error
    ):
        """Test each deny reason maps to its exception."""
        brand, owner = await seed_brand(status=status)
        _, stranger = await seed_brand(name="Bob Shoes")
        principal = {
            "anonymous": None,
            "client": client_principal,
            "stranger": stranger,
            "owner": owner,
        }[principal_kind]

        with pytest.raises(error):
            await kernel.require(principal, Action.UPDATE_BRAND, ResourceRef.brand(brand.id))


class TestAuthorizationDecision:
    """Tests for AuthorizationDecision."""

    def test_allow_has_no_error(self):
        """Test an allow cannot be turned into an error."""
        with pytest.raises(ValueError):
            AuthorizationDecision.allow().to_error()

    def test_deny_detail_becomes_message(self):
        """Test the detail is carried into the error."""
        error = AuthorizationDecision.deny(DenyReason.WRONG_ROLE, "Admin role required").to_error()
        assert isinstance(error, WrongRoleError)
        assert error.message == "Admin role required"
        assert error.code == "WRONG_ROLE"
