"""
Unit tests for the profile edit and password change handlers.
"""
import uuid

import pytest

from accounts.application.commands.update_profile import (
    ChangePasswordCommand,
    UpdateProfileCommand,
)
from accounts.application.handlers.profile_handlers import (
    ChangePasswordHandler,
    UpdateProfileHandler,
)
from core.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    ForbiddenError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    UnauthenticatedError,
    WrongRoleError,
)
from core.domain.value_objects import Role


@pytest.fixture
def profile_handler(credential_store, kernel):
    """Fixture for UpdateProfileHandler."""
    return UpdateProfileHandler(credential_store=credential_store, kernel=kernel)


@pytest.fixture
def password_handler(credential_store, kernel):
    """Fixture for ChangePasswordHandler."""
    return ChangePasswordHandler(credential_store=credential_store, kernel=kernel)


@pytest.mark.asyncio
class TestUpdateProfileHandler:
    """Tests for UpdateProfileHandler."""

    async def test_edit_own_profile(self, profile_handler, credential_store, seed_principal):
        """Test a client edits their own name, email and phone."""
        principal = await seed_principal("sara@example.com")

        result = await profile_handler.handle(
            UpdateProfileCommand(
                actor=principal.descriptor(),
                changes={"full_name": " Sara B ", "email": "Sara.B@Example.com", "phone": "+216 20"},
            )
        )

        assert result.full_name == "Sara B"
        assert result.email == "sara.b@example.com"
        assert result.phone == "+216 20"
        stored = await credential_store.find_by_id(principal.id)
        assert stored.email.value == "sara.b@example.com"
        assert stored.secret_hash == principal.secret_hash

    async def test_blank_phone_clears_it(self, profile_handler, seed_principal):
        """Test a blank phone removes the number."""
        principal = await seed_principal("sara@example.com")
        result = await profile_handler.handle(
            UpdateProfileCommand(actor=principal.descriptor(), changes={"phone": "  "})
        )
        assert result.phone is None

    @pytest.mark.parametrize(
        "changes",
        [
            {"role": "admin"},
            {"owned_brand_id": str(uuid.uuid4())},
            {"brand_id": str(uuid.uuid4()), "full_name": "Sara"},
        ],
    )
    async def test_role_and_brand_are_locked(
        self, profile_handler, credential_store, seed_principal, changes
    ):
        """Test role and brand binding cannot be edited."""
        principal = await seed_principal("sara@example.com")

        with pytest.raises(ForbiddenError, match="Role and brand"):
            await profile_handler.handle(
                UpdateProfileCommand(actor=principal.descriptor(), changes=changes)
            )

        stored = await credential_store.find_by_id(principal.id)
        assert stored.role == Role.CLIENT
        assert stored.full_name == principal.full_name

    async def test_duplicate_email(self, profile_handler, seed_principal):
        """Test taking another account's email."""
        await seed_principal("taken@example.com")
        principal = await seed_principal("sara@example.com")

        with pytest.raises(ConflictError, match="Email already in use"):
            await profile_handler.handle(
                UpdateProfileCommand(
                    actor=principal.descriptor(), changes={"email": "TAKEN@example.com"}
                )
            )

    async def test_keeping_own_email_is_not_a_conflict(self, profile_handler, seed_principal):
        """Test resubmitting the current email."""
        principal = await seed_principal("sara@example.com")
        result = await profile_handler.handle(
            UpdateProfileCommand(
                actor=principal.descriptor(),
                changes={"email": "sara@example.com", "full_name": "Sara"},
            )
        )
        assert result.email == "sara@example.com"

    @pytest.mark.parametrize(
        "changes", [{"full_name": "   "}, {"email": "not-an-email"}]
    )
    async def test_malformed_changes(self, profile_handler, seed_principal, changes):
        """Test invalid values are rejected."""
        principal = await seed_principal("sara@example.com")
        with pytest.raises(DomainValidationError):
            await profile_handler.handle(
                UpdateProfileCommand(actor=principal.descriptor(), changes=changes)
            )

    async def test_anonymous(self, profile_handler):
        """Test no principal."""
        with pytest.raises(UnauthenticatedError):
            await profile_handler.handle(
                UpdateProfileCommand(actor=None, changes={"full_name": "Sara"})
            )

    async def test_deleted_account(self, profile_handler, client_principal):
        """Test a token outliving its account."""
        with pytest.raises(UnauthenticatedError):
            await profile_handler.handle(
                UpdateProfileCommand(actor=client_principal, changes={"full_name": "Sara"})
            )

    async def test_admin_edits_another_account(
        self, profile_handler, credential_store, admin, seed_brand, seed_principal
    ):
        """Test an admin edits a brand owner without touching the brand link."""
        brand, owner = await seed_brand()
        await seed_principal(
            "alice@x.tn",
            role=Role.BRAND_OWNER,
            owned_brand_id=brand.id,
            principal_id=owner.principal_id,
        )

        result = await profile_handler.handle(
            UpdateProfileCommand(
                actor=admin,
                principal_id=owner.principal_id,
                changes={"full_name": "Alice Ben Salah"},
            )
        )

        assert result.full_name == "Alice Ben Salah"
        assert result.brand_id == brand.id
        stored = await credential_store.find_by_id(owner.principal_id)
        assert stored.role == Role.BRAND_OWNER

    async def test_admin_missing_target(self, profile_handler, admin):
        """Test an admin editing an unknown account."""
        with pytest.raises(ResourceNotFoundError):
            await profile_handler.handle(
                UpdateProfileCommand(
                    actor=admin, principal_id=uuid.uuid4(), changes={"full_name": "Nobody"}
                )
            )

    async def test_client_cannot_edit_others(self, profile_handler, seed_principal):
        """Test editing another account is for admins only."""
        victim = await seed_principal("victim@example.com")
        attacker = await seed_principal("sara@example.com")

        with pytest.raises(WrongRoleError):
            await profile_handler.handle(
                UpdateProfileCommand(
                    actor=attacker.descriptor(),
                    principal_id=victim.id,
                    changes={"full_name": "Owned"},
                )
            )

    async def test_own_id_counts_as_self_service(self, profile_handler, seed_principal):
        """Test naming one's own id is a normal self edit."""
        principal = await seed_principal("sara@example.com")
        result = await profile_handler.handle(
            UpdateProfileCommand(
                actor=principal.descriptor(),
                principal_id=principal.id,
                changes={"full_name": "Sara"},
            )
        )
        assert result.full_name == "Sara"


@pytest.mark.asyncio
class TestChangePasswordHandler:
    """Tests for ChangePasswordHandler."""

    async def test_change_password(self, password_handler, credential_store, seed_principal):
        """Test the new password replaces the old one."""
        principal = await seed_principal("sara@example.com")

        await password_handler.handle(
            ChangePasswordCommand(
                actor=principal.descriptor(),
                current_password="secret123",
                new_password="better456",
            )
        )

        stored = await credential_store.find_by_id(principal.id)
        assert await credential_store.verify_secret(stored, "better456")
        assert not await credential_store.verify_secret(stored, "secret123")

    async def test_wrong_current_password(self, password_handler, credential_store, seed_principal):
        """Test the current password must match."""
        principal = await seed_principal("sara@example.com")

        with pytest.raises(InvalidCredentialsError, match="Current password"):
            await password_handler.handle(
                ChangePasswordCommand(
                    actor=principal.descriptor(),
                    current_password="guess",
                    new_password="better456",
                )
            )

        stored = await credential_store.find_by_id(principal.id)
        assert await credential_store.verify_secret(stored, "secret123")

    @pytest.mark.parametrize("new_password", ["", "abc"])
    async def test_new_password_too_short(self, password_handler, seed_principal, new_password):
        """Test short passwords."""
        principal = await seed_principal("sara@example.com")
        with pytest.raises(DomainValidationError):
            await password_handler.handle(
                ChangePasswordCommand(
                    actor=principal.descriptor(),
                    current_password="secret123",
                    new_password=new_password,
                )
            )

    async def test_anonymous(self, password_handler):
        """Test no principal."""
        with pytest.raises(UnauthenticatedError):
            await password_handler.handle(
                ChangePasswordCommand(actor=None, current_password="a", new_password="better456")
            )
