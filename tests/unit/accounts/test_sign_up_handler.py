"""
Unit tests for SignUpHandler.
"""
import pytest

from accounts.application.commands.sign_up import SignUpCommand
from accounts.application.handlers.sign_up_handler import SignUpHandler
from core.domain.exceptions import ConflictError, DomainValidationError
from core.domain.value_objects import BrandStatus, Role
from tests.fakes import FailingCredentialStore


@pytest.fixture
def sign_up_handler(credential_store, brand_repository, token_codec):
    """Fixture for a SignUpHandler over the in-memory stores."""
    return SignUpHandler(
        credential_store=credential_store,
        brand_repository=brand_repository,
        token_codec=token_codec,
    )


@pytest.mark.asyncio
class TestClientSignUp:
    """Tests for client sign-up."""

    async def test_sign_up_client(self, sign_up_handler, credential_store, token_codec):
        """Test successful client sign-up."""
        result = await sign_up_handler.handle(
            SignUpCommand(kind="client", email="Sara@Example.com", password="secret123")
        )

        assert result.principal.email == "sara@example.com"
        assert result.principal.role == "client"
        assert result.principal.full_name == "Sara"
        assert result.principal.brand_id is None
        assert result.brand is None
        assert token_codec.verify(result.token).principal_id == result.principal.id
        assert await credential_store.find_by_email("sara@example.com") is not None

    async def test_client_does_not_get_a_brand(self, sign_up_handler, brand_repository):
        """Test a brand name is ignored for clients."""
        await sign_up_handler.handle(
            SignUpCommand(
                kind="client", email="sara@example.com", password="secret123", brand_name="Sara Co"
            )
        )
        assert brand_repository.brands == {}

    async def test_duplicate_email(self, sign_up_handler, seed_principal):
        """Test emails are unique, case-insensitively."""
        await seed_principal("sara@example.com")
        with pytest.raises(ConflictError):
            await sign_up_handler.handle(
                SignUpCommand(kind="client", email="SARA@example.com", password="secret123")
            )

    @pytest.mark.parametrize("password", ["", "12345"])
    async def test_short_password(self, sign_up_handler, credential_store, password):
        """Test the minimum secret length."""
        with pytest.raises(DomainValidationError, match="at least 6"):
            await sign_up_handler.handle(
                SignUpCommand(kind="client", email="sara@example.com", password=password)
            )
        assert credential_store.principals == {}

    async def test_invalid_email(self, sign_up_handler):
        """Test malformed email."""
        with pytest.raises(DomainValidationError):
            await sign_up_handler.handle(
                SignUpCommand(kind="client", email="not-an-email", password="secret123")
            )

    @pytest.mark.parametrize("kind", ["admin", "superuser"])
    async def test_kind_must_be_self_service(self, sign_up_handler, kind):
        """Test admins cannot be created by sign-up."""
        with pytest.raises(DomainValidationError, match="Invalid account kind"):
            await sign_up_handler.handle(
                SignUpCommand(kind=kind, email="sara@example.com", password="secret123")
            )


@pytest.mark.asyncio
class TestBrandOwnerSignUp:
    """Tests for brand owner sign-up."""

    async def test_sign_up_brand_owner(
        self, sign_up_handler, credential_store, brand_repository
    ):
        """Test the brand and its owner are created together."""
        result = await sign_up_handler.handle(
            SignUpCommand(
                kind="brand_owner",
                email="alice@x.tn",
                password="secret123",
                brand_name="Alice Wear",
                brand_profile={"category": "Fashion", "website": "https://alicewear.tn"},
            )
        )

        assert result.principal.role == "brand_owner"
        assert result.brand.name == "Alice Wear"
        assert result.brand.status == "approved"
        assert result.brand.category == "Fashion"
        assert result.principal.brand_id == result.brand.id
        assert result.brand.owner_id == result.principal.id

        principal = await credential_store.find_by_id(result.principal.id)
        brand = await brand_repository.find_by_owner(principal.id)
        assert principal.role == Role.BRAND_OWNER
        assert brand.id == principal.owned_brand_id

    async def test_pending_sign_up_status(self, credential_store, brand_repository, token_codec):
        """Test the moderation-queue sign-up path."""
        handler = SignUpHandler(
            credential_store=credential_store,
            brand_repository=brand_repository,
            token_codec=token_codec,
            initial_brand_status=BrandStatus.PENDING,
        )
        result = await handler.handle(
            SignUpCommand(
                kind="brand_owner", email="alice@x.tn", password="secret123", brand_name="Alice Wear"
            )
        )
        assert result.brand.status == "pending"

    async def test_brand_name_required(self, sign_up_handler, credential_store):
        """Test a brand owner must name the brand."""
        with pytest.raises(DomainValidationError, match="Brand name is required"):
            await sign_up_handler.handle(
                SignUpCommand(kind="brand_owner", email="alice@x.tn", password="secret123")
            )
        assert credential_store.principals == {}

    async def test_duplicate_brand_name(
        self, sign_up_handler, seed_brand, credential_store, brand_repository
    ):
        """Test brand names are unique and nothing is written."""
        await seed_brand(name="Alice Wear")

        with pytest.raises(ConflictError):
            await sign_up_handler.handle(
                SignUpCommand(
                    kind="brand_owner",
                    email="alice@x.tn",
                    password="secret123",
                    brand_name="alice wear",
                )
            )

        assert credential_store.principals == {}
        assert len(brand_repository.brands) == 1

    async def test_duplicate_email_writes_no_brand(
        self, sign_up_handler, seed_principal, brand_repository
    ):
        """Test the email check runs before the brand write."""
        await seed_principal("alice@x.tn")

        with pytest.raises(ConflictError):
            await sign_up_handler.handle(
                SignUpCommand(
                    kind="brand_owner",
                    email="alice@x.tn",
                    password="secret123",
                    brand_name="Alice Wear",
                )
            )

        assert brand_repository.brands == {}
        assert brand_repository.deleted == []

    async def test_invalid_brand_profile(self, sign_up_handler, brand_repository):
        """Test malformed brand fields are rejected before any write."""
        with pytest.raises(DomainValidationError):
            await sign_up_handler.handle(
                SignUpCommand(
                    kind="brand_owner",
                    email="alice@x.tn",
                    password="secret123",
                    brand_name="Alice Wear",
                    brand_profile={"website": "alicewear.tn"},
                )
            )
        assert brand_repository.brands == {}

    async def test_principal_write_failure_removes_brand(self, brand_repository, token_codec):
        """Test a failed principal write leaves no orphan brand."""
        credential_store = FailingCredentialStore()
        handler = SignUpHandler(
            credential_store=credential_store,
            brand_repository=brand_repository,
            token_codec=token_codec,
        )

        with pytest.raises(ConnectionError):
            await handler.handle(
                SignUpCommand(
                    kind="brand_owner",
                    email="alice@x.tn",
                    password="secret123",
                    brand_name="Alice Wear",
                )
            )

        assert credential_store.create_attempts == 1
        assert len(brand_repository.deleted) == 1
        assert brand_repository.brands == {}
        assert await brand_repository.find_by_name("Alice Wear") is None
