"""
Pytest configuration and shared fixtures.
"""

import uuid

import pytest
from django.core.cache import cache

from accounts.domain.principal import Principal, PrincipalDescriptor
from accounts.infrastructure.tokens.jwt_token_codec import JWTTokenCodec
from authorization.kernel import AuthorizationKernel
from brands.domain.brand import Brand
from brands.domain.product import Product
from brands.domain.services import BrandLifecycleManager
from core.domain.value_objects import BrandStatus, Role
from tests.fakes import (
    SAMPLE_IMAGES,
    InMemoryBrandRepository,
    InMemoryCredentialStore,
    InMemoryFavoriteRepository,
    InMemoryProductRepository,
)


@pytest.fixture(autouse=True)
def clear_catalog_cache():
    """Cached public lists must not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def credential_store():
    """Fixture for an in-memory CredentialStore."""
    return InMemoryCredentialStore()


@pytest.fixture
def brand_repository():
    """Fixture for an in-memory BrandRepository."""
    return InMemoryBrandRepository()


@pytest.fixture
def favorite_repository():
    """Fixture for an in-memory FavoriteRepository."""
    return InMemoryFavoriteRepository()


@pytest.fixture
def product_repository(brand_repository, favorite_repository):
    """Fixture for an in-memory ProductRepository."""
    return InMemoryProductRepository(brand_repository, favorite_repository)


@pytest.fixture
def kernel(brand_repository, product_repository):
    """Fixture for the AuthorizationKernel over the in-memory repositories."""
    return AuthorizationKernel(brand_repository=brand_repository, product_repository=product_repository)


@pytest.fixture
def lifecycle_manager(brand_repository, kernel):
    """Fixture for the BrandLifecycleManager."""
    return BrandLifecycleManager(brand_repository=brand_repository, kernel=kernel)


@pytest.fixture
def token_codec():
    """Fixture for a JWT codec with a test secret."""
    return JWTTokenCodec(secret="unit-test-secret")


@pytest.fixture
def admin():
    """Fixture for an admin descriptor."""
    return PrincipalDescriptor(principal_id=uuid.uuid4(), role=Role.ADMIN)


@pytest.fixture
def client_principal():
    """Fixture for a client descriptor."""
    return PrincipalDescriptor(principal_id=uuid.uuid4(), role=Role.CLIENT)


@pytest.fixture
def seed_brand(brand_repository):
    """Factory fixture storing a brand and returning it with its owner descriptor."""

    async def _seed(name="Alice Wear", status=BrandStatus.APPROVED, **profile):
        owner_id = uuid.uuid4()
        brand = await brand_repository.create(
            Brand.create(owner_id=owner_id, name=name, status=status, **profile)
        )
        return brand, PrincipalDescriptor(principal_id=owner_id, role=Role.BRAND_OWNER)

    return _seed


@pytest.fixture
def seed_product(product_repository):
    """Factory fixture storing a product under a brand."""

    async def _seed(brand_id, name="Linen Shirt", price="49.90"):
        return await product_repository.save(
            Product.create(
                brand_id=brand_id,
                name=name,
                price=price,
                images=SAMPLE_IMAGES,
                purchase_link="https://shop.example.com/linen-shirt",
            )
        )

    return _seed


@pytest.fixture
def seed_principal(credential_store):
    """Factory fixture storing a principal with the password ``secret123``."""

    async def _seed(email, role=Role.CLIENT, owned_brand_id=None, principal_id=None):
        return await credential_store.create(
            Principal.create(
                email=email,
                secret_hash=await credential_store.hash_secret("secret123"),
                role=role,
                owned_brand_id=owned_brand_id,
                principal_id=principal_id,
            )
        )

    return _seed


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
