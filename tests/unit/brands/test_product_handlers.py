"""
Unit tests for product and favorite handlers.
"""
import uuid

import pytest

from brands.application.commands.favorite_commands import AddFavoriteCommand, RemoveFavoriteCommand
from brands.application.commands.product_commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from brands.application.handlers.favorite_handlers import (
    AddFavoriteHandler,
    CheckFavoriteHandler,
    ListFavoritesHandler,
    RemoveFavoriteHandler,
)
from brands.application.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from brands.application.queries.favorite_queries import CheckFavoriteQuery, ListFavoritesQuery
from brands.domain.favorite import Favorite
from core.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    NotOwnerError,
    ResourceNotFoundError,
    UnauthenticatedError,
    WrongRoleError,
)
from core.domain.value_objects import BrandStatus
from tests.fakes import SAMPLE_IMAGES


def create_command(actor, brand_id=None, **overrides):
    fields = {
        "actor": actor,
        "name": "Linen Shirt",
        "price": "49.90",
        "images": SAMPLE_IMAGES,
        "purchase_link": "https://shop.example.com/linen-shirt",
        "brand_id": brand_id,
    }
    fields.update(overrides)
    return CreateProductCommand(**fields)


@pytest.fixture
def create_handler(brand_repository, product_repository, kernel):
    return CreateProductHandler(brand_repository, product_repository, kernel)


@pytest.mark.asyncio
class TestCreateProductHandler:
    """Tests for CreateProductHandler."""

    async def test_owner_creates_in_own_brand(self, create_handler, product_repository, seed_brand):
        """Test the brand defaults to the owner's own brand."""
        brand, owner = await seed_brand()

        result = await create_handler.handle(create_command(owner))

        assert result.brand_id == brand.id
        assert str(result.price) == "49.90"
        assert result.id in product_repository.products

    async def test_owner_cannot_create_in_foreign_brand(self, create_handler, seed_brand):
        """Test naming another brand."""
        brand, _ = await seed_brand()
        _, other_owner = await seed_brand(name="Bob Shoes")
        with pytest.raises(NotOwnerError):
            await create_handler.handle(create_command(other_owner, brand_id=brand.id))

    async def test_admin_must_name_brand(self, create_handler, admin):
        """Test admins have no default brand."""
        with pytest.raises(DomainValidationError):
            await create_handler.handle(create_command(admin))

    async def test_admin_creates_for_any_brand(self, create_handler, admin, seed_brand):
        """Test the admin override."""
        brand, _ = await seed_brand()
        result = await create_handler.handle(create_command(admin, brand_id=brand.id))
        assert result.brand_id == brand.id

    async def test_client_is_refused(self, create_handler, client_principal):
        """Test clients cannot create products."""
        with pytest.raises(WrongRoleError):
            await create_handler.handle(create_command(client_principal))

    async def test_anonymous_is_refused(self, create_handler):
        """Test anonymous callers."""
        with pytest.raises(UnauthenticatedError):
            await create_handler.handle(create_command(None))

    async def test_invalid_fields(self, create_handler, seed_brand):
        """Test malformed product fields."""
        _, owner = await seed_brand()
        with pytest.raises(DomainValidationError):
            await create_handler.handle(create_command(owner, images=[]))


@pytest.mark.asyncio
class TestUpdateDeleteProduct:
    """Tests for UpdateProductHandler and DeleteProductHandler."""

    async def test_update(self, product_repository, kernel, seed_brand, seed_product):
        """Test the owner updates a product."""
        brand, owner = await seed_brand()
        product = await seed_product(brand.id)
        handler = UpdateProductHandler(product_repository, kernel)

        result = await handler.handle(
            UpdateProductCommand(product_id=product.id, actor=owner, changes={"price": "10"})
        )

        assert str(result.price) == "10"

    async def test_update_foreign_product(self, product_repository, kernel, seed_brand, seed_product):
        """Test another owner's product."""
        brand, _ = await seed_brand()
        _, other_owner = await seed_brand(name="Bob Shoes")
        product = await seed_product(brand.id)
        handler = UpdateProductHandler(product_repository, kernel)

        with pytest.raises(NotOwnerError):
            await handler.handle(
                UpdateProductCommand(product_id=product.id, actor=other_owner, changes={"price": "1"})
            )

    async def test_update_invalid(self, product_repository, kernel, seed_brand, seed_product):
        """Test an invalid change."""
        brand, owner = await seed_brand()
        product = await seed_product(brand.id)
        handler = UpdateProductHandler(product_repository, kernel)

        with pytest.raises(DomainValidationError):
            await handler.handle(
                UpdateProductCommand(product_id=product.id, actor=owner, changes={"price": "-5"})
            )

    async def test_delete_removes_favorites(
        self, product_repository, favorite_repository, kernel, seed_brand, seed_product, client_principal
    ):
        """Test deleting a product drops its favorites."""
        brand, owner = await seed_brand()
        product = await seed_product(brand.id)
        await favorite_repository.add(
            Favorite.create(principal_id=client_principal.principal_id, product_id=product.id)
        )
        handler = DeleteProductHandler(product_repository, kernel)

        await handler.handle(DeleteProductCommand(product_id=product.id, actor=owner))

        assert product_repository.products == {}
        assert favorite_repository.favorites == {}

    async def test_delete_missing(self, product_repository, kernel, seed_brand):
        """Test deleting an unknown product."""
        _, owner = await seed_brand()
        handler = DeleteProductHandler(product_repository, kernel)
        with pytest.raises(ResourceNotFoundError):
            await handler.handle(DeleteProductCommand(product_id=uuid.uuid4(), actor=owner))


@pytest.mark.asyncio
class TestFavoriteHandlers:
    """Tests for favorite handlers."""

    async def test_add_list_check_remove(
        self,
        favorite_repository,
        product_repository,
        brand_repository,
        kernel,
        seed_brand,
        seed_product,
        client_principal,
    ):
        """Test a client's bookmark lifecycle."""
        brand, _ = await seed_brand()
        product = await seed_product(brand.id)
        add = AddFavoriteHandler(favorite_repository, product_repository, brand_repository, kernel)
        listing = ListFavoritesHandler(favorite_repository, product_repository, brand_repository, kernel)
        check = CheckFavoriteHandler(favorite_repository, kernel)
        remove = RemoveFavoriteHandler(favorite_repository, kernel)

        added = await add.handle(AddFavoriteCommand(product_id=product.id, actor=client_principal))
        favorites = await listing.handle(ListFavoritesQuery(actor=client_principal))
        status = await check.handle(CheckFavoriteQuery(product_id=product.id, actor=client_principal))

        assert added.brand_name == "Alice Wear"
        assert [p.id for p in favorites] == [product.id]
        assert status.is_favorite

        await remove.handle(RemoveFavoriteCommand(product_id=product.id, actor=client_principal))
        status = await check.handle(CheckFavoriteQuery(product_id=product.id, actor=client_principal))
        assert not status.is_favorite

    async def test_add_twice(
        self, favorite_repository, product_repository, brand_repository, kernel, seed_brand,
        seed_product, client_principal,
    ):
        """Test a duplicate bookmark."""
        brand, _ = await seed_brand()
        product = await seed_product(brand.id)
        add = AddFavoriteHandler(favorite_repository, product_repository, brand_repository, kernel)

        await add.handle(AddFavoriteCommand(product_id=product.id, actor=client_principal))
        with pytest.raises(ConflictError):
            await add.handle(AddFavoriteCommand(product_id=product.id, actor=client_principal))

    async def test_add_hidden_product(
        self, favorite_repository, product_repository, brand_repository, kernel, seed_brand,
        seed_product, client_principal,
    ):
        """Test products of hidden brands cannot be bookmarked."""
        brand, _ = await seed_brand(status=BrandStatus.PENDING)
        product = await seed_product(brand.id)
        add = AddFavoriteHandler(favorite_repository, product_repository, brand_repository, kernel)

        with pytest.raises(ResourceNotFoundError):
            await add.handle(AddFavoriteCommand(product_id=product.id, actor=client_principal))

    async def test_list_hides_banned_brand(
        self, favorite_repository, product_repository, brand_repository, kernel, seed_brand,
        seed_product, client_principal,
    ):
        """Test a ban hides existing favorites without removing them."""
        brand, _ = await seed_brand()
        product = await seed_product(brand.id)
        add = AddFavoriteHandler(favorite_repository, product_repository, brand_repository, kernel)
        listing = ListFavoritesHandler(favorite_repository, product_repository, brand_repository, kernel)
        await add.handle(AddFavoriteCommand(product_id=product.id, actor=client_principal))

        await brand_repository.write_status(brand.id, BrandStatus.APPROVED, BrandStatus.BANNED)

        assert await listing.handle(ListFavoritesQuery(actor=client_principal)) == []
        assert len(favorite_repository.favorites) == 1

    async def test_remove_missing(self, favorite_repository, kernel, client_principal):
        """Test removing a product that is not a favorite."""
        remove = RemoveFavoriteHandler(favorite_repository, kernel)
        with pytest.raises(ResourceNotFoundError):
            await remove.handle(RemoveFavoriteCommand(product_id=uuid.uuid4(), actor=client_principal))

    async def test_brand_owner_has_no_favorites(self, favorite_repository, kernel, seed_brand):
        """Test favorites are for clients only."""
        _, owner = await seed_brand()
        check = CheckFavoriteHandler(favorite_repository, kernel)
        with pytest.raises(WrongRoleError):
            await check.handle(CheckFavoriteQuery(product_id=uuid.uuid4(), actor=owner))
