"""
Product domain entity.

This is the core domain entity representing a product of a brand.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Tuple

from core.domain.value_objects import ImageRef, is_http_url

EDITABLE_FIELDS = ("name", "description", "price", "images", "purchase_link")


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Represents a product listed under a brand.
    This is an immutable value object with business logic.
    """

    id: uuid.UUID
    brand_id: uuid.UUID
    name: str
    description: Optional[str]
    price: Decimal
    images: Tuple[ImageRef, ...]
    purchase_link: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate product entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Product name too long")
        if not self.brand_id:
            raise ValueError("Brand ID is required")
        if self.price < 0:
            raise ValueError("Price must be greater than or equal to 0")
        if not self.images:
            raise ValueError("At least one image is required")
        if not is_http_url(self.purchase_link):
            raise ValueError(
                "Purchase link must be a valid URL starting with http:// or https://"
            )

    @classmethod
    def create(
        cls,
        brand_id: uuid.UUID,
        name: str,
        price,
        images: Iterable,
        purchase_link: str,
        description: Optional[str] = None,
        product_id: Optional[uuid.UUID] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            brand_id: Brand UUID this product belongs to
            name: Product display name
            price: Non-negative price
            images: Ordered image references (ImageRef or dicts)
            purchase_link: External purchase URL
            description: Optional description; whitespace-only becomes None
            product_id: Optional UUID (generated if not provided)

        Returns:
            Product entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=product_id or uuid.uuid4(),
            brand_id=brand_id,
            name=(name or "").strip(),
            description=_clean_description(description),
            price=to_price(price),
            images=to_images(images),
            purchase_link=(purchase_link or "").strip(),
            created_at=now,
            updated_at=now,
        )

    def update(self, **changes) -> "Product":
        """
        Create a new Product instance with updated fields.

        Args:
            **changes: Fields from EDITABLE_FIELDS

        Returns:
            New Product instance
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown product fields: {', '.join(sorted(unknown))}")
        if "name" in changes:
            changes["name"] = (changes["name"] or "").strip()
        if "description" in changes:
            changes["description"] = _clean_description(changes["description"])
        if "price" in changes:
            changes["price"] = to_price(changes["price"])
        if "images" in changes:
            changes["images"] = to_images(changes["images"])
        if "purchase_link" in changes:
            changes["purchase_link"] = (changes["purchase_link"] or "").strip()
        return replace(self, updated_at=datetime.now(timezone.utc), **changes)


def to_price(value) -> Decimal:
    """Coerce a price to Decimal."""
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, TypeError, ValueError):
        price = None
    if price is None or not price.is_finite():
        raise ValueError("Price must be a valid number greater than or equal to 0")
    return price


def to_images(values: Iterable) -> Tuple[ImageRef, ...]:
    """Coerce image references, preserving order."""
    refs = []
    for value in values or ():
        if isinstance(value, ImageRef):
            refs.append(value)
        else:
            refs.append(ImageRef(public_id=value["public_id"], image_url=value["image_url"]))
    return tuple(refs)


def _clean_description(value: Optional[str]) -> Optional[str]:
    # Newlines are kept; only an empty or whitespace-only text is dropped.
    if value is None or not value.strip():
        return None
    return value
