"""
Brand and product DTOs for API responses.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from brands.domain.brand import Brand
from brands.domain.product import Product


@dataclass
class BrandDTO:
    """DTO for brand information."""

    id: uuid.UUID
    owner_id: uuid.UUID
    name: str
    status: str
    is_featured: bool
    category: Optional[str]
    description: Optional[str]
    logo_url: Optional[str]
    location: Optional[str]
    website: Optional[str]
    instagram: Optional[str]
    facebook: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandDTO":
        return cls(
            id=brand.id,
            owner_id=brand.owner_id,
            name=brand.name,
            status=brand.status.value,
            is_featured=brand.is_featured,
            category=brand.category,
            description=brand.description,
            logo_url=brand.logo_url,
            location=brand.location,
            website=brand.website,
            instagram=brand.instagram,
            facebook=brand.facebook,
            phone=brand.phone,
            email=brand.email,
            created_at=brand.created_at,
            updated_at=brand.updated_at,
        )


@dataclass
class ProductDTO:
    """DTO for product information."""

    id: uuid.UUID
    brand_id: uuid.UUID
    name: str
    description: Optional[str]
    price: Decimal
    images: List[Dict[str, str]]
    purchase_link: str
    created_at: datetime
    updated_at: datetime
    brand_name: Optional[str] = None

    @classmethod
    def from_entity(cls, product: Product, brand_name: Optional[str] = None) -> "ProductDTO":
        return cls(
            id=product.id,
            brand_id=product.brand_id,
            name=product.name,
            description=product.description,
            price=product.price,
            images=[image.to_dict() for image in product.images],
            purchase_link=product.purchase_link,
            created_at=product.created_at,
            updated_at=product.updated_at,
            brand_name=brand_name,
        )


@dataclass
class OwnBrandDTO:
    """DTO for a brand owner's console view: their brand and all its products."""

    brand: BrandDTO
    products: List[ProductDTO] = field(default_factory=list)


@dataclass
class PublicBrandDTO:
    """DTO for a public brand page."""

    brand: BrandDTO
    products: List[ProductDTO] = field(default_factory=list)


@dataclass
class FavoriteStatusDTO:
    """DTO for the favorite check."""

    product_id: uuid.UUID
    is_favorite: bool
