"""
Public catalog queries.

Anonymous reads of the directory. Only approved brands, and products
of approved brands, are visible.
"""
import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListPublicBrandsQuery:
    """Query to list approved brands."""

    featured_only: bool = False


@dataclass
class GetPublicBrandQuery:
    """Query for one approved brand and its products."""

    brand_id: uuid.UUID


@dataclass
class ListPublicProductsQuery:
    """Query to list products of approved brands."""

    search: Optional[str] = None
    brand_id: Optional[uuid.UUID] = None


@dataclass
class GetPublicProductQuery:
    """Query for one product of an approved brand."""

    product_id: uuid.UUID
