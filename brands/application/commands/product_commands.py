"""
Product commands.

Commands to create, update and delete a brand's products.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class CreateProductCommand:
    """
    Command to create a product.

    Brand owners may omit ``brand_id``; it then resolves to their own
    brand. Admins must name the brand.
    """

    actor: Optional[PrincipalDescriptor]
    name: str
    price: Any
    images: List[Dict[str, str]]
    purchase_link: str
    description: Optional[str] = None
    brand_id: Optional[uuid.UUID] = None


@dataclass
class UpdateProductCommand:
    """Command to update a product's fields."""

    product_id: uuid.UUID
    actor: Optional[PrincipalDescriptor]
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DeleteProductCommand:
    """Command to delete a product."""

    product_id: uuid.UUID
    actor: Optional[PrincipalDescriptor]
