"""
Brand domain events.

Domain events represent something that happened in the brand domain.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class BrandCreated(DomainEvent):
    """Event raised when a brand is created."""

    owner_id: uuid.UUID
    name: str
    status: str


@dataclass(frozen=True, kw_only=True)
class BrandProfileUpdated(DomainEvent):
    """Event raised when a brand's descriptive fields change."""

    actor_id: uuid.UUID


@dataclass(frozen=True, kw_only=True)
class BrandStatusChanged(DomainEvent):
    """Event raised when the lifecycle manager moves a brand."""

    previous_status: str
    new_status: str
    actor_id: uuid.UUID
    reason: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class BrandDeleted(DomainEvent):
    """Event raised when a brand is removed."""

    owner_id: uuid.UUID


@dataclass(frozen=True, kw_only=True)
class ProductCreated(DomainEvent):
    """Event raised when a product is created."""

    brand_id: uuid.UUID
    actor_id: uuid.UUID
    name: str


@dataclass(frozen=True, kw_only=True)
class ProductUpdated(DomainEvent):
    """Event raised when a product is changed."""

    brand_id: uuid.UUID
    actor_id: uuid.UUID


@dataclass(frozen=True, kw_only=True)
class ProductDeleted(DomainEvent):
    """Event raised when a product is removed."""

    brand_id: uuid.UUID
    actor_id: uuid.UUID
