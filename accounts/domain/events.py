"""
Account domain events.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class AccountProvisioned(DomainEvent):
    """Event raised when a principal (and possibly its brand) is created."""

    role: str
    brand_id: Optional[uuid.UUID] = None


@dataclass(frozen=True, kw_only=True)
class PrincipalSignedIn(DomainEvent):
    """Event raised on a successful sign-in."""

    role: str


@dataclass(frozen=True, kw_only=True)
class AccountDeleted(DomainEvent):
    """Event raised when an admin deletes an account."""

    role: str
    actor_id: uuid.UUID
    brand_id: Optional[uuid.UUID] = None


@dataclass(frozen=True, kw_only=True)
class AccountProfileUpdated(DomainEvent):
    """Event raised when an account's profile fields change."""

    actor_id: uuid.UUID
    changed_fields: str


@dataclass(frozen=True, kw_only=True)
class AccountPasswordChanged(DomainEvent):
    """Event raised when a principal changes their password."""
