"""
Principal domain entity.

A principal is an account that can authenticate: a client, a brand
owner or an admin. A brand owner is bound to exactly one brand through
``owned_brand_id``; no other role may carry that reference.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import Email, Role

MIN_SECRET_LENGTH = 6

# Fields a principal may edit on their own account.
PROFILE_FIELDS = ("full_name", "email", "phone")

# Fields fixed at creation: role and the brand binding.
IMMUTABLE_FIELDS = frozenset({"role", "owned_brand_id", "brand_id"})


@dataclass(frozen=True)
class PrincipalDescriptor:
    """
    Identity asserted by a verified token.

    Carries identity and role only; ownership is always resolved
    from the repositories at decision time.
    """

    principal_id: uuid.UUID
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass(frozen=True)
class Principal:
    """
    Principal domain entity.

    The secret hash is held here for the credential store only and
    must never be serialized outward.
    """

    id: uuid.UUID
    email: Email
    secret_hash: str
    role: Role
    owned_brand_id: Optional[uuid.UUID]
    full_name: str
    phone: Optional[str]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate principal entity."""
        if not self.secret_hash:
            raise ValueError("Secret hash is required")
        if self.role == Role.BRAND_OWNER and self.owned_brand_id is None:
            raise ValueError("A brand owner must own a brand")
        if self.role != Role.BRAND_OWNER and self.owned_brand_id is not None:
            raise ValueError(f"A {self.role.value} cannot own a brand")

    @classmethod
    def create(
        cls,
        email: str,
        secret_hash: str,
        role: Role,
        full_name: Optional[str] = None,
        phone: Optional[str] = None,
        owned_brand_id: Optional[uuid.UUID] = None,
        principal_id: Optional[uuid.UUID] = None,
    ) -> "Principal":
        """
        Create a new Principal entity.

        Args:
            email: Login email (normalized to lower case)
            secret_hash: Hash produced by the credential store's hasher
            role: Principal role
            full_name: Display name; defaults to the capitalized email local part
            phone: Optional phone number
            owned_brand_id: Brand bound to a brand owner
            principal_id: Optional UUID (generated if not provided)

        Returns:
            Principal entity instance
        """
        address = Email(email)
        name = (full_name or "").strip() or default_full_name(address)
        now = datetime.now(timezone.utc)
        return cls(
            id=principal_id or uuid.uuid4(),
            email=address,
            secret_hash=secret_hash,
            role=role,
            owned_brand_id=owned_brand_id,
            full_name=name,
            phone=(phone or "").strip() or None,
            created_at=now,
            updated_at=now,
        )

    def descriptor(self) -> PrincipalDescriptor:
        """Return the identity/role pair carried by tokens."""
        return PrincipalDescriptor(principal_id=self.id, role=self.role)

    def update_profile(self, **changes) -> "Principal":
        """
        Create a new Principal instance with updated profile fields.

        Args:
            **changes: Fields from PROFILE_FIELDS

        Returns:
            New Principal instance

        Raises:
            ValueError: If a change targets role, the brand binding, an
                unknown field, or is malformed
        """
        locked = IMMUTABLE_FIELDS & set(changes)
        if locked:
            raise ValueError(f"Fields cannot be changed: {', '.join(sorted(locked))}")
        unknown = set(changes) - set(PROFILE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown account fields: {', '.join(sorted(unknown))}")

        updates = {}
        if "email" in changes:
            updates["email"] = Email(changes["email"] or "")
        if "full_name" in changes:
            name = (changes["full_name"] or "").strip()
            if not name:
                raise ValueError("Full name cannot be empty")
            updates["full_name"] = name
        if "phone" in changes:
            updates["phone"] = (changes["phone"] or "").strip() or None
        return replace(self, updated_at=datetime.now(timezone.utc), **updates)

    def with_secret_hash(self, secret_hash: str) -> "Principal":
        """Return a copy carrying a new secret hash."""
        return replace(self, secret_hash=secret_hash, updated_at=datetime.now(timezone.utc))


def default_full_name(email: Email) -> str:
    """Derive a display name from the email local part."""
    local = email.local_part
    return local[:1].upper() + local[1:]
