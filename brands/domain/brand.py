"""
Brand domain entity.

This is the core domain entity representing a brand listed in the
directory. It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import BrandStatus, is_http_url

# Fields an owner (or admin) may edit. Status is deliberately absent:
# only the lifecycle manager writes it.
PROFILE_FIELDS = (
    "name",
    "category",
    "description",
    "logo_url",
    "location",
    "website",
    "instagram",
    "facebook",
    "phone",
    "email",
)

URL_FIELDS = ("logo_url", "website", "instagram", "facebook")


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    Represents a brand in the directory. ``owner_id`` mirrors the owning
    principal's ``owned_brand_id`` so ownership checks need one read.
    This is an immutable value object with business logic.
    """

    id: uuid.UUID
    owner_id: uuid.UUID
    name: str
    status: BrandStatus
    created_at: datetime
    updated_at: datetime
    category: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_featured: bool = False

    def __post_init__(self):
        """Validate brand entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Brand name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Brand name too long")
        if not self.owner_id:
            raise ValueError("Brand owner is required")
        for url_field in URL_FIELDS:
            value = getattr(self, url_field)
            if value and not is_http_url(value):
                raise ValueError(f"{url_field} must be a valid URL")

    @classmethod
    def create(
        cls,
        owner_id: uuid.UUID,
        name: str,
        status: BrandStatus = BrandStatus.APPROVED,
        brand_id: Optional[uuid.UUID] = None,
        **profile,
    ) -> "Brand":
        """
        Create a new Brand entity.

        Args:
            owner_id: UUID of the principal that will own the brand
            name: Brand display name
            status: Initial lifecycle status
            brand_id: Optional UUID (generated if not provided)
            **profile: Optional descriptive fields (see PROFILE_FIELDS)

        Returns:
            Brand entity instance
        """
        unknown = set(profile) - set(PROFILE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown brand fields: {', '.join(sorted(unknown))}")
        now = datetime.now(timezone.utc)
        return cls(
            id=brand_id or uuid.uuid4(),
            owner_id=owner_id,
            name=name.strip(),
            status=status,
            created_at=now,
            updated_at=now,
            **_clean_profile(profile),
        )

    @property
    def is_public(self) -> bool:
        """Only approved brands appear in the public catalog."""
        return self.status == BrandStatus.APPROVED

    @property
    def is_banned(self) -> bool:
        return self.status == BrandStatus.BANNED

    def update_profile(self, **changes) -> "Brand":
        """
        Create a new Brand instance with updated descriptive fields.

        Args:
            **changes: Fields from PROFILE_FIELDS

        Returns:
            New Brand instance

        Raises:
            ValueError: If a change targets status or an unknown field
        """
        if "status" in changes:
            raise ValueError("Brand status can only change through the lifecycle manager")
        unknown = set(changes) - set(PROFILE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown brand fields: {', '.join(sorted(unknown))}")
        cleaned = _clean_profile(changes)
        if "name" in cleaned and not cleaned["name"]:
            raise ValueError("Brand name cannot be empty")
        return replace(self, updated_at=datetime.now(timezone.utc), **cleaned)

    def with_status(self, status: BrandStatus) -> "Brand":
        """Return a copy at a new status; used by the lifecycle manager."""
        return replace(self, status=status, updated_at=datetime.now(timezone.utc))


def _clean_profile(values: dict) -> dict:
    cleaned = {}
    for key, value in values.items():
        if isinstance(value, str):
            value = value.strip() or None
        if key == "email" and value:
            value = value.lower()
        cleaned[key] = value
    if "name" in values:
        cleaned["name"] = (values["name"] or "").strip()
    return cleaned
