"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import re
from abc import ABC
from dataclasses import dataclass
from enum import Enum

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")
HTTP_URL_PATTERN = re.compile(r"^https?://.+")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email value object with validation.

    Emails are compared case-insensitively, so the value is
    normalized to lower case on construction.
    """

    value: str

    def __post_init__(self):
        """Normalize and validate email format."""
        normalized = (self.value or "").strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", normalized)

    @property
    def local_part(self) -> str:
        """Return the part before the @."""
        return self.value.split("@", 1)[0]

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


@dataclass(frozen=True)
class ImageRef(ValueObject):
    """Reference to an image held by the external image store."""

    public_id: str
    image_url: str

    def __post_init__(self):
        """Validate image reference."""
        if not self.public_id:
            raise ValueError("Image public id is required")
        if not HTTP_URL_PATTERN.match(self.image_url or ""):
            raise ValueError("Image URL must be a valid HTTP/HTTPS URL")

    def to_dict(self) -> dict:
        """Return the reference as a plain dict."""
        return {"public_id": self.public_id, "image_url": self.image_url}


class Role(Enum):
    """Principal role value object."""

    CLIENT = "client"
    BRAND_OWNER = "brand_owner"
    ADMIN = "admin"

    def __str__(self) -> str:
        """Return role as string."""
        return self.value


class BrandStatus(Enum):
    """Brand publication status value object."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    BANNED = "banned"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


def is_http_url(value: str) -> bool:
    """Return True if value looks like an http(s) URL."""
    return bool(value) and bool(HTTP_URL_PATTERN.match(value.strip()))
