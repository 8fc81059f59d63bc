"""
Principal DTOs for API responses.

The secret hash never leaves the credential store, so none of these
DTOs carry it.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from accounts.domain.principal import Principal
from brands.application.dto.brand_dto import BrandDTO


@dataclass
class PrincipalDTO:
    """DTO for principal information."""

    id: uuid.UUID
    email: str
    role: str
    full_name: str
    phone: Optional[str]
    brand_id: Optional[uuid.UUID]
    created_at: datetime

    @classmethod
    def from_entity(cls, principal: Principal) -> "PrincipalDTO":
        return cls(
            id=principal.id,
            email=str(principal.email),
            role=principal.role.value,
            full_name=principal.full_name,
            phone=principal.phone,
            brand_id=principal.owned_brand_id,
            created_at=principal.created_at,
        )


@dataclass
class SignUpResultDTO:
    """DTO for sign-up response."""

    principal: PrincipalDTO
    token: str
    brand: Optional[BrandDTO] = None


@dataclass
class SignInResultDTO:
    """DTO for sign-in response."""

    principal: PrincipalDTO
    token: str


@dataclass
class CurrentPrincipalDTO:
    """DTO for the current principal, with the owned brand when there is one."""

    principal: PrincipalDTO
    brand: Optional[BrandDTO] = None
