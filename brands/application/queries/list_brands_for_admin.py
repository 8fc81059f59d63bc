"""
ListBrandsForAdminQuery.

Query for the admin back-office brand list, across every status.
"""
from dataclasses import dataclass
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class ListBrandsForAdminQuery:
    """Query to list brands for an admin, optionally filtered by status."""

    actor: Optional[PrincipalDescriptor]
    status: Optional[str] = None
