"""
ListPrincipalsQuery.

Query for the admin user list.
"""

from dataclasses import dataclass
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor
from core.domain.value_objects import Role


@dataclass
class ListPrincipalsQuery:
    """Query to list principals, optionally by role."""

    actor: Optional[PrincipalDescriptor]
    role: Optional[Role] = None
