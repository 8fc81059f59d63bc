"""
GetCurrentPrincipalQuery.

Query for the principal behind the presented token.
"""

from dataclasses import dataclass
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class GetCurrentPrincipalQuery:
    """Query for the authenticated principal's account."""

    actor: Optional[PrincipalDescriptor]
