"""
GetOwnBrandQuery.

Query for a brand owner's console: their brand and all its products,
whatever the brand's status.
"""
from dataclasses import dataclass
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class GetOwnBrandQuery:
    """Query for the caller's own brand."""

    actor: Optional[PrincipalDescriptor]
