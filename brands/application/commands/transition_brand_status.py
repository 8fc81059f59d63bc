"""
TransitionBrandStatusCommand.

Command for an admin to move a brand through its lifecycle.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class TransitionBrandStatusCommand:
    """Command to change a brand's status."""

    brand_id: uuid.UUID
    target_status: str
    actor: Optional[PrincipalDescriptor]
    reason: Optional[str] = None
