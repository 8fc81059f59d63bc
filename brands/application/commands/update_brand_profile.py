"""
UpdateBrandProfileCommand.

Command to change a brand's descriptive fields.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class UpdateBrandProfileCommand:
    """Command to update a brand profile. Status is not a profile field."""

    brand_id: uuid.UUID
    actor: Optional[PrincipalDescriptor]
    changes: Dict[str, Any] = field(default_factory=dict)
