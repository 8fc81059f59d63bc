"""
DeleteAccountCommand.

Command for an admin to remove a principal and everything it owns.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class DeleteAccountCommand:
    """Command to delete a principal account."""

    principal_id: uuid.UUID
    actor: Optional[PrincipalDescriptor]
