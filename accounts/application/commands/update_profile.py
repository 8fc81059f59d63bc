"""
Account profile commands.

Commands to edit an account's profile fields and to change its password.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from accounts.domain.principal import PrincipalDescriptor


@dataclass
class UpdateProfileCommand:
    """
    Command to edit an account's profile.

    Without ``principal_id`` the actor edits their own account; with
    one, an admin edits someone else's.
    """

    actor: Optional[PrincipalDescriptor]
    changes: Dict[str, Any] = field(default_factory=dict)
    principal_id: Optional[uuid.UUID] = None


@dataclass
class ChangePasswordCommand:
    """Command for the signed-in principal to replace their password."""

    actor: Optional[PrincipalDescriptor]
    current_password: str
    new_password: str
