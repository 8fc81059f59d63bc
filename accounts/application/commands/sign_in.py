"""
SignInCommand.

Command to exchange credentials for a token.
"""

from dataclasses import dataclass
from typing import Optional

from core.domain.value_objects import Role


@dataclass
class SignInCommand:
    """
    Command to sign in.

    ``required_role`` restricts the sign-in to one role, as the admin
    console does.
    """

    email: str
    password: str
    required_role: Optional[Role] = None
