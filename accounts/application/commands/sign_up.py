"""
SignUpCommand.

Command to create a client account, or a brand owner account together
with its brand.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class SignUpCommand:
    """
    Command to sign up.

    ``kind`` is ``client`` or ``brand_owner``. Brand owners must also
    supply ``brand_name``; ``brand_profile`` holds the brand's optional
    descriptive fields.
    """

    kind: str
    email: str
    password: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    brand_name: Optional[str] = None
    brand_profile: Dict[str, Any] = field(default_factory=dict)
