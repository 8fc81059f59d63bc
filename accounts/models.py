"""
Model registration for the accounts app.
"""

from accounts.infrastructure.models import Principal  # noqa: F401
