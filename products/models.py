"""
Model registration for the products app.
"""

from products.infrastructure.models import Favorite, Product  # noqa: F401
