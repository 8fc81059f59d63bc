"""
Product and Favorite models.
"""
import uuid

from django.db import models


class Product(models.Model):
    """
    Represents a product listed under a brand.
    Products belong to a brand and go with it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.ForeignKey("brands.Brand", on_delete=models.CASCADE, related_name="products")
    name = models.CharField(max_length=255, help_text="Product display name")
    description = models.TextField(null=True, blank=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    images = models.JSONField(default=list, help_text="Ordered list of {public_id, image_url}")
    purchase_link = models.CharField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["brand", "-created_at"], name="products_brand_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(price__gte=0), name="products_price_non_negative"),
        ]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.brand_id:
            raise ValidationError("Brand is required")
        if not self.name:
            raise ValidationError("Name is required")
        if not isinstance(self.images, list) or not self.images:
            raise ValidationError("At least one image is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


class Favorite(models.Model):
    """A client's bookmark on a product."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    principal = models.ForeignKey(
        "accounts.Principal", on_delete=models.CASCADE, related_name="favorites"
    )
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="favorites")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "favorites"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["principal", "product"], name="favorites_unique_pair"),
        ]

    def __str__(self):
        return f"{self.principal_id} - {self.product_id}"
