"""
Brand model.
"""

import uuid

from django.db import models
from django.db.models.functions import Lower


class Brand(models.Model):
    """
    Represents a brand listed in the directory.

    ``owner_id`` mirrors the owning principal's ``owned_brand`` so that
    ownership checks need a single read. It is a plain column, not a
    foreign key, because the principal row is written after the brand.
    """

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("approved", "Approved"),
        ("rejected", "Rejected"),
        ("banned", "Banned"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.UUIDField(unique=True, help_text="Owning principal")
    name = models.CharField(max_length=255, help_text="Brand display name")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="approved")
    category = models.CharField(max_length=100, null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    logo_url = models.CharField(max_length=500, null=True, blank=True)
    location = models.CharField(max_length=255, null=True, blank=True)
    website = models.CharField(max_length=500, null=True, blank=True)
    instagram = models.CharField(max_length=500, null=True, blank=True)
    facebook = models.CharField(max_length=500, null=True, blank=True)
    phone = models.CharField(max_length=32, null=True, blank=True)
    email = models.CharField(max_length=254, null=True, blank=True)
    is_featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "brands"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="brands_status_idx"),
            models.Index(fields=["is_featured"], name="brands_featured_idx"),
            models.Index(fields=["-created_at"], name="brands_created_idx"),
        ]
        constraints = [
            models.UniqueConstraint(Lower("name"), name="brands_name_ci_unique"),
            models.CheckConstraint(
                condition=models.Q(status__in=["pending", "approved", "rejected", "banned"]),
                name="brands_status_valid",
            ),
        ]

    def clean(self):
        """Validate brand fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")
        if not self.owner_id:
            raise ValidationError("Owner is required")

    def save(self, *args, **kwargs):
        """Save brand with validation; uniqueness is left to the database."""
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
