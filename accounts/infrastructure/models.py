"""
Principal model.
"""

import uuid

from django.db import models


class Principal(models.Model):
    """
    An account that can authenticate.

    The role/brand binding is enforced by the schema as well as by the
    domain entity: a brand owner holds exactly one brand, nobody else
    holds any, and no brand is held twice.
    """

    ROLE_CHOICES = [
        ("client", "Client"),
        ("brand_owner", "Brand Owner"),
        ("admin", "Admin"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.CharField(max_length=254, unique=True, help_text="Lower-cased login email")
    secret_hash = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default="client")
    owned_brand = models.OneToOneField(
        "brands.Brand",
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name="owner_principal",
    )
    full_name = models.CharField(max_length=255)
    phone = models.CharField(max_length=32, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "principals"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["role"], name="principals_role_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(role="brand_owner", owned_brand__isnull=False)
                    | (~models.Q(role="brand_owner") & models.Q(owned_brand__isnull=True))
                ),
                name="principals_role_brand_consistent",
            ),
        ]

    def clean(self):
        """Validate principal fields."""
        from django.core.exceptions import ValidationError

        if not self.email or self.email != self.email.lower():
            raise ValidationError("Email must be stored lower-cased")
        if not self.secret_hash:
            raise ValidationError("Secret hash is required")

    def save(self, *args, **kwargs):
        """Save principal with validation; uniqueness is left to the database."""
        self.full_clean(validate_unique=False, validate_constraints=False)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.email} ({self.role})"
