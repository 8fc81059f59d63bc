import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("brands", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Principal",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("email", models.CharField(help_text="Lower-cased login email", max_length=254, unique=True)),
                ("secret_hash", models.CharField(max_length=255)),
                (
                    "role",
                    models.CharField(
                        choices=[("client", "Client"), ("brand_owner", "Brand Owner"), ("admin", "Admin")],
                        default="client",
                        max_length=20,
                    ),
                ),
                (
                    "owned_brand",
                    models.OneToOneField(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="owner_principal",
                        to="brands.brand",
                    ),
                ),
                ("full_name", models.CharField(max_length=255)),
                ("phone", models.CharField(blank=True, max_length=32, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "principals",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["role"], name="principals_role_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(("owned_brand__isnull", False), ("role", "brand_owner")),
                            models.Q(models.Q(("role", "brand_owner"), _negated=True), ("owned_brand__isnull", True)),
                            _connector="OR",
                        ),
                        name="principals_role_brand_consistent",
                    ),
                ],
            },
        ),
    ]
