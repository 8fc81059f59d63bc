import uuid

import django.db.models.functions.text
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Brand",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("owner_id", models.UUIDField(help_text="Owning principal", unique=True)),
                ("name", models.CharField(help_text="Brand display name", max_length=255)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("approved", "Approved"),
                            ("rejected", "Rejected"),
                            ("banned", "Banned"),
                        ],
                        default="approved",
                        max_length=20,
                    ),
                ),
                ("category", models.CharField(blank=True, max_length=100, null=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("logo_url", models.CharField(blank=True, max_length=500, null=True)),
                ("location", models.CharField(blank=True, max_length=255, null=True)),
                ("website", models.CharField(blank=True, max_length=500, null=True)),
                ("instagram", models.CharField(blank=True, max_length=500, null=True)),
                ("facebook", models.CharField(blank=True, max_length=500, null=True)),
                ("phone", models.CharField(blank=True, max_length=32, null=True)),
                ("email", models.CharField(blank=True, max_length=254, null=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "brands",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status"], name="brands_status_idx"),
                    models.Index(fields=["is_featured"], name="brands_featured_idx"),
                    models.Index(fields=["-created_at"], name="brands_created_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        django.db.models.functions.text.Lower("name"), name="brands_name_ci_unique"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("status__in", ["pending", "approved", "rejected", "banned"])),
                        name="brands_status_valid",
                    ),
                ],
            },
        ),
    ]
