"""
======================================================
PATH: catalog/migrations/0001_initial.py
======================================================
MIGRATION: CREATE CatalogItem + ColorOption
"""

from __future__ import annotations

from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CatalogItem",
            fields=[
                (
                    "id",
                    models.CharField(
                        editable=False,
                        max_length=128,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                (
                    "image_url",
                    models.CharField(blank=True, max_length=1024, null=True),
                ),
                (
                    "source_url",
                    models.URLField(blank=True, max_length=1024, null=True),
                ),
                ("tags", models.JSONField(blank=True, default=list)),
                (
                    "difficulty",
                    models.CharField(
                        choices=[
                            ("easy", "Easy"),
                            ("medium", "Medium"),
                            ("hard", "Hard"),
                        ],
                        default="easy",
                        max_length=16,
                    ),
                ),
                (
                    "print_time_hours",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("1.0"),
                        help_text="Estimated build time in hours.",
                        max_digits=6,
                    ),
                ),
                (
                    "license_status",
                    models.CharField(
                        choices=[
                            ("original", "Original design"),
                            ("licensed", "Licensed for sale"),
                            ("unknown", "Unknown"),
                            ("ip-risk", "IP risk (hidden)"),
                        ],
                        db_index=True,
                        default="unknown",
                        max_length=16,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ColorOption",
            fields=[
                (
                    "id",
                    models.CharField(
                        max_length=128, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=120)),
                ("hex", models.CharField(max_length=255)),
                ("in_stock", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
    ]
