"""
======================================================
PATH: orders/migrations/0001_initial.py
======================================================
MIGRATION: CREATE Order
"""

from __future__ import annotations

from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.CharField(
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("buyer_name", models.CharField(max_length=255)),
                (
                    "buyer_contact",
                    models.CharField(
                        help_text="Email address or phone number (email if it contains '@').",
                        max_length=255,
                    ),
                ),
                ("items", models.JSONField(default=list)),
                (
                    "total",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0.00"), max_digits=10
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                ("is_completed", models.BooleanField(db_index=True, default=False)),
                ("is_paid", models.BooleanField(db_index=True, default=False)),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, db_index=True),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
