# catalog/serializers.py

"""
CATALOG SERIALIZERS

Wire format is camelCase (what the storefront + admin frontend consume);
models stay snake_case. `source=` does the mapping both ways.

- CatalogItemSerializer        public read shape
- AdminCatalogItemSerializer   admin read shape (+ licenseStatus, timestamps)
- CatalogItemCreateSerializer  admin create contract
- ColorOptionSerializer        read + full-replace write shape
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from catalog.models import CatalogItem


class CatalogItemSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    sourceUrl = serializers.CharField(source="source_url", allow_null=True)
    tags = serializers.ListField(child=serializers.CharField())
    difficulty = serializers.CharField()
    printTimeHours = serializers.DecimalField(
        source="print_time_hours",
        max_digits=6,
        decimal_places=2,
        coerce_to_string=False,
    )


class AdminCatalogItemSerializer(CatalogItemSerializer):
    licenseStatus = serializers.CharField(source="license_status")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class CatalogItemCreateSerializer(serializers.Serializer):
    id = serializers.SlugField(required=False, allow_blank=True, max_length=128)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    imageUrl = serializers.CharField(
        source="image_url",
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=1024,
    )
    sourceUrl = serializers.URLField(
        source="source_url",
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=1024,
    )
    tags = serializers.ListField(
        child=serializers.CharField(max_length=64), required=False
    )
    difficulty = serializers.ChoiceField(
        choices=CatalogItem.Difficulty.choices, required=False
    )
    printTimeHours = serializers.DecimalField(
        source="print_time_hours",
        max_digits=6,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
    )
    licenseStatus = serializers.ChoiceField(
        source="license_status",
        choices=CatalogItem.LicenseStatus.choices,
        required=False,
    )

    def validate_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("Name is required")
        return value


class CatalogBatchUpdateSerializer(serializers.Serializer):
    """
    Only the envelope is validated; entries are applied best-effort.
    """

    toys = serializers.ListField(child=serializers.JSONField(), allow_empty=True)


class ColorOptionSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True, max_length=128)
    name = serializers.CharField(max_length=120)
    hex = serializers.CharField(max_length=255)
    inStock = serializers.BooleanField(source="in_stock", default=True)

    def validate_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("Color name is required")
        return value

    def validate_hex(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("Color value is required")
        return value


class ColorReplaceSerializer(serializers.Serializer):
    colors = ColorOptionSerializer(many=True, allow_empty=True)
