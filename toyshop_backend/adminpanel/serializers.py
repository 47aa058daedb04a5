# adminpanel/serializers.py

"""
ADMIN PANEL SERIALIZERS

Request contracts for the admin API plus the admin order row shape.
Order rows stay snake_case (buyer_name, is_completed, ...) because the
admin frontend reads the stored columns directly.
"""

from __future__ import annotations

from rest_framework import serializers

from orders.models import Order

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class AdminLoginSerializer(serializers.Serializer):
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class AdminSessionResponseSerializer(serializers.Serializer):
    loggedIn = serializers.BooleanField()


class AdminSuccessSerializer(serializers.Serializer):
    success = serializers.BooleanField()


class AdminCatalogDeleteSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=128)


class AdminOrderSerializer(serializers.ModelSerializer):
    total = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )

    class Meta:
        model = Order
        fields = [
            "id",
            "buyer_name",
            "buyer_contact",
            "items",
            "total",
            "notes",
            "is_completed",
            "is_paid",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AdminOrderStatusSerializer(serializers.Serializer):
    """
    Partial flag update: only the flags present in the body change.
    """

    id = serializers.CharField(max_length=64)
    is_completed = serializers.BooleanField(required=False)
    is_paid = serializers.BooleanField(required=False)

    def validate(self, attrs):
        if "is_completed" not in attrs and "is_paid" not in attrs:
            raise serializers.ValidationError(
                "Provide is_completed and/or is_paid"
            )
        return attrs


class AdminOrderDeleteSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64)
    confirm = serializers.BooleanField(required=False)

    def validate(self, attrs):
        if attrs.get("confirm") is not True:
            raise serializers.ValidationError("Deleting an order requires confirm=true")
        return attrs


class AdminUploadSerializer(serializers.Serializer):
    file = serializers.FileField(required=False)
    toyId = serializers.CharField(max_length=128, required=False)

    def validate(self, attrs):
        upload = attrs.get("file")
        if not upload or not (attrs.get("toyId") or "").strip():
            raise serializers.ValidationError("File and toyId are required")

        content_type = (getattr(upload, "content_type", "") or "").lower()
        if not content_type.startswith("image/"):
            raise serializers.ValidationError("Only image uploads are accepted")

        if upload.size > MAX_UPLOAD_BYTES:
            raise serializers.ValidationError("Image is too large")
        return attrs


class AdminUploadResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    imageUrl = serializers.CharField()
    path = serializers.CharField()
