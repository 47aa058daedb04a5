# PATH: public/serializers.py

"""
PATH: public/serializers.py

PUBLIC SERIALIZERS (STOREFRONT)

Purpose:
- Single, shared schema contracts for Public API endpoints.
- Keeps public/views thin and consistent.

Used by:
- public/views/catalog.py   (catalog + colors envelopes)
- public/views/order.py     (order submission)

Notes:
- Field names mirror the storefront JSON (camelCase).
- These serializers validate request/response shapes; business rules
  (persist, notify) live in orders.services.order_intake.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from catalog.serializers import CatalogItemSerializer, ColorOptionSerializer


class PublicCatalogResponseSerializer(serializers.Serializer):
    toys = CatalogItemSerializer(many=True)


class PublicColorsQuerySerializer(serializers.Serializer):
    in_stock = serializers.BooleanField(required=False, default=False)


class PublicColorsResponseSerializer(serializers.Serializer):
    colors = ColorOptionSerializer(many=True)


class PublicOrderItemSerializer(serializers.Serializer):
    toyId = serializers.CharField(max_length=128)
    toyName = serializers.CharField(max_length=255)
    colors = serializers.ListField(
        child=serializers.CharField(max_length=120),
        allow_empty=False,
    )


class PublicOrderSubmitSerializer(serializers.Serializer):
    """
    Cart submitted by a site visitor (no authentication).
    total is "pay what you want": any non-negative amount is accepted.
    """

    items = PublicOrderItemSerializer(many=True, allow_empty=False)
    buyerName = serializers.CharField(max_length=255)
    buyerContact = serializers.CharField(max_length=255)
    total = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PublicOrderSubmitResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    orderId = serializers.CharField()
    mattPhone = serializers.CharField(required=False)
