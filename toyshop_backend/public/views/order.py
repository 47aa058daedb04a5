# public/views/order.py
"""
PUBLIC ORDER SUBMISSION

POST /api/order/

Body:
    {"items": [{"toyId": "...", "toyName": "...", "colors": ["Pink"]}],
     "buyerName": "...", "buyerContact": "email or phone",
     "total": 5, "notes": "optional"}

Rules:
- AllowAny: any site visitor may order
- 400 on missing fields; nothing is persisted
- 201 once the order is saved, even if the operator email fails
- 500 with a JSON error if no unique order id could be allocated
- mattPhone (operator phone) is echoed for the "text me" follow-up button
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from orders.services.exceptions import OrderIdExhausted, OrderValidationError
from orders.services.order_intake import submit_order
from public.serializers import (
    PublicOrderSubmitResponseSerializer,
    PublicOrderSubmitSerializer,
)

logger = logging.getLogger(__name__)


class PublicWriteThrottle(AnonRateThrottle):
    """
    For public write endpoints (order submission).
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['public_write'].
    """

    scope = "public_write"


class PublicOrderSubmitView(APIView):
    permission_classes = [AllowAny]
    parser_classes = [JSONParser]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Public"],
        request=PublicOrderSubmitSerializer,
        responses={
            201: PublicOrderSubmitResponseSerializer,
            400: OpenApiResponse(description="Missing required fields"),
            429: OpenApiResponse(description="Rate limited"),
            500: OpenApiResponse(description="Order could not be saved"),
        },
        description="Submit a cart. Persists the order, then notifies the operator (best-effort).",
    )
    def post(self, request, *args, **kwargs):
        s = PublicOrderSubmitSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            receipt = submit_order(
                items=data["items"],
                buyer_name=data["buyerName"],
                buyer_contact=data["buyerContact"],
                total=data["total"],
                notes=data.get("notes"),
            )
        except OrderValidationError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except OrderIdExhausted:
            logger.exception("Order id allocation exhausted")
            return Response(
                {"error": "Server error"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        payload = {"success": True, "orderId": receipt.order.id}
        if receipt.operator_phone:
            payload["mattPhone"] = receipt.operator_phone

        return Response(payload, status=status.HTTP_201_CREATED)
