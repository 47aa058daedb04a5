# adminpanel/views/orders.py

"""
ADMIN ORDERS

GET    /api/admin/orders/   every order, newest first
PUT    /api/admin/orders/   {"id", "is_completed"?, "is_paid"?}
DELETE /api/admin/orders/   {"id", "confirm": true}
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from adminpanel.authentication import AdminSessionAuthentication
from adminpanel.permissions import IsAdminSession
from adminpanel.serializers import (
    AdminOrderDeleteSerializer,
    AdminOrderSerializer,
    AdminOrderStatusSerializer,
    AdminSuccessSerializer,
)
from orders.services.exceptions import OrderNotFound
from orders.services.order_admin import delete_order, list_orders, update_status


class AdminOrdersView(APIView):
    authentication_classes = [AdminSessionAuthentication]
    permission_classes = [IsAdminSession]
    parser_classes = [JSONParser]

    @extend_schema(
        tags=["Admin"],
        responses={
            200: AdminOrderSerializer(many=True),
            401: OpenApiResponse(description="Unauthorized"),
        },
        description="All orders, newest first.",
    )
    def get(self, request):
        return Response({"orders": AdminOrderSerializer(list_orders(), many=True).data})

    @extend_schema(
        tags=["Admin"],
        request=AdminOrderStatusSerializer,
        responses={
            200: AdminOrderSerializer,
            400: OpenApiResponse(description="No flag supplied"),
            401: OpenApiResponse(description="Unauthorized"),
            404: OpenApiResponse(description="Order not found"),
        },
        description="Flip is_completed and/or is_paid. Omitted flags are left alone.",
    )
    def put(self, request):
        s = AdminOrderStatusSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            order = update_status(
                data["id"],
                is_completed=data.get("is_completed"),
                is_paid=data.get("is_paid"),
            )
        except OrderNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response({"success": True, "order": AdminOrderSerializer(order).data})

    @extend_schema(
        tags=["Admin"],
        request=AdminOrderDeleteSerializer,
        responses={
            200: AdminSuccessSerializer,
            400: OpenApiResponse(description="Missing id or confirm"),
            401: OpenApiResponse(description="Unauthorized"),
            404: OpenApiResponse(description="Order not found"),
        },
        description="Permanently delete an order. Requires confirm=true.",
    )
    def delete(self, request):
        s = AdminOrderDeleteSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            delete_order(s.validated_data["id"])
        except OrderNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response({"success": True})
