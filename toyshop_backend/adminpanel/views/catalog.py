# adminpanel/views/catalog.py

"""
ADMIN CATALOG

GET    /api/admin/catalog/   every item (restricted ones included)
POST   /api/admin/catalog/   create one item
PUT    /api/admin/catalog/   {"toys": [...]} best-effort batch update
DELETE /api/admin/catalog/   {"id": "..."} (or ?id=...)

Batch update reports {"success": true} once the batch has run; per-item
failures are only visible in server logs.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from adminpanel.authentication import AdminSessionAuthentication
from adminpanel.permissions import IsAdminSession
from adminpanel.serializers import AdminCatalogDeleteSerializer, AdminSuccessSerializer
from catalog.serializers import (
    AdminCatalogItemSerializer,
    CatalogBatchUpdateSerializer,
    CatalogItemCreateSerializer,
)
from catalog.services.catalog_store import (
    create_item,
    delete_item,
    list_all_items,
    update_items,
)
from catalog.services.exceptions import CatalogItemNotFound, DuplicateCatalogItem


def _update_entry_from_wire(entry):
    """camelCase wire entry -> store field names (unknown shapes pass through)."""
    if not isinstance(entry, dict):
        return entry

    mapped = {}
    if "id" in entry:
        mapped["id"] = entry["id"]
    if "name" in entry:
        mapped["name"] = entry["name"]
    if "description" in entry:
        mapped["description"] = entry["description"]
    if "imageUrl" in entry:
        mapped["image_url"] = entry["imageUrl"]
    return mapped


class AdminCatalogView(APIView):
    authentication_classes = [AdminSessionAuthentication]
    permission_classes = [IsAdminSession]
    parser_classes = [JSONParser]

    @extend_schema(
        tags=["Admin"],
        responses={
            200: AdminCatalogItemSerializer(many=True),
            401: OpenApiResponse(description="Unauthorized"),
        },
        description="Full catalog for the admin panel.",
    )
    def get(self, request):
        items = list_all_items()
        return Response({"toys": AdminCatalogItemSerializer(items, many=True).data})

    @extend_schema(
        tags=["Admin"],
        request=CatalogItemCreateSerializer,
        responses={
            201: AdminCatalogItemSerializer,
            400: OpenApiResponse(description="Validation error / duplicate id"),
            401: OpenApiResponse(description="Unauthorized"),
        },
        description="Create a catalog item. Missing id is generated from the clock.",
    )
    def post(self, request):
        s = CatalogItemCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = dict(s.validated_data)

        try:
            item = create_item(
                name=data["name"],
                item_id=data.get("id"),
                description=data.get("description") or None,
                image_url=data.get("image_url") or None,
                source_url=data.get("source_url") or None,
                tags=data.get("tags"),
                difficulty=data.get("difficulty"),
                print_time_hours=data.get("print_time_hours"),
                license_status=data.get("license_status"),
            )
        except DuplicateCatalogItem as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {"success": True, "toy": AdminCatalogItemSerializer(item).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        tags=["Admin"],
        request=CatalogBatchUpdateSerializer,
        responses={
            200: AdminSuccessSerializer,
            400: OpenApiResponse(description="Body is not {toys: [...]}"),
            401: OpenApiResponse(description="Unauthorized"),
        },
        description="Best-effort batch update of name / description / imageUrl.",
    )
    def put(self, request):
        s = CatalogBatchUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        update_items(_update_entry_from_wire(e) for e in s.validated_data["toys"])
        return Response({"success": True})

    @extend_schema(
        tags=["Admin"],
        request=AdminCatalogDeleteSerializer,
        parameters=[
            OpenApiParameter(
                name="id",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Item id (alternative to the JSON body).",
            ),
        ],
        responses={
            200: AdminSuccessSerializer,
            400: OpenApiResponse(description="Item id required"),
            401: OpenApiResponse(description="Unauthorized"),
            404: OpenApiResponse(description="Item not found"),
        },
        description="Delete a catalog item. Orders keep their name snapshots.",
    )
    def delete(self, request):
        payload = request.data if isinstance(request.data, dict) and request.data else request.query_params
        s = AdminCatalogDeleteSerializer(data=payload)
        s.is_valid(raise_exception=True)

        try:
            delete_item(s.validated_data["id"])
        except CatalogItemNotFound as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response({"success": True})
