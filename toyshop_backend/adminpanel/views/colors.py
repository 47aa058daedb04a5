# adminpanel/views/colors.py

"""
ADMIN COLOR REGISTRY

GET      /api/admin/colors/   every color (in stock or not)
POST/PUT /api/admin/colors/   {"colors": [...]} full replace
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from adminpanel.authentication import AdminSessionAuthentication
from adminpanel.permissions import IsAdminSession
from catalog.serializers import ColorOptionSerializer, ColorReplaceSerializer
from catalog.services.color_registry import list_colors, replace_all
from catalog.services.exceptions import InvalidColorSet


class AdminColorsView(APIView):
    authentication_classes = [AdminSessionAuthentication]
    permission_classes = [IsAdminSession]
    parser_classes = [JSONParser]

    @extend_schema(
        tags=["Admin"],
        responses={
            200: ColorReplaceSerializer,
            401: OpenApiResponse(description="Unauthorized"),
        },
        description="Every registered color, in stock or not.",
    )
    def get(self, request):
        return Response({"colors": ColorOptionSerializer(list_colors(), many=True).data})

    @extend_schema(
        tags=["Admin"],
        request=ColorReplaceSerializer,
        responses={
            200: ColorReplaceSerializer,
            400: OpenApiResponse(description="Invalid color set"),
            401: OpenApiResponse(description="Unauthorized"),
        },
        description="Replace the whole registry. Send ids back to keep them stable.",
    )
    def post(self, request):
        s = ColorReplaceSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            rows = replace_all(s.validated_data["colors"])
        except InvalidColorSet as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            {"success": True, "colors": ColorOptionSerializer(rows, many=True).data}
        )

    put = post
