# public/views/catalog.py
"""
PUBLIC CATALOG + COLORS (STOREFRONT)

GET /api/catalog/
GET /api/colors/?in_stock=true

Rules:
- AllowAny (public)
- Catalog hides restricted-license items and is served from the
  time-boxed public catalog holder (admin writes invalidate it)
- Colors: every color by default (the storefront greys out sold-out ones);
  in_stock=true narrows to in-stock colors server-side
- Read failures answer 500 with an empty list; details stay in server logs

Security hardening:
- Throttle to reduce scraping/abuse
"""

from __future__ import annotations

import logging

from django.db import DatabaseError
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from catalog.serializers import CatalogItemSerializer, ColorOptionSerializer
from catalog.services.catalog_store import public_catalog
from catalog.services.color_registry import list_colors
from public.serializers import (
    PublicCatalogResponseSerializer,
    PublicColorsQuerySerializer,
    PublicColorsResponseSerializer,
)

logger = logging.getLogger(__name__)


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class PublicCatalogView(APIView):
    """
    GET /api/catalog/
    """

    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Public"],
        responses={
            200: PublicCatalogResponseSerializer,
            429: OpenApiResponse(description="Rate limited"),
            500: OpenApiResponse(description="Catalog unavailable (empty list)"),
        },
        description="Public catalog (restricted-license items hidden).",
    )
    def get(self, request, *args, **kwargs):
        try:
            items = public_catalog.items()
        except DatabaseError:
            logger.exception("Error fetching public catalog")
            return Response(
                {"toys": [], "error": "Failed to load catalog"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {"toys": CatalogItemSerializer(items, many=True).data},
            status=status.HTTP_200_OK,
        )


class PublicColorsView(APIView):
    """
    GET /api/colors/
    """

    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Public"],
        parameters=[
            OpenApiParameter(
                name="in_stock",
                type=bool,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only return colors currently in stock.",
            ),
        ],
        responses={
            200: PublicColorsResponseSerializer,
            400: OpenApiResponse(description="Bad query parameter"),
            429: OpenApiResponse(description="Rate limited"),
            500: OpenApiResponse(description="Colors unavailable (empty list)"),
        },
        description="Color registry for the color picker.",
    )
    def get(self, request, *args, **kwargs):
        qs = PublicColorsQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        try:
            colors = list_colors(in_stock_only=qs.validated_data["in_stock"])
        except DatabaseError:
            logger.exception("Error fetching colors")
            return Response(
                {"colors": [], "error": "Failed to load colors"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {"colors": ColorOptionSerializer(colors, many=True).data},
            status=status.HTTP_200_OK,
        )
