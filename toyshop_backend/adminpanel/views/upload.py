# adminpanel/views/upload.py

"""
ADMIN IMAGE UPLOAD

POST /api/admin/upload/   multipart: file (image/*), toyId
-> {"success": true, "imageUrl": "...", "path": "..."}

The URL is only returned; attaching it to a catalog item is a separate
PUT /api/admin/catalog/ call.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from adminpanel.authentication import AdminSessionAuthentication
from adminpanel.permissions import IsAdminSession
from adminpanel.serializers import AdminUploadResponseSerializer, AdminUploadSerializer
from catalog.services.exceptions import ImageStorageError
from catalog.services.image_storage import store_catalog_image, upload_object_name


class AdminUploadView(APIView):
    authentication_classes = [AdminSessionAuthentication]
    permission_classes = [IsAdminSession]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        tags=["Admin"],
        request={"multipart/form-data": AdminUploadSerializer},
        responses={
            200: AdminUploadResponseSerializer,
            400: OpenApiResponse(description="File and toyId are required"),
            401: OpenApiResponse(description="Unauthorized"),
            500: OpenApiResponse(description="Failed to upload image"),
        },
        description="Store a catalog image and return its public URL.",
    )
    def post(self, request):
        s = AdminUploadSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        upload = s.validated_data["file"]
        content_type = getattr(upload, "content_type", "") or ""
        name = upload_object_name(s.validated_data["toyId"], upload.name, content_type)

        try:
            stored = store_catalog_image(
                name=name,
                content=upload.read(),
                content_type=content_type,
            )
        except ImageStorageError:
            return Response(
                {"error": "Failed to upload image"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"success": True, "imageUrl": stored.url, "path": stored.path})
