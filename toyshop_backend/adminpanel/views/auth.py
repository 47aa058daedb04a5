# adminpanel/views/auth.py

"""
ADMIN SESSION ENDPOINTS

POST /api/admin/login/    {password} -> signed cookie + {success: true} | 401
GET  /api/admin/session/  -> {loggedIn: bool}
POST /api/admin/logout/   -> cookie cleared + {success: true}
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

from adminpanel.serializers import (
    AdminLoginSerializer,
    AdminSessionResponseSerializer,
    AdminSuccessSerializer,
)
from adminpanel.services.session_gate import (
    check_password,
    clear_session,
    issue_session,
    read_session,
)

logger = logging.getLogger(__name__)


class AdminLoginThrottle(AnonRateThrottle):
    scope = "admin_login"


class AdminLoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    parser_classes = [JSONParser]
    throttle_classes = [AdminLoginThrottle]

    @extend_schema(
        tags=["Admin"],
        request=AdminLoginSerializer,
        responses={
            200: AdminSuccessSerializer,
            400: OpenApiResponse(description="Password missing"),
            401: OpenApiResponse(description="Invalid password"),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="Exchange the shared admin password for a 24h session cookie.",
    )
    def post(self, request):
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if not check_password(serializer.validated_data["password"]):
            logger.warning("Admin login failed", extra={"remote_addr": request.META.get("REMOTE_ADDR")})
            return Response(
                {"error": "Invalid password"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        response = Response({"success": True})
        issue_session(response)
        logger.info("Admin login succeeded")
        return response


class AdminSessionView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Admin"],
        responses={200: AdminSessionResponseSerializer},
        description="Report whether the caller holds a valid admin cookie.",
    )
    def get(self, request):
        session = read_session(request)
        return Response({"loggedIn": session.authenticated})


class AdminLogoutView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Admin"],
        request=None,
        responses={200: AdminSuccessSerializer},
        description="Clear the admin cookie.",
    )
    def post(self, request):
        response = Response({"success": True})
        clear_session(response)
        logger.info("Admin logout")
        return response
