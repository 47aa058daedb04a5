# backend/exceptions.py
"""
PATH: backend/exceptions.py

API EXCEPTION HANDLER

Every API error leaves the backend in one shape:

    {"error": "<message>"}                       (401 / 404 / 429 / 500 ...)
    {"error": "<message>", "fields": {...}}      (400 validation)

Rules:
- Validation messages are safe to return (they describe the caller's input).
- Database failures are logged with the traceback and answered with a
  generic 500; internal detail never reaches the client.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Missing required fields"
SERVER_ERROR_MESSAGE = "Server error"


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception(
            "Database error while handling request",
            extra={"view": view.__class__.__name__ if view else None},
        )
        return Response(
            {"error": SERVER_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        detail = exc.detail
        if isinstance(detail, dict):
            non_field = detail.get("non_field_errors")
            message = _first_message(non_field) if non_field else VALIDATION_MESSAGE
            response.data = {"error": message, "fields": detail}
        else:
            response.data = {"error": _first_message(detail) or VALIDATION_MESSAGE}
        return response

    if isinstance(exc, exceptions.NotAuthenticated):
        response.data = {"error": "Unauthorized"}
        return response

    response.data = {"error": _first_message(getattr(exc, "detail", "")) or "Error"}
    return response
