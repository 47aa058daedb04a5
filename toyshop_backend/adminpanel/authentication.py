# adminpanel/authentication.py

"""
ADMIN SESSION AUTHENTICATION (DRF)

Validates the admin cookie once per request and threads the outcome
through DRF:
    request.user -> AdminPrincipal
    request.auth -> AdminSession

authenticate_header() makes DRF answer 401 (not 403) when an admin view is
hit without a valid cookie.
"""

from __future__ import annotations

from rest_framework.authentication import BaseAuthentication

from adminpanel.services.session_gate import read_session


class AdminPrincipal:
    """The single admin identity behind the shared password."""

    is_authenticated = True
    is_anonymous = False
    is_active = True
    pk = None

    def __str__(self):
        return "admin"


class AdminSessionAuthentication(BaseAuthentication):
    def authenticate(self, request):
        session = read_session(request)
        if not session.authenticated:
            return None
        return (AdminPrincipal(), session)

    def authenticate_header(self, request):
        return 'Cookie realm="admin"'
