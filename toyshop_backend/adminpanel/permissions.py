# adminpanel/permissions.py

from rest_framework.permissions import BasePermission

from adminpanel.services.session_gate import AdminSession


class IsAdminSession(BasePermission):
    """
    Admin gate for every admin-scoped view.

    POLICY:
    - request.auth must be a validated AdminSession
    - Applies to reads AND writes (no safe-method exemption)

    Every admin view lists this class itself; there is no global default
    that would silently cover (or miss) a new endpoint.
    """

    def has_permission(self, request, view):
        session = getattr(request, "auth", None)
        return isinstance(session, AdminSession) and session.authenticated
