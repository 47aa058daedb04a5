# adminpanel/urls.py
"""
ADMIN API URLS

Base path (mounted in backend/urls.py):
    /api/admin/

Session:
- POST /api/admin/login/
- GET  /api/admin/session/
- POST /api/admin/logout/

Cookie-gated:
- /api/admin/catalog/   GET, POST, PUT, DELETE
- /api/admin/colors/    GET, POST, PUT
- /api/admin/orders/    GET, PUT, DELETE
- /api/admin/upload/    POST (multipart)
"""

from __future__ import annotations

from django.urls import path

from adminpanel.views.auth import AdminLoginView, AdminLogoutView, AdminSessionView
from adminpanel.views.catalog import AdminCatalogView
from adminpanel.views.colors import AdminColorsView
from adminpanel.views.orders import AdminOrdersView
from adminpanel.views.upload import AdminUploadView

app_name = "adminpanel"

urlpatterns = [
    path("login/", AdminLoginView.as_view(), name="admin-login"),
    path("session/", AdminSessionView.as_view(), name="admin-session"),
    path("logout/", AdminLogoutView.as_view(), name="admin-logout"),
    path("catalog/", AdminCatalogView.as_view(), name="admin-catalog"),
    path("colors/", AdminColorsView.as_view(), name="admin-colors"),
    path("orders/", AdminOrdersView.as_view(), name="admin-orders"),
    path("upload/", AdminUploadView.as_view(), name="admin-upload"),
]
