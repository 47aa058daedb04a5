# public/urls.py
"""
PUBLIC API URLS (STOREFRONT)

Base path (mounted in backend/urls.py):
    /api/

- GET  /api/catalog/
- GET  /api/colors/
- POST /api/order/
"""

from __future__ import annotations

from django.urls import path

from public.views.catalog import PublicCatalogView, PublicColorsView
from public.views.order import PublicOrderSubmitView

app_name = "public"

urlpatterns = [
    path("catalog/", PublicCatalogView.as_view(), name="public-catalog"),
    path("colors/", PublicColorsView.as_view(), name="public-colors"),
    path("order/", PublicOrderSubmitView.as_view(), name="public-order"),
]
