# orders/apps.py

"""
ORDERS APP CONFIG

Order ledger for the storefront:
- Order intake (public, unauthenticated)
- Operator notification (best-effort email)
- Admin status flags (completed / paid) + deletion
"""

from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "orders"
    verbose_name = "Orders"
