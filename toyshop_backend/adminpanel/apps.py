# adminpanel/apps.py

"""
ADMIN PANEL APP CONFIG

Password-gated admin API:
- Session gate (shared secret -> signed cookie)
- Catalog / color / order management
- Catalog image upload

No models: the panel operates on catalog + orders.
"""

from django.apps import AppConfig


class AdminPanelConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "adminpanel"
    verbose_name = "Admin Panel"
