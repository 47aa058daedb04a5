# public/apps.py

"""
PUBLIC APP CONFIG

Public storefront (AllowAny) endpoints:
- Catalog listing (restricted items hidden)
- Color registry listing
- Order submission
"""

from django.apps import AppConfig


class PublicConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "public"
    verbose_name = "Public Storefront"
