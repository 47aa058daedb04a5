# catalog/apps.py

"""
CATALOG APP CONFIG

Owns the sellable catalog:
- CatalogItem (made-to-order toys)
- ColorOption (color registry + stock flag)
- Public catalog read cache + image storage
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "Catalog"
