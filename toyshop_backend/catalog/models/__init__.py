"""
PATH: catalog/models/__init__.py

Catalog models export surface.
"""

from .catalog_item import CatalogItem
from .color_option import ColorOption

__all__ = [
    "CatalogItem",
    "ColorOption",
]
