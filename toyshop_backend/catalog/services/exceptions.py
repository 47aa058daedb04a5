# catalog/services/exceptions.py

"""
CATALOG SERVICE ERRORS

Centralized domain errors for catalog, color and image services.
Views translate these into HTTP responses; messages are client-safe.
"""


class CatalogServiceError(Exception):
    """Base exception for all catalog service failures."""


class CatalogItemNotFound(CatalogServiceError):
    """Raised when an operation targets an unknown catalog item id."""


class DuplicateCatalogItem(CatalogServiceError):
    """Raised when creating an item whose id already exists."""


class InvalidColorSet(CatalogServiceError):
    """Raised when a full-replace color payload is internally inconsistent."""


class ImageStorageError(CatalogServiceError):
    """Raised when the object storage rejects or cannot receive an upload."""
