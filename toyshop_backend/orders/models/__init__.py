"""
PATH: orders/models/__init__.py

Orders models export surface.
"""

from .order import Order

__all__ = [
    "Order",
]
