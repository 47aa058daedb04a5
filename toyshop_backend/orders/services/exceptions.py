# orders/services/exceptions.py

"""
ORDER SERVICE ERRORS

Centralized domain errors for order intake, notification and admin ops.
"""


class OrderServiceError(Exception):
    """Base exception for all order service failures."""


class OrderValidationError(OrderServiceError):
    """Raised when a submitted cart is missing required fields."""


class OrderNotFound(OrderServiceError):
    """Raised when an admin operation targets an unknown order id."""


class OrderIdExhausted(OrderServiceError):
    """Raised when every generated order id collided with an existing row."""


class NotificationError(OrderServiceError):
    """Raised when the email provider rejects or cannot receive a message."""
