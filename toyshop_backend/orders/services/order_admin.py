# orders/services/order_admin.py

"""
ORDER ADMIN OPERATIONS

- list_orders():    every order, newest first
- update_status():  set is_completed and/or is_paid (only supplied flags move)
- delete_order():   permanent removal

The two flags are independent: marking an order completed never touches
is_paid and vice versa.
"""

from __future__ import annotations

import logging
from typing import Optional

from django.db import transaction

from orders.models import Order
from orders.services.exceptions import OrderNotFound, OrderValidationError

logger = logging.getLogger(__name__)


def list_orders() -> list[Order]:
    return list(Order.objects.order_by("-created_at"))


@transaction.atomic
def update_status(
    order_id: str,
    *,
    is_completed: Optional[bool] = None,
    is_paid: Optional[bool] = None,
) -> Order:
    if is_completed is None and is_paid is None:
        raise OrderValidationError("Nothing to update")

    order = Order.objects.select_for_update().filter(id=order_id).first()
    if order is None:
        raise OrderNotFound(f"Order '{order_id}' not found")

    fields = ["updated_at"]
    if is_completed is not None:
        order.is_completed = bool(is_completed)
        fields.append("is_completed")
    if is_paid is not None:
        order.is_paid = bool(is_paid)
        fields.append("is_paid")

    order.save(update_fields=fields)

    logger.info(
        "Order status updated",
        extra={
            "order_id": order.id,
            "is_completed": order.is_completed,
            "is_paid": order.is_paid,
        },
    )
    return order


def delete_order(order_id: str) -> None:
    deleted, _ = Order.objects.filter(id=order_id).delete()
    if not deleted:
        raise OrderNotFound(f"Order '{order_id}' not found")

    logger.info("Order deleted", extra={"order_id": order_id})
