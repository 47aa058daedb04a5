# orders/services/notifications.py

"""
ORDER NOTIFICATIONS

notify_operator(order) -> bool

- Renders subject + HTML + plain-text bodies from templates in
  orders/templates/orders/.
- Sends to settings.OPERATOR_EMAIL through the Resend client.
- Returns False (and sends nothing) when the provider or the operator
  address is not configured.
- Raises NotificationError on provider failure. Callers decide whether that
  matters; order intake treats it as best-effort.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from django.conf import settings
from django.template.loader import render_to_string
from django.utils import dateformat, timezone

from orders.models import Order
from orders.services import resend

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "l, F j, g:i A"


def format_total(total) -> str:
    amount = Decimal(str(total or 0))
    if amount == amount.to_integral_value():
        return f"${int(amount)}"
    return f"${amount.quantize(Decimal('0.01'))}"


def build_subject(order: Order) -> str:
    count = order.item_count
    noun = "toy" if count == 1 else "toys"
    return f"New Order: {count} {noun} ({format_total(order.total)})"


def build_context(order: Order) -> dict:
    created = order.created_at or timezone.now()
    return {
        "order": order,
        "items": [
            {
                "name": item.get("toyName") or item.get("toyId") or "",
                "colors": ", ".join(item.get("colors") or []),
            }
            for item in (order.items or [])
        ],
        "item_count": order.item_count,
        "item_noun": "toy" if order.item_count == 1 else "toys",
        "total_display": format_total(order.total),
        "timestamp": dateformat.format(timezone.localtime(created), TIMESTAMP_FORMAT),
    }


def notify_operator(order: Order) -> bool:
    operator_email = (getattr(settings, "OPERATOR_EMAIL", "") or "").strip()

    if not resend.is_configured():
        logger.info("Order notification skipped: provider not configured", extra={"order_id": order.id})
        return False

    if not operator_email:
        logger.info("Order notification skipped: no operator email", extra={"order_id": order.id})
        return False

    context = build_context(order)
    message_id = resend.send_email(
        to=operator_email,
        subject=build_subject(order),
        html=render_to_string("orders/order_notification.html", context),
        text=render_to_string("orders/order_notification.txt", context),
        reply_to=order.buyer_contact if order.contact_is_email else "",
    )

    logger.info(
        "Order notification sent",
        extra={"order_id": order.id, "message_id": message_id},
    )
    return True
