# orders/services/order_intake.py

"""
ORDER INTAKE

submit_order(...) is the only way an Order comes into existence.

Sequence (no transaction spans both effects):
1) validate the cart (buyer name, buyer contact, non-empty items with colors)
2) persist the Order (is_completed=False, is_paid=False)
3) notify the operator, best-effort

Guarantees:
- A validation failure persists nothing.
- Once step 2 succeeds the caller gets a receipt, whatever happens in step 3.
- Notification failures are logged, never raised.

Order ids are "order-<epoch millis>-<6 hex>". Uniqueness is probabilistic;
a primary-key collision is retried with a fresh id inside a savepoint.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, Mapping, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from orders.models import Order
from orders.services.exceptions import OrderIdExhausted, OrderValidationError
from orders.services.notifications import notify_operator

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 5


@dataclass(frozen=True)
class OrderReceipt:
    order: Order
    notified: bool
    operator_phone: str


def generate_order_id() -> str:
    millis = int(timezone.now().timestamp() * 1000)
    return f"order-{millis}-{secrets.token_hex(3)}"


def _clean_items(items: Iterable[Mapping]) -> list[dict]:
    cleaned: list[dict] = []

    for item in items or []:
        if not isinstance(item, Mapping):
            raise OrderValidationError("Missing required fields")

        toy_id = str(item.get("toyId") or "").strip()
        toy_name = str(item.get("toyName") or "").strip()
        raw_colors = item.get("colors")
        if not isinstance(raw_colors, (list, tuple)):
            raise OrderValidationError("Missing required fields")
        colors = [str(c).strip() for c in raw_colors if str(c).strip()]

        if not toy_id or not toy_name or not colors:
            raise OrderValidationError("Missing required fields")

        cleaned.append({"toyId": toy_id, "toyName": toy_name, "colors": colors})

    if not cleaned:
        raise OrderValidationError("Missing required fields")
    return cleaned


def _clean_total(total) -> Decimal:
    try:
        amount = Decimal(str(total))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise OrderValidationError("Total must be a number") from exc
    if not amount.is_finite() or amount < 0:
        raise OrderValidationError("Total must be zero or more")
    return amount.quantize(Decimal("0.01"))


def _persist(*, id_factory: Callable[[], str], **fields) -> Order:
    for attempt in range(1, MAX_ID_ATTEMPTS + 1):
        order_id = id_factory()
        try:
            with transaction.atomic():
                return Order.objects.create(id=order_id, **fields)
        except IntegrityError:
            logger.warning(
                "Order id collision, regenerating",
                extra={"order_id": order_id, "attempt": attempt},
            )

    raise OrderIdExhausted("Could not allocate a unique order id")


def submit_order(
    *,
    items: Iterable[Mapping],
    buyer_name: str,
    buyer_contact: str,
    total,
    notes: Optional[str] = None,
    id_factory: Callable[[], str] = generate_order_id,
) -> OrderReceipt:
    buyer_name = (buyer_name or "").strip()
    buyer_contact = (buyer_contact or "").strip()
    if not buyer_name or not buyer_contact:
        raise OrderValidationError("Missing required fields")

    lines = _clean_items(items)
    amount = _clean_total(total)
    notes = (notes or "").strip() or None

    order = _persist(
        id_factory=id_factory,
        buyer_name=buyer_name,
        buyer_contact=buyer_contact,
        items=lines,
        total=amount,
        notes=notes,
        is_completed=False,
        is_paid=False,
    )

    logger.info(
        "Order saved",
        extra={
            "order_id": order.id,
            "buyer": order.buyer_name,
            "item_count": len(lines),
            "total": str(order.total),
        },
    )

    notified = False
    try:
        notified = notify_operator(order)
    except Exception:
        logger.exception("Order notification failed", extra={"order_id": order.id})

    return OrderReceipt(
        order=order,
        notified=notified,
        operator_phone=(getattr(settings, "OPERATOR_PHONE", "") or "").strip(),
    )
