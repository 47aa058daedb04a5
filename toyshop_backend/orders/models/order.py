# orders/models/order.py

"""
ORDER MODEL

An order is a buyer's submitted cart plus two independent admin flags.

Design notes:
- id is generated at intake ("order-<epoch millis>-<random hex>").
- items is a JSON snapshot: [{"toyId": "...", "toyName": "...", "colors": ["Pink"]}]
  No foreign keys: deleting a catalog item or color never touches orders.
- total is what the buyer chose to pay ("pay what you want"); it is stored
  as submitted and never re-priced against the catalog.
- is_completed / is_paid are independent booleans; there is no lifecycle
  ordering between them.
"""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import quote

from django.db import models


class Order(models.Model):
    REPLY_SUBJECT = "Your Rainbow Toys Order"

    id = models.CharField(primary_key=True, max_length=64, editable=False)

    buyer_name = models.CharField(max_length=255)
    buyer_contact = models.CharField(
        max_length=255,
        help_text="Email address or phone number (email if it contains '@').",
    )

    items = models.JSONField(default=list)

    total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    notes = models.TextField(null=True, blank=True)

    is_completed = models.BooleanField(default=False, db_index=True)
    is_paid = models.BooleanField(default=False, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.id} ({self.buyer_name})"

    @property
    def contact_is_email(self) -> bool:
        return "@" in (self.buyer_contact or "")

    @property
    def contact_href(self) -> str:
        if self.contact_is_email:
            return f"mailto:{self.buyer_contact}"
        return f"tel:{self.buyer_contact}"

    @property
    def reply_href(self) -> str:
        if self.contact_is_email:
            return f"mailto:{self.buyer_contact}?subject={quote(self.REPLY_SUBJECT)}"
        return f"sms:{self.buyer_contact}"

    @property
    def item_count(self) -> int:
        return len(self.items or [])
