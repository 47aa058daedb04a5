from datetime import timedelta
from decimal import Decimal

from django.test import TestCase
from django.utils import timezone

from orders.models import Order
from orders.services.exceptions import OrderNotFound, OrderValidationError
from orders.services.order_admin import delete_order, list_orders, update_status


class OrderAdminTests(TestCase):
    """
    GUARANTEES:
    - Orders list newest first
    - is_completed and is_paid move independently
    - Unknown ids are reported, not ignored
    """

    def setUp(self):
        self.older = Order.objects.create(
            id="order-1-aaaaaa",
            buyer_name="Sam",
            buyer_contact="555-0101",
            items=[{"toyId": "axolotl", "toyName": "Axolotl", "colors": ["Mint"]}],
            total=Decimal("3.00"),
        )
        Order.objects.filter(id=self.older.id).update(
            created_at=timezone.now() - timedelta(days=1)
        )
        self.newer = Order.objects.create(
            id="order-2-bbbbbb",
            buyer_name="Alex",
            buyer_contact="alex@example.com",
            items=[{"toyId": "star-bear", "toyName": "Star Bear", "colors": ["Pink"]}],
            total=Decimal("5.00"),
        )

    def test_list_orders_newest_first(self):
        self.assertEqual([o.id for o in list_orders()], ["order-2-bbbbbb", "order-1-aaaaaa"])

    def test_flags_are_independent(self):
        update_status(self.newer.id, is_completed=True)
        self.newer.refresh_from_db()
        self.assertTrue(self.newer.is_completed)
        self.assertFalse(self.newer.is_paid)

        update_status(self.newer.id, is_paid=True)
        self.newer.refresh_from_db()
        self.assertTrue(self.newer.is_completed)
        self.assertTrue(self.newer.is_paid)

        update_status(self.newer.id, is_completed=False)
        self.newer.refresh_from_db()
        self.assertFalse(self.newer.is_completed)
        self.assertTrue(self.newer.is_paid)

    def test_update_requires_a_flag(self):
        with self.assertRaises(OrderValidationError):
            update_status(self.newer.id)

    def test_update_unknown_order(self):
        with self.assertRaises(OrderNotFound):
            update_status("order-missing", is_paid=True)

    def test_delete_order(self):
        delete_order(self.older.id)

        self.assertFalse(Order.objects.filter(id=self.older.id).exists())
        with self.assertRaises(OrderNotFound):
            delete_order(self.older.id)
