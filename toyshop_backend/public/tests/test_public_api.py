# public/tests/test_public_api.py

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APIClient

from catalog.models import CatalogItem, ColorOption
from orders.models import Order


class PublicCatalogApiTests(TestCase):
    """
    Storefront read endpoints.

    GUARANTEES:
    - Restricted items never appear in /api/catalog/
    - Fields are camelCase and licenseStatus is not exposed
    - A database failure yields 500 with an empty list
    """

    def setUp(self):
        self.client = APIClient()
        CatalogItem.objects.create(
            id="star-bear",
            name="Star Bear",
            description="Chubby bear",
            source_url="https://models.example.com/star-bear",
            tags=["animals"],
            print_time_hours=Decimal("1.50"),
            license_status=CatalogItem.LicenseStatus.ORIGINAL,
        )
        CatalogItem.objects.create(
            id="mystery-mouse",
            name="Mystery Mouse",
            license_status=CatalogItem.LicenseStatus.IP_RISK,
        )
        ColorOption.objects.create(id="pink", name="Pink", hex="#ff69b4", in_stock=True)
        ColorOption.objects.create(id="glow", name="Glow", hex="#c8f7c5", in_stock=False)

    def test_catalog_hides_restricted_items(self):
        res = self.client.get("/api/catalog/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual([t["id"] for t in res.data["toys"]], ["star-bear"])

    def test_catalog_item_shape(self):
        toy = self.client.get("/api/catalog/").data["toys"][0]

        self.assertEqual(
            set(toy),
            {
                "id",
                "name",
                "description",
                "imageUrl",
                "sourceUrl",
                "tags",
                "difficulty",
                "printTimeHours",
            },
        )
        self.assertEqual(toy["sourceUrl"], "https://models.example.com/star-bear")
        self.assertEqual(toy["printTimeHours"], Decimal("1.50"))
        self.assertEqual(toy["difficulty"], "easy")

    def test_catalog_database_failure(self):
        with mock.patch(
            "public.views.catalog.public_catalog.items",
            side_effect=DatabaseError("down"),
        ):
            res = self.client.get("/api/catalog/")

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.data["toys"], [])
        self.assertEqual(res.data["error"], "Failed to load catalog")

    def test_colors_returns_all_by_default(self):
        res = self.client.get("/api/colors/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(
            res.data["colors"],
            [
                {"id": "glow", "name": "Glow", "hex": "#c8f7c5", "inStock": False},
                {"id": "pink", "name": "Pink", "hex": "#ff69b4", "inStock": True},
            ],
        )

    def test_colors_in_stock_filter(self):
        res = self.client.get("/api/colors/", {"in_stock": "true"})

        self.assertEqual([c["id"] for c in res.data["colors"]], ["pink"])


class PublicOrderApiTests(TestCase):
    """
    GUARANTEES:
    - A complete cart is saved and answered with 201 + orderId
    - Incomplete carts get 400 and persist nothing
    """

    def setUp(self):
        self.client = APIClient()
        self.payload = {
            "items": [
                {"toyId": "star-bear", "toyName": "Star Bear", "colors": ["Pink", "Purple"]}
            ],
            "buyerName": "Alex",
            "buyerContact": "alex@example.com",
            "total": 5,
        }

    def test_submit_order(self):
        res = self.client.post("/api/order/", self.payload, format="json")

        self.assertEqual(res.status_code, 201)
        self.assertTrue(res.data["success"])
        self.assertEqual(res.data["mattPhone"], "+15550100")

        order = Order.objects.get(id=res.data["orderId"])
        self.assertEqual(order.buyer_name, "Alex")
        self.assertEqual(order.total, Decimal("5.00"))
        self.assertEqual(order.items[0]["colors"], ["Pink", "Purple"])
        self.assertFalse(order.is_paid)
        self.assertFalse(order.is_completed)

    def test_missing_fields_rejected(self):
        for field in ("items", "buyerName", "buyerContact", "total"):
            payload = {k: v for k, v in self.payload.items() if k != field}
            with self.subTest(missing=field):
                res = self.client.post("/api/order/", payload, format="json")
                self.assertEqual(res.status_code, 400)
                self.assertEqual(res.data["error"], "Missing required fields")
                self.assertIn(field, res.data["fields"])

        self.assertEqual(Order.objects.count(), 0)

    def test_item_without_colors_rejected(self):
        self.payload["items"][0]["colors"] = []

        res = self.client.post("/api/order/", self.payload, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(Order.objects.count(), 0)

    def test_negative_total_rejected(self):
        self.payload["total"] = -3

        res = self.client.post("/api/order/", self.payload, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(Order.objects.count(), 0)

    def test_order_survives_notification_failure(self):
        with mock.patch(
            "orders.services.order_intake.notify_operator",
            side_effect=RuntimeError("smtp exploded"),
        ):
            res = self.client.post("/api/order/", self.payload, format="json")

        self.assertEqual(res.status_code, 201)
        self.assertTrue(Order.objects.filter(id=res.data["orderId"]).exists())

    def test_exhausted_order_ids_answer_json_500(self):
        frozen = datetime(2026, 1, 1, tzinfo=dt_timezone.utc)
        taken = f"order-{int(frozen.timestamp() * 1000)}-aaaaaa"
        Order.objects.create(
            id=taken,
            buyer_name="First",
            buyer_contact="first@example.com",
            items=self.payload["items"],
            total=Decimal("1.00"),
        )

        with mock.patch(
            "orders.services.order_intake.timezone.now", return_value=frozen
        ), mock.patch(
            "orders.services.order_intake.secrets.token_hex", return_value="aaaaaa"
        ):
            res = self.client.post("/api/order/", self.payload, format="json")

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.data, {"error": "Server error"})
        self.assertEqual(Order.objects.count(), 1)


class ProjectEndpointTests(TestCase):
    def test_health_check(self):
        res = APIClient().get("/api/health/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data, {"status": "ok", "db": "ok"})

    def test_api_root_lists_modules(self):
        res = APIClient().get("/api/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["modules"]["catalog"], "/api/catalog/")
