# catalog/tests/test_catalog_store.py

from decimal import Decimal
from unittest import mock

from django.test import TestCase

from catalog.models import CatalogItem
from catalog.services import catalog_store
from catalog.services.catalog_store import (
    create_item,
    delete_item,
    list_all_items,
    list_public_items,
    update_items,
)
from catalog.services.exceptions import CatalogItemNotFound, DuplicateCatalogItem


class CatalogStoreTests(TestCase):
    """
    Catalog store tests.

    GUARANTEES:
    - Restricted license statuses never reach the public listing
    - Creation fills documented defaults
    - Batch updates are best-effort and only touch updatable fields
    - Deleting an unknown id is reported
    """

    def setUp(self):
        CatalogItem.objects.create(
            id="star-bear",
            name="Star Bear",
            license_status=CatalogItem.LicenseStatus.ORIGINAL,
        )
        CatalogItem.objects.create(
            id="mystery-mouse",
            name="Mystery Mouse",
            license_status=CatalogItem.LicenseStatus.IP_RISK,
        )
        CatalogItem.objects.create(
            id="axolotl",
            name="Axolotl",
            license_status=CatalogItem.LicenseStatus.UNKNOWN,
        )

    # --------------------------------------------------
    # Reads
    # --------------------------------------------------

    def test_public_listing_hides_restricted_items(self):
        ids = [item.id for item in list_public_items()]

        self.assertEqual(ids, ["axolotl", "star-bear"])
        self.assertNotIn("mystery-mouse", ids)

    def test_admin_listing_includes_everything_sorted_by_name(self):
        names = [item.name for item in list_all_items()]

        self.assertEqual(names, ["Axolotl", "Mystery Mouse", "Star Bear"])

    # --------------------------------------------------
    # Create
    # --------------------------------------------------

    def test_create_applies_defaults(self):
        item = create_item(name="  Flexi Cat  ", item_id="flexi-cat")

        self.assertEqual(item.name, "Flexi Cat")
        self.assertEqual(item.difficulty, CatalogItem.Difficulty.EASY)
        self.assertEqual(item.print_time_hours, Decimal("1.0"))
        self.assertEqual(item.license_status, CatalogItem.LicenseStatus.UNKNOWN)
        self.assertEqual(item.tags, [])

    def test_create_generates_id_when_missing(self):
        item = create_item(name="Rocket")

        self.assertTrue(item.id.startswith("toy-"))
        self.assertTrue(CatalogItem.objects.filter(id=item.id).exists())

    def test_create_rejects_duplicate_id(self):
        with self.assertRaises(DuplicateCatalogItem):
            create_item(name="Another Bear", item_id="star-bear")

    def test_create_invalidates_public_cache(self):
        with mock.patch.object(catalog_store.public_catalog, "invalidate") as invalidate:
            create_item(name="Rocket", item_id="rocket")

        invalidate.assert_called_once_with()

    # --------------------------------------------------
    # Batch update
    # --------------------------------------------------

    def test_batch_update_is_best_effort(self):
        updated = update_items(
            [
                {"id": "star-bear", "name": "Star Bear XL", "description": "Bigger"},
                {"id": "does-not-exist", "name": "Ghost"},
                {"name": "no id"},
                "not an object",
                {"id": "axolotl", "name": "   "},
                {"id": "axolotl", "image_url": "/media/toys/axolotl.jpg"},
            ]
        )

        self.assertEqual(updated, 2)

        bear = CatalogItem.objects.get(id="star-bear")
        self.assertEqual(bear.name, "Star Bear XL")
        self.assertEqual(bear.description, "Bigger")

        axolotl = CatalogItem.objects.get(id="axolotl")
        self.assertEqual(axolotl.name, "Axolotl")
        self.assertEqual(axolotl.image_url, "/media/toys/axolotl.jpg")

        self.assertFalse(CatalogItem.objects.filter(id="does-not-exist").exists())

    def test_batch_update_ignores_non_updatable_fields(self):
        update_items([{"id": "mystery-mouse", "license_status": "original"}])

        item = CatalogItem.objects.get(id="mystery-mouse")
        self.assertEqual(item.license_status, CatalogItem.LicenseStatus.IP_RISK)

    # --------------------------------------------------
    # Delete
    # --------------------------------------------------

    def test_delete_removes_item(self):
        delete_item("axolotl")

        self.assertFalse(CatalogItem.objects.filter(id="axolotl").exists())

    def test_delete_unknown_item_raises(self):
        with self.assertRaises(CatalogItemNotFound):
            delete_item("nope")
