from io import StringIO
from unittest import mock
from urllib.error import URLError

from django.core.management import call_command
from django.test import TestCase

from catalog.management.commands.fetch_catalog_images import (
    extract_og_image,
    image_extension,
)
from catalog.models import CatalogItem, ColorOption

COMMAND_MODULE = "catalog.management.commands.fetch_catalog_images"


def _response(body, content_type="text/html"):
    response = mock.MagicMock()
    response.read.return_value = body
    response.headers = {"Content-Type": content_type}
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


class OgImageParsingTests(TestCase):
    def test_property_before_content(self):
        html = '<meta property="og:image" content="https://cdn.example.com/a.png">'
        self.assertEqual(extract_og_image(html), "https://cdn.example.com/a.png")

    def test_content_before_property(self):
        html = "<meta content='https://cdn.example.com/b.webp' property='og:image' />"
        self.assertEqual(extract_og_image(html), "https://cdn.example.com/b.webp")

    def test_missing_tag(self):
        self.assertIsNone(extract_og_image("<html><head></head></html>"))

    def test_extension_defaults_to_jpg(self):
        self.assertEqual(image_extension("https://cdn.example.com/a.PNG?w=400"), "png")
        self.assertEqual(image_extension("https://cdn.example.com/render"), "jpg")
        self.assertEqual(image_extension("https://cdn.example.com/a.svg"), "jpg")


class FetchCatalogImagesCommandTests(TestCase):
    """
    GUARANTEES:
    - Items with an og:image get a stored image and an updated image_url
    - Per-item failures are counted, never abort the run
    - --dry-run writes nothing
    """

    def setUp(self):
        CatalogItem.objects.create(
            id="star-bear",
            name="Star Bear",
            source_url="https://models.example.com/star-bear",
        )
        CatalogItem.objects.create(
            id="broken-link",
            name="Broken Link",
            source_url="https://models.example.com/gone",
        )
        CatalogItem.objects.create(id="no-source", name="No Source")

    def _fake_urlopen(self, request, timeout=None):
        url = request.full_url
        if url == "https://models.example.com/star-bear":
            return _response(b'<meta property="og:image" content="/img/star-bear.png">')
        if url == "https://models.example.com/img/star-bear.png":
            return _response(b"png-bytes", content_type="image/png")
        raise URLError("connection refused")

    def test_fetches_and_stores_images(self):
        out = StringIO()
        with mock.patch(f"{COMMAND_MODULE}.urlopen", side_effect=self._fake_urlopen):
            call_command("fetch_catalog_images", "--delay", "0", stdout=out)

        bear = CatalogItem.objects.get(id="star-bear")
        self.assertIn("toys/star-bear", bear.image_url)
        self.assertTrue(bear.image_url.endswith(".png"))

        self.assertIsNone(CatalogItem.objects.get(id="broken-link").image_url)
        self.assertIn("Done: 1 image(s) saved, 1 failed", out.getvalue())

    def test_timeout_is_counted_not_fatal(self):
        out = StringIO()
        with mock.patch(
            f"{COMMAND_MODULE}.urlopen",
            side_effect=TimeoutError("The read operation timed out"),
        ):
            call_command("fetch_catalog_images", "--delay", "0", stdout=out)

        self.assertIn("Done: 0 image(s) saved, 2 failed", out.getvalue())
        self.assertIsNone(CatalogItem.objects.get(id="star-bear").image_url)

    def test_connection_reset_mid_download_is_counted(self):
        def reset_on_image(request, timeout=None):
            if request.full_url.endswith(".png"):
                raise ConnectionResetError("Connection reset by peer")
            return self._fake_urlopen(request, timeout)

        out = StringIO()
        with mock.patch(f"{COMMAND_MODULE}.urlopen", side_effect=reset_on_image):
            call_command("fetch_catalog_images", "--delay", "0", stdout=out)

        self.assertIn("Done: 0 image(s) saved, 2 failed", out.getvalue())

    def test_dry_run_saves_nothing(self):
        out = StringIO()
        with mock.patch(f"{COMMAND_MODULE}.urlopen", side_effect=self._fake_urlopen):
            call_command("fetch_catalog_images", "--delay", "0", "--dry-run", stdout=out)

        self.assertIsNone(CatalogItem.objects.get(id="star-bear").image_url)
        self.assertIn("https://models.example.com/img/star-bear.png", out.getvalue())

    def test_only_missing_skips_items_with_images(self):
        CatalogItem.objects.filter(id="star-bear").update(image_url="/media/toys/old.png")

        out = StringIO()
        with mock.patch(f"{COMMAND_MODULE}.urlopen", side_effect=self._fake_urlopen) as urlopen:
            call_command(
                "fetch_catalog_images", "--delay", "0", "--only-missing", stdout=out
            )

        requested = [c.args[0].full_url for c in urlopen.call_args_list]
        self.assertEqual(requested, ["https://models.example.com/gone"])
        self.assertEqual(
            CatalogItem.objects.get(id="star-bear").image_url, "/media/toys/old.png"
        )


class SeedCatalogCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_catalog", stdout=StringIO())
        colors = ColorOption.objects.count()
        items = CatalogItem.objects.count()

        call_command("seed_catalog", stdout=StringIO())

        self.assertGreater(colors, 0)
        self.assertGreater(items, 0)
        self.assertEqual(ColorOption.objects.count(), colors)
        self.assertEqual(CatalogItem.objects.count(), items)
