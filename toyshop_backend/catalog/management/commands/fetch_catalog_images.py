"""
Fetch catalog images from each item's source page.

For every item with a source_url:
    page -> og:image -> download -> image storage -> item.image_url

Usage:
    python manage.py fetch_catalog_images
    python manage.py fetch_catalog_images --only-missing --limit 10
    python manage.py fetch_catalog_images --dry-run
"""

from __future__ import annotations

import logging
import re
import time
from urllib.error import HTTPError, URLError
from urllib.parse import urljoin, urlparse
from urllib.request import Request, urlopen

from django.core.management.base import BaseCommand
from django.db.models import Q
from django.utils.text import slugify

from catalog.models import CatalogItem
from catalog.services.catalog_store import public_catalog
from catalog.services.exceptions import ImageStorageError
from catalog.services.image_storage import (
    ALLOWED_EXTENSIONS,
    DEFAULT_EXTENSION,
    store_catalog_image,
)

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
FETCH_TIMEOUT = 20

# og:image with either attribute order
OG_IMAGE_PATTERNS = (
    re.compile(r"""property=["']og:image["'][^>]*content=["']([^"']+)["']""", re.I),
    re.compile(r"""content=["']([^"']+)["'][^>]*property=["']og:image["']""", re.I),
)


class FetchError(Exception):
    pass


def extract_og_image(html: str) -> str | None:
    for pattern in OG_IMAGE_PATTERNS:
        match = pattern.search(html or "")
        if match:
            return match.group(1).strip()
    return None


def image_extension(url: str) -> str:
    path = urlparse(url).path
    ext = path.rsplit(".", 1)[-1].lower() if "." in path.rsplit("/", 1)[-1] else ""
    return ext if ext in ALLOWED_EXTENSIONS else DEFAULT_EXTENSION


def _http_get(url: str) -> tuple[bytes, str]:
    req = Request(url, headers={"User-Agent": USER_AGENT}, method="GET")
    try:
        with urlopen(req, timeout=FETCH_TIMEOUT) as resp:
            return resp.read(), resp.headers.get("Content-Type", "") or ""
    except HTTPError as e:
        raise FetchError(f"{url} returned {e.code}") from e
    except URLError as e:
        raise FetchError(f"{url} unreachable: {e.reason}") from e
    except OSError as e:
        raise FetchError(f"{url} read failed: {e}") from e


class Command(BaseCommand):
    help = "Fetch og:image pictures for catalog items and store them"

    def add_arguments(self, parser):
        parser.add_argument(
            "--only-missing",
            action="store_true",
            help="Skip items that already have an image_url",
        )
        parser.add_argument("--limit", type=int, default=0, help="Process at most N items")
        parser.add_argument(
            "--delay",
            type=float,
            default=0.5,
            help="Seconds to wait between items",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Resolve og:image URLs without downloading or saving",
        )

    def handle(self, *args, **options):
        qs = CatalogItem.objects.exclude(source_url__isnull=True).exclude(source_url="")
        if options["only_missing"]:
            qs = qs.filter(Q(image_url__isnull=True) | Q(image_url=""))
        qs = qs.order_by("name")
        if options["limit"] > 0:
            qs = qs[: options["limit"]]

        items = list(qs)
        total = len(items)
        saved = 0
        failed = 0

        self.stdout.write(self.style.WARNING(f"Fetching images for {total} item(s)..."))

        for index, item in enumerate(items, start=1):
            self.stdout.write(f"[{index}/{total}] {item.name}")
            try:
                image_url = self._process(item, dry_run=options["dry_run"])
            except (FetchError, ImageStorageError) as exc:
                failed += 1
                logger.warning(
                    "Catalog image fetch failed",
                    extra={"item_id": item.id, "error": str(exc)},
                )
                self.stdout.write(self.style.ERROR(f"   failed: {exc}"))
            else:
                saved += 1
                self.stdout.write(self.style.SUCCESS(f"   saved: {image_url}"))

            if options["delay"] > 0 and index < total:
                time.sleep(options["delay"])

        if saved and not options["dry_run"]:
            public_catalog.invalidate()

        summary = f"Done: {saved} image(s) saved, {failed} failed"
        if failed:
            self.stdout.write(self.style.WARNING(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))

    def _process(self, item: CatalogItem, *, dry_run: bool) -> str:
        page, _ = _http_get(item.source_url)
        og_image = extract_og_image(page.decode("utf-8", errors="replace"))
        if not og_image:
            raise FetchError("no og:image found")

        og_image = urljoin(item.source_url, og_image)
        if dry_run:
            return og_image

        content, content_type = _http_get(og_image)
        stored = store_catalog_image(
            name=f"{slugify(item.id) or 'item'}.{image_extension(og_image)}",
            content=content,
            content_type=content_type,
        )

        item.image_url = stored.url
        item.save(update_fields=["image_url", "updated_at"])
        return stored.url
