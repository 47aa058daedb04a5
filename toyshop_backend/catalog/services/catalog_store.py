# catalog/services/catalog_store.py

"""
CATALOG STORE

Reads:
- list_public_items(): every item except restricted license statuses, by name
- list_all_items():    every item, by name (admin)
- public_catalog:      time-boxed holder around list_public_items()

Writes (admin):
- create_item():  insert one item; id generated from the clock when absent
- update_items(): best-effort batch overwrite of name/description/image_url
- delete_item():  remove one item (orders keep their name snapshots)

Cache contract:
- Every write in this module invalidates public_catalog before returning.
- Writers outside this module (e.g. management commands using the ORM
  directly) must call public_catalog.invalidate() or accept TTL staleness.
"""

from __future__ import annotations

import logging
import time
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping, Optional

from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from catalog.models import CatalogItem
from catalog.services.cache import ExpiringValue
from catalog.services.exceptions import CatalogItemNotFound, DuplicateCatalogItem

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "image_url")


# =====================================================
# READS
# =====================================================

def list_public_items() -> list[CatalogItem]:
    return list(
        CatalogItem.objects.exclude(
            license_status__in=CatalogItem.RESTRICTED_LICENSE_STATUSES
        ).order_by("name")
    )


def list_all_items() -> list[CatalogItem]:
    return list(CatalogItem.objects.order_by("name"))


class PublicCatalog:
    """
    Service object owning the public catalog read cache.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        loader: Callable[[], list[CatalogItem]] = list_public_items,
    ):
        if ttl_seconds is None:
            ttl_seconds = getattr(settings, "PUBLIC_CATALOG_CACHE_SECONDS", 60)
        self._holder: ExpiringValue[list[CatalogItem]] = ExpiringValue(
            ttl_seconds, clock=clock
        )
        self._loader = loader

    def items(self) -> list[CatalogItem]:
        return self._holder.get_or_compute(self._loader)

    def invalidate(self) -> None:
        self._holder.invalidate()


public_catalog = PublicCatalog()


# =====================================================
# WRITES
# =====================================================

def generate_item_id() -> str:
    millis = int(timezone.now().timestamp() * 1000)
    candidate = f"toy-{millis}"
    suffix = 1
    while CatalogItem.objects.filter(id=candidate).exists():
        suffix += 1
        candidate = f"toy-{millis}-{suffix}"
    return candidate


def create_item(
    *,
    name: str,
    item_id: Optional[str] = None,
    description: Optional[str] = None,
    image_url: Optional[str] = None,
    source_url: Optional[str] = None,
    tags: Optional[list[str]] = None,
    difficulty: Optional[str] = None,
    print_time_hours: Optional[Decimal] = None,
    license_status: Optional[str] = None,
) -> CatalogItem:
    item_id = (item_id or "").strip()
    if item_id and CatalogItem.objects.filter(id=item_id).exists():
        raise DuplicateCatalogItem(f"Item '{item_id}' already exists")

    try:
        with transaction.atomic():
            item = CatalogItem.objects.create(
                id=item_id or generate_item_id(),
                name=name.strip(),
                description=description,
                image_url=image_url,
                source_url=source_url,
                tags=list(tags or []),
                difficulty=difficulty or CatalogItem.DEFAULT_DIFFICULTY,
                print_time_hours=(
                    print_time_hours
                    if print_time_hours is not None
                    else CatalogItem.DEFAULT_PRINT_TIME_HOURS
                ),
                license_status=license_status or CatalogItem.DEFAULT_LICENSE_STATUS,
            )
    except IntegrityError as exc:
        raise DuplicateCatalogItem(f"Item '{item_id}' already exists") from exc

    public_catalog.invalidate()
    logger.info("Catalog item created", extra={"item_id": item.id})
    return item


def _clean_update_entry(entry: Any) -> Optional[tuple[str, dict]]:
    if not isinstance(entry, Mapping):
        logger.warning("Skipping catalog update entry that is not an object")
        return None

    item_id = entry.get("id")
    if not isinstance(item_id, str) or not item_id.strip():
        logger.warning("Skipping catalog update entry without id")
        return None

    fields = {k: entry[k] for k in UPDATABLE_FIELDS if k in entry}
    if "name" in fields and not (
        isinstance(fields["name"], str) and fields["name"].strip()
    ):
        logger.warning(
            "Skipping catalog update with empty name", extra={"item_id": item_id}
        )
        return None

    return item_id.strip(), fields


def update_items(entries: Iterable[Any]) -> int:
    """
    Best-effort batch update.

    Each entry is applied in its own savepoint. Malformed entries, unknown
    ids and database errors are logged and skipped; the batch never aborts.
    Returns the number of rows actually updated (not reported to clients).
    """
    updated = 0

    for entry in entries:
        cleaned = _clean_update_entry(entry)
        if cleaned is None:
            continue

        item_id, fields = cleaned
        if not fields:
            continue

        try:
            with transaction.atomic():
                count = CatalogItem.objects.filter(id=item_id).update(
                    **fields, updated_at=timezone.now()
                )
        except DatabaseError:
            logger.exception("Error updating catalog item", extra={"item_id": item_id})
            continue

        if not count:
            logger.warning("Catalog update for unknown item", extra={"item_id": item_id})
            continue

        updated += count

    public_catalog.invalidate()
    logger.info("Catalog batch update finished", extra={"updated": updated})
    return updated


def delete_item(item_id: str) -> None:
    deleted, _ = CatalogItem.objects.filter(id=item_id).delete()
    if not deleted:
        raise CatalogItemNotFound(f"Item '{item_id}' not found")

    public_catalog.invalidate()
    logger.info("Catalog item deleted", extra={"item_id": item_id})
