# catalog/services/color_registry.py

"""
COLOR REGISTRY

- list_colors():  all colors ordered by name (optionally only in-stock ones)
- replace_all():  full-replace save used by the admin panel

Full-replace semantics:
- Every existing row is deleted, then the given set is bulk inserted.
- Both steps run inside ONE transaction: a failure during the insert rolls
  back the delete, so the registry is never left empty by a crash halfway.
- Ids are only stable across saves if the client sends them back; missing
  ids are derived from the color name.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from django.db import transaction
from django.utils.text import slugify

from catalog.models import ColorOption
from catalog.services.exceptions import InvalidColorSet

logger = logging.getLogger(__name__)


def list_colors(*, in_stock_only: bool = False) -> list[ColorOption]:
    qs = ColorOption.objects.all()
    if in_stock_only:
        qs = qs.filter(in_stock=True)
    return list(qs.order_by("name"))


def _derive_id(name: str, taken: set[str]) -> str:
    base = slugify(name) or "color"
    candidate = base
    n = 2
    while candidate in taken:
        candidate = f"{base}-{n}"
        n += 1
    return candidate


def _build_rows(colors: Iterable[Mapping]) -> list[ColorOption]:
    rows: list[ColorOption] = []
    taken: set[str] = set()
    pending_names: list[tuple[int, str]] = []

    for color in colors:
        color_id = (color.get("id") or "").strip()
        if color_id:
            if color_id in taken:
                raise InvalidColorSet(f"Duplicate color id '{color_id}'")
            taken.add(color_id)
        else:
            pending_names.append((len(rows), color["name"]))

        rows.append(
            ColorOption(
                id=color_id,
                name=color["name"].strip(),
                hex=color["hex"].strip(),
                in_stock=bool(color.get("in_stock", True)),
            )
        )

    # Explicit ids win; derived ids fill in around them.
    for index, name in pending_names:
        derived = _derive_id(name, taken)
        taken.add(derived)
        rows[index].id = derived

    return rows


def replace_all(colors: Iterable[Mapping]) -> list[ColorOption]:
    """
    Replace the whole registry with `colors`.

    Each mapping carries: name, hex, optional id, optional in_stock (True).
    """
    rows = _build_rows(colors)

    with transaction.atomic():
        deleted, _ = ColorOption.objects.all().delete()
        ColorOption.objects.bulk_create(rows)

    logger.info(
        "Color registry replaced",
        extra={"deleted": deleted, "inserted": len(rows)},
    )
    return rows
