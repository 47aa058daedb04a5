# catalog/services/image_storage.py
"""
CATALOG IMAGE STORAGE

store_catalog_image(name=..., content=..., content_type=...) -> StoredImage

Backends:
- Supabase Storage (object storage) when settings.OBJECT_STORAGE["SUPABASE"]
  has URL + SERVICE_ROLE_KEY:
    POST {URL}/storage/v1/object/{bucket}/{name}   (x-upsert: true)
    public URL: {URL}/storage/v1/object/public/{bucket}/{name}
- Django default_storage otherwise (local MEDIA_ROOT in dev/tests).

Provider failures raise ImageStorageError with a client-safe message; the
provider response is only logged.
"""

from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.utils import timezone
from django.utils.text import slugify

from catalog.services.exceptions import ImageStorageError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = ("jpg", "jpeg", "png", "webp", "gif")
DEFAULT_EXTENSION = "jpg"


@dataclass(frozen=True)
class StoredImage:
    path: str
    url: str


def _supabase_cfg() -> dict:
    storage = getattr(settings, "OBJECT_STORAGE", {}) or {}
    cfg = (storage.get("SUPABASE") or {}) if isinstance(storage, dict) else {}
    return cfg if isinstance(cfg, dict) else {}


def supabase_configured() -> bool:
    cfg = _supabase_cfg()
    return bool((cfg.get("URL") or "").strip() and (cfg.get("SERVICE_ROLE_KEY") or "").strip())


def safe_extension(filename: str, content_type: str = "") -> str:
    ext = ""
    if "." in (filename or ""):
        ext = filename.rsplit(".", 1)[-1].lower()
    if ext in ALLOWED_EXTENSIONS:
        return ext

    guessed = mimetypes.guess_extension(content_type or "") or ""
    guessed = guessed.lstrip(".").lower()
    if guessed == "jpe":
        guessed = "jpg"
    return guessed if guessed in ALLOWED_EXTENSIONS else DEFAULT_EXTENSION


def upload_object_name(item_id: str, filename: str, content_type: str = "") -> str:
    """<item id>-<epoch millis>.<ext>"""
    millis = int(timezone.now().timestamp() * 1000)
    prefix = slugify(item_id) or "item"
    return f"{prefix}-{millis}.{safe_extension(filename, content_type)}"


def _supabase_upload(*, name: str, content: bytes, content_type: str) -> StoredImage:
    cfg = _supabase_cfg()
    base = cfg["URL"].rstrip("/")
    bucket = (cfg.get("BUCKET") or "toy-images").strip()
    key = cfg["SERVICE_ROLE_KEY"].strip()
    object_path = quote(name)

    req = Request(
        f"{base}/storage/v1/object/{bucket}/{object_path}",
        data=content,
        headers={
            "Authorization": f"Bearer {key}",
            "apikey": key,
            "Content-Type": content_type or "application/octet-stream",
            "x-upsert": "true",
        },
        method="POST",
    )

    try:
        with urlopen(req, timeout=30) as resp:
            resp.read()
    except HTTPError as e:
        body = ""
        try:
            body = e.read().decode("utf-8", errors="replace")[:500]
        except OSError:
            body = ""
        logger.error(
            "Object storage rejected upload",
            extra={"status": e.code, "object_name": name, "body": body},
        )
        raise ImageStorageError("Image storage rejected the upload") from e
    except URLError as e:
        logger.error("Object storage unreachable", extra={"object_name": name})
        raise ImageStorageError("Image storage is unreachable") from e
    except OSError as e:
        logger.error(
            "Object storage request failed",
            extra={"object_name": name, "error": str(e)},
        )
        raise ImageStorageError("Image storage request failed") from e

    return StoredImage(
        path=name,
        url=f"{base}/storage/v1/object/public/{bucket}/{object_path}",
    )


def _local_upload(*, name: str, content: bytes) -> StoredImage:
    try:
        stored_name = default_storage.save(f"toys/{name}", ContentFile(content))
    except OSError as e:
        logger.exception("Local image storage failed", extra={"object_name": name})
        raise ImageStorageError("Image storage failed") from e
    return StoredImage(path=stored_name, url=default_storage.url(stored_name))


def store_catalog_image(*, name: str, content: bytes, content_type: str = "") -> StoredImage:
    if supabase_configured():
        stored = _supabase_upload(name=name, content=content, content_type=content_type)
    else:
        stored = _local_upload(name=name, content=content)

    logger.info(
        "Catalog image stored",
        extra={"object_name": stored.path, "bytes": len(content)},
    )
    return stored
