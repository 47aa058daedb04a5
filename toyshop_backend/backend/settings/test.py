# backend/settings/test.py
"""
PATH: backend/settings/test.py

TEST SETTINGS

Used by `manage.py test` (see manage.py) and by pytest-django (pyproject).
- In-memory SQLite
- No outbound providers configured (notifications skipped, local image storage)
- Throttles effectively disabled
- Public catalog cache off unless a test turns it on
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from .base import *  # noqa: F403
from .base import REST_FRAMEWORK

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

ADMIN_PASSWORD = "test-admin-secret"

NOTIFICATIONS = {"RESEND": {"API_KEY": "", "FROM": "Toyshop <orders@example.com>"}}
OPERATOR_EMAIL = "operator@example.com"
OPERATOR_PHONE = "+15550100"

OBJECT_STORAGE = {
    "SUPABASE": {"URL": "", "SERVICE_ROLE_KEY": "", "BUCKET": "toy-images"}
}
MEDIA_ROOT = Path(tempfile.mkdtemp(prefix="toyshop-media-"))

PUBLIC_CATALOG_CACHE_SECONDS = 0

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_RATES": {
        "anon": "100000/min",
        "public_catalog": "100000/min",
        "public_write": "100000/min",
        "admin_login": "100000/min",
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"null": {"class": "logging.NullHandler"}},
    "root": {"handlers": ["null"], "level": "CRITICAL"},
}
