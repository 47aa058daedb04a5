# adminpanel/services/session_gate.py

"""
ADMIN SESSION GATE

One shared secret (settings.ADMIN_PASSWORD) protects every admin operation.

Cookie convention (single, explicit):
- name:   settings.ADMIN_SESSION["COOKIE_NAME"] (default "admin_session")
- value:  the fixed literal "authenticated", signed with SECRET_KEY +
          a dedicated salt (Django signed cookie, timestamped)
- expiry: settings.ADMIN_SESSION["MAX_AGE"] seconds (24h default), enforced
          both by the browser (max_age) and on read (signature age)

A forged, tampered or expired cookie reads as "not logged in".
There is no lockout or attempt tracking; the login view is throttled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from django.conf import settings
from django.utils import timezone
from django.utils.crypto import constant_time_compare

SESSION_VALUE = "authenticated"
SESSION_SALT = "adminpanel.session"


@dataclass(frozen=True)
class AdminSession:
    """
    Request-scoped outcome of the admin cookie check.
    Attached to DRF requests as request.auth by AdminSessionAuthentication.
    """

    authenticated: bool
    checked_at: datetime = field(default_factory=timezone.now)


def _cfg() -> dict:
    cfg = getattr(settings, "ADMIN_SESSION", {}) or {}
    return cfg if isinstance(cfg, dict) else {}


def cookie_name() -> str:
    return (_cfg().get("COOKIE_NAME") or "admin_session").strip()


def max_age() -> int:
    return int(_cfg().get("MAX_AGE") or 60 * 60 * 24)


def check_password(password: str) -> bool:
    expected = getattr(settings, "ADMIN_PASSWORD", "") or ""
    if not expected or not password:
        return False
    return constant_time_compare(str(password), expected)


def read_session(request) -> AdminSession:
    value = request.get_signed_cookie(
        cookie_name(),
        default=None,
        salt=SESSION_SALT,
        max_age=max_age(),
    )
    return AdminSession(authenticated=value == SESSION_VALUE)


def issue_session(response) -> None:
    response.set_signed_cookie(
        cookie_name(),
        SESSION_VALUE,
        salt=SESSION_SALT,
        max_age=max_age(),
        httponly=True,
        secure=bool(_cfg().get("COOKIE_SECURE", False)),
        samesite="Lax",
    )


def clear_session(response) -> None:
    response.delete_cookie(cookie_name(), samesite="Lax")
