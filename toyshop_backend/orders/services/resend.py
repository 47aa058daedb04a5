# orders/services/resend.py
"""
RESEND EMAIL CLIENT

Minimal JSON client for the Resend transactional email API:
    POST https://api.resend.com/emails

Config: settings.NOTIFICATIONS["RESEND"]["API_KEY"] / ["FROM"]
(populated from env RESEND_API_KEY / ORDER_NOTIFY_FROM in base settings).

Every provider failure surfaces as NotificationError; the raw provider
body is kept in the message preview for server logs only.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from django.conf import settings

from orders.services.exceptions import NotificationError

RESEND_BASE = "https://api.resend.com"


def _resend_cfg() -> dict:
    notifications = getattr(settings, "NOTIFICATIONS", {}) or {}
    cfg = (notifications.get("RESEND") or {}) if isinstance(notifications, dict) else {}
    return cfg if isinstance(cfg, dict) else {}


def get_api_key() -> str:
    return (_resend_cfg().get("API_KEY") or "").strip()


def get_sender() -> str:
    return (_resend_cfg().get("FROM") or "").strip() or "onboarding@resend.dev"


def is_configured() -> bool:
    return bool(get_api_key())


def _safe_preview(text: str, limit: int = 500) -> str:
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + " ...(truncated)"


def _parse_json(raw: str) -> dict[str, Any]:
    try:
        parsed = json.loads(raw or "")
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _request_json(method: str, url: str, *, body: dict, timeout: int = 15) -> dict[str, Any]:
    key = get_api_key()
    if not key:
        raise NotificationError("RESEND_API_KEY is not configured")

    req = Request(
        url,
        data=json.dumps(body, ensure_ascii=False).encode("utf-8"),
        headers={
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
        method=method,
    )

    try:
        with urlopen(req, timeout=timeout) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
    except HTTPError as e:
        raw = ""
        try:
            raw = e.read().decode("utf-8", errors="replace")
        except OSError:
            raw = ""
        parsed = _parse_json(raw)
        msg = parsed.get("message") or parsed.get("error") or _safe_preview(raw) or str(e)
        raise NotificationError(f"Resend HTTPError: {e.code} {msg}") from e
    except URLError as e:
        raise NotificationError(f"Resend URLError: {e.reason}") from e
    except OSError as e:
        raise NotificationError(f"Resend request failed: {e}") from e

    parsed = _parse_json(raw)
    if not parsed:
        raise NotificationError(f"Resend returned non-JSON: {_safe_preview(raw)}")
    return parsed


def send_email(
    *,
    to: str | list[str],
    subject: str,
    html: str,
    text: str = "",
    reply_to: str = "",
) -> str:
    """
    Send one email. Returns the provider message id.
    """
    recipients = [to] if isinstance(to, str) else list(to)
    payload: dict = {
        "from": get_sender(),
        "to": recipients,
        "subject": subject,
        "html": html,
    }
    if text:
        payload["text"] = text
    if reply_to:
        payload["reply_to"] = reply_to

    parsed = _request_json("POST", f"{RESEND_BASE}/emails", body=payload)

    message_id = str(parsed.get("id") or "").strip()
    if not message_id:
        raise NotificationError(parsed.get("message") or "Resend did not accept the email")
    return message_id
