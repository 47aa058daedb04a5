"""
PATH: manage.py

Django management entrypoint.

Key safeguard:
- If DJANGO_SETTINGS_MODULE is unset OR incorrectly set to the settings *package*
  ("backend.settings"), we force it to a concrete module:
    - "backend.settings.test" for `manage.py test`
    - "backend.settings.dev" otherwise

Production:
- Production must set DJANGO_SETTINGS_MODULE=backend.settings.prod explicitly.
  We respect that.
"""

from __future__ import annotations

import os
import sys


def _ensure_settings_module(argv: list[str]) -> None:
    current = (os.environ.get("DJANGO_SETTINGS_MODULE") or "").strip()

    # "backend.settings" is a package; it loads no INSTALLED_APPS on its own.
    if not current or current == "backend.settings":
        default = "backend.settings.test" if "test" in argv[1:2] else "backend.settings.dev"
        os.environ["DJANGO_SETTINGS_MODULE"] = default


def main() -> None:
    _ensure_settings_module(sys.argv)

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
