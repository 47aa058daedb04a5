"""
PATH: backend/settings/base.py

BASE SETTINGS (shared by dev + prod + test)

Operational maturity:
- Throttling (public catalog, order intake, admin login)
- Shared-secret admin gate (signed cookie)
- Order notification provider (Resend) + operator contact
- Object storage for catalog images (Supabase Storage, optional)
- Sentry (optional): error visibility in production
"""

from __future__ import annotations

from pathlib import Path

import environ
from corsheaders.defaults import default_headers, default_methods

# -----------------------------------------
# BASE DIRECTORY
# -----------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# -----------------------------------------
# ENV (django-environ)
# -----------------------------------------
env = environ.Env(
    DEBUG=(bool, True),
    SECRET_KEY=(str, ""),
    TIME_ZONE=(str, "UTC"),
    LOG_LEVEL=(str, "INFO"),
    ALLOWED_HOSTS=(list, ["localhost", "127.0.0.1"]),
    CORS_ALLOWED_ORIGINS=(list, ["http://localhost:3000"]),
    CSRF_TRUSTED_ORIGINS=(list, ["http://localhost:3000"]),
    DATABASE_URL=(str, f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
    # Admin gate
    ADMIN_PASSWORD=(str, ""),
    ADMIN_SESSION_COOKIE_NAME=(str, "admin_session"),
    ADMIN_SESSION_MAX_AGE=(int, 60 * 60 * 24),
    # Order notifications
    RESEND_API_KEY=(str, ""),
    ORDER_NOTIFY_FROM=(str, "Rainbow Toys <onboarding@resend.dev>"),
    OPERATOR_EMAIL=(str, ""),
    OPERATOR_PHONE=(str, ""),
    # Object storage (catalog images)
    SUPABASE_URL=(str, ""),
    SUPABASE_SERVICE_ROLE_KEY=(str, ""),
    SUPABASE_STORAGE_BUCKET=(str, "toy-images"),
    # Public catalog read cache
    PUBLIC_CATALOG_CACHE_SECONDS=(int, 60),
    # Throttling
    THROTTLE_ANON_RATE=(str, "120/min"),
    THROTTLE_PUBLIC_CATALOG_RATE=(str, "120/min"),
    THROTTLE_PUBLIC_WRITE_RATE=(str, "10/min"),
    THROTTLE_ADMIN_LOGIN_RATE=(str, "10/min"),
    # Sentry (optional; enable by setting SENTRY_DSN)
    SENTRY_DSN=(str, ""),
    SENTRY_ENVIRONMENT=(str, "development"),
    SENTRY_TRACES_SAMPLE_RATE=(float, 0.0),
    SENTRY_SEND_PII=(bool, False),
)

# -----------------------------------------
# LOAD .env
# -----------------------------------------
env_file_1 = BASE_DIR / ".env"
env_file_2 = BASE_DIR.parent / ".env"

if env_file_1.exists():
    env.read_env(str(env_file_1))
elif env_file_2.exists():
    env.read_env(str(env_file_2))

# -----------------------------------------
# CORE SECURITY
# -----------------------------------------
SECRET_KEY = (env("SECRET_KEY") or "dev-insecure-change-me").strip()
DEBUG = env.bool("DEBUG")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS")

# -----------------------------------------
# I18N / TZ
# -----------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = (env("TIME_ZONE") or "UTC").strip()
USE_I18N = True
USE_TZ = True

# -----------------------------------------
# INSTALLED APPS
# -----------------------------------------
INSTALLED_APPS = [
    "corsheaders",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "catalog.apps.CatalogConfig",
    "orders.apps.OrdersConfig",
    "public.apps.PublicConfig",
    "adminpanel.apps.AdminPanelConfig",
]

# -----------------------------------------
# MIDDLEWARE
# -----------------------------------------
MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "backend.urls"
WSGI_APPLICATION = "backend.wsgi.application"
APPEND_SLASH = True

# -----------------------------------------
# TEMPLATES (notification emails + browsable API)
# -----------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [str(BASE_DIR / "templates")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    }
]

# -----------------------------------------
# REST FRAMEWORK
# -----------------------------------------
# Admin views declare AdminSessionAuthentication + IsAdminSession themselves;
# the defaults below only cover public endpoints.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (),
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.AllowAny",),
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "backend.exceptions.api_exception_handler",
    "DEFAULT_THROTTLE_CLASSES": ("rest_framework.throttling.AnonRateThrottle",),
    "DEFAULT_THROTTLE_RATES": {
        "anon": env("THROTTLE_ANON_RATE"),
        "public_catalog": env("THROTTLE_PUBLIC_CATALOG_RATE"),
        "public_write": env("THROTTLE_PUBLIC_WRITE_RATE"),
        "admin_login": env("THROTTLE_ADMIN_LOGIN_RATE"),
    },
}

# -----------------------------------------
# DATABASE
# -----------------------------------------
DATABASES = {
    "default": env.db("DATABASE_URL"),
}

# -----------------------------------------
# ADMIN GATE (single shared secret)
# -----------------------------------------
ADMIN_PASSWORD = (env("ADMIN_PASSWORD") or "rainbow-dev").strip()
ADMIN_SESSION = {
    "COOKIE_NAME": (env("ADMIN_SESSION_COOKIE_NAME") or "admin_session").strip(),
    "MAX_AGE": env.int("ADMIN_SESSION_MAX_AGE"),
    "COOKIE_SECURE": False,
}

# -----------------------------------------
# ORDER NOTIFICATIONS
# -----------------------------------------
NOTIFICATIONS = {
    "RESEND": {
        "API_KEY": (env("RESEND_API_KEY") or "").strip(),
        "FROM": (env("ORDER_NOTIFY_FROM") or "").strip(),
    }
}

OPERATOR_EMAIL = (env("OPERATOR_EMAIL") or "").strip()
OPERATOR_PHONE = (env("OPERATOR_PHONE") or "").strip()

# -----------------------------------------
# OBJECT STORAGE (catalog images)
# -----------------------------------------
OBJECT_STORAGE = {
    "SUPABASE": {
        "URL": (env("SUPABASE_URL") or "").strip().rstrip("/"),
        "SERVICE_ROLE_KEY": (env("SUPABASE_SERVICE_ROLE_KEY") or "").strip(),
        "BUCKET": (env("SUPABASE_STORAGE_BUCKET") or "toy-images").strip(),
    }
}

MEDIA_URL = "media/"
MEDIA_ROOT = BASE_DIR / "media"

# -----------------------------------------
# PUBLIC CATALOG CACHE
# -----------------------------------------
PUBLIC_CATALOG_CACHE_SECONDS = env.int("PUBLIC_CATALOG_CACHE_SECONDS")

# -----------------------------------------
# LOGGING
# -----------------------------------------
LOG_LEVEL = (env("LOG_LEVEL") or "INFO").strip().upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}

# -----------------------------------------
# SENTRY (optional)
# -----------------------------------------
SENTRY_DSN = (env("SENTRY_DSN") or "").strip()
SENTRY_ENVIRONMENT = (env("SENTRY_ENVIRONMENT") or "development").strip()
SENTRY_TRACES_SAMPLE_RATE = float(env("SENTRY_TRACES_SAMPLE_RATE"))
SENTRY_SEND_PII = env.bool("SENTRY_SEND_PII")

if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=SENTRY_ENVIRONMENT,
        integrations=[DjangoIntegration()],
        traces_sample_rate=SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=SENTRY_SEND_PII,
    )

# -----------------------------------------
# CORS / CSRF
# -----------------------------------------
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS")
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = list(default_methods)
CORS_ALLOW_HEADERS = list(default_headers)

CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS")

# -----------------------------------------
# STATIC FILES
# -----------------------------------------
STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------------------
# SWAGGER
# -----------------------------------------
SPECTACULAR_SETTINGS = {
    "TITLE": "Toyshop Backend API",
    "DESCRIPTION": "Public catalog, order intake and admin panel API",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}
