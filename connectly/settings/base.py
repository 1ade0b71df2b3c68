"""
Base Django settings for Connectly.

Layout
------
- Split settings: `base.py` (shared), `dev.py` (developer overrides), `prod.py`
  (hardened), `test.py` (test runner).
- `environ` is used to source configuration; a local `.env` is optional.

API stack
---------
- Django 5.x + DRF + django-filter + drf-spectacular.
- Authentication: bearer JWTs from the external identity provider, verified
  with PyJWT (`core.authentication.ExternalJWTAuthentication`). No sessions or
  CSRF on the API: it carries no cookies.
- Authorization: `core.permissions.ConnectlyPolicyPermission` evaluates each
  view's `AuthorizationPolicy`.
- Throttling: `core.throttling.SubjectRateThrottle`, partitioned by token
  subject (or host for anonymous calls), scope `connectly` (30/min default).

Observability
-------------
- `core.middleware.RequestIDLogMiddleware` logs a single structured line per
  request. Custom telemetry events go to the `connectly.telemetry` logger.
"""

from pathlib import Path

import environ

# ---------------------------------------------------------------------
# Paths & Env
# ---------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env = environ.Env(DEBUG=(bool, False))
env_file = BASE_DIR / ".env"
if env_file.exists():
    environ.Env.read_env(str(env_file))

# ---------------------------------------------------------------------
# Core
# ---------------------------------------------------------------------
SECRET_KEY = env("SECRET_KEY", default="dev-insecure-change-me")
DEBUG = env.bool("DEBUG", False)

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost"])
CSRF_TRUSTED_ORIGINS = env.list(
    "CSRF_TRUSTED_ORIGINS",
    default=["http://127.0.0.1:8000", "http://localhost:8000"],
)

# ---------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------
INSTALLED_APPS = [
    # Django apps (admin is back-office only)
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Third-party
    "rest_framework",
    "django_filters",
    "drf_spectacular",

    # Local apps
    "accounts",
    "core",
    "social",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    # Reject large requests before parsing
    "core.middleware.RequestSizeLimitMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Observability: request-id + structured request log (one line per request)
    "core.middleware.RequestIDLogMiddleware",
]

ROOT_URLCONF = "connectly.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "connectly.wsgi.application"

# ---------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------
# `CONNECTLY_DB_CONNECTION_STRING` is honoured as an alias for deployments that
# predate `DATABASE_URL`.
DATABASES = {
    "default": env.db(
        "DATABASE_URL",
        default=env(
            "CONNECTLY_DB_CONNECTION_STRING",
            default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        ),
    )
}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("CONN_MAX_AGE", default=0)

# ---------------------------------------------------------------------
# Internationalization
# ---------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ---------------------------------------------------------------------
# Static
# ---------------------------------------------------------------------
STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ---------------------------------------------------------------------
# Identity provider (JWT bearer tokens)
# ---------------------------------------------------------------------
# Either a JWKS URL (asymmetric, production) or a shared secret (dev/tests).
CONNECTLY_JWT_ISSUER = env("CONNECTLY_JWT_ISSUER", default="")
CONNECTLY_JWT_AUDIENCE = env("CONNECTLY_JWT_AUDIENCE", default="")
CONNECTLY_JWT_JWKS_URL = env("CONNECTLY_JWT_JWKS_URL", default="")
CONNECTLY_JWT_SECRET = env("CONNECTLY_JWT_SECRET", default="")
CONNECTLY_JWT_ALGORITHMS = env.list(
    "CONNECTLY_JWT_ALGORITHMS",
    default=["HS256"] if CONNECTLY_JWT_SECRET and not CONNECTLY_JWT_JWKS_URL else ["RS256"],
)
CONNECTLY_JWT_LEEWAY_SECONDS = env.int("CONNECTLY_JWT_LEEWAY_SECONDS", default=0)

# ---------------------------------------------------------------------
# DRF & API Schema
# ---------------------------------------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "core.authentication.ExternalJWTAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "core.permissions.ConnectlyPolicyPermission",
    ],
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
        "rest_framework.filters.OrderingFilter",
        "rest_framework.filters.SearchFilter",
    ],
    "DEFAULT_PAGINATION_CLASS": "rest_framework.pagination.PageNumberPagination",
    "PAGE_SIZE": env.int("PAGE_SIZE", default=25),
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "core.handlers.connectly_exception_handler",
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_THROTTLE_CLASSES": [
        "core.throttling.SubjectRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "connectly": env("DRF_THROTTLE_RATE_CONNECTLY", default="30/min"),
    },
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Connectly API",
    "DESCRIPTION": "Users, follows and post feeds behind an external identity provider.",
    "VERSION": "Alpha",
    "SERVERS": [
        {"url": "http://127.0.0.1:8000", "description": "Local Dev"},
        {"url": "/", "description": "Current"},
    ],
    "SWAGGER_UI_SETTINGS": {"persistAuthorization": True},
    "SERVE_AUTHENTICATION": [],
}

# --- Size/Limits ---------------------------------------------------------------
# Max body size for unsafe methods (bytes)
MAX_REQUEST_BYTES = env.int("MAX_REQUEST_BYTES", default=65_536)

# ---------------------------------------------------------------------
# Security defaults (safe baseline; prod hardening in prod.py)
# ---------------------------------------------------------------------
SESSION_COOKIE_SAMESITE = "Lax"
CSRF_COOKIE_SAMESITE = "Lax"
X_FRAME_OPTIONS = "DENY"

# ---------------------------------------------------------------------
# Logging (observability)
# ---------------------------------------------------------------------
# Structured console lines. The filters inject `request_id` and backfill the
# request-line fields so service/telemetry loggers can share the handler.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "request_id": {"()": "core.logging.RequestIDFilter"},
        "default_fields": {"()": "core.logging.DefaultFieldsFilter"},
    },
    "formatters": {
        "structured": {
            "format": "level=%(levelname)s logger=%(name)s request_id=%(request_id)s "
                      "method=%(method)s path=%(path)s status=%(status)s user_id=%(user_id)s duration_ms=%(duration_ms)s "
                      "message=%(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "filters": ["request_id", "default_fields"],
            "formatter": "structured",
        },
    },
    "loggers": {
        "connectly.request": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "connectly.telemetry": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "accounts": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "social": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "core": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
}
