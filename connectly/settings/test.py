"""
Test-runner settings (extends base).

- In-memory SQLite and a local-memory cache (throttle counters reset per test
  via `cache.clear()`).
- Tokens are HS256-signed with a fixed secret; see `core.tests.helpers`.
- Throttling is effectively disabled by a high default rate; throttle tests
  swap in a burst throttle explicitly.
"""

from .base import *  # noqa

DEBUG = False
SECRET_KEY = "connectly-test-secret-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "connectly-tests",
    }
}

CONNECTLY_JWT_ISSUER = "https://id.connectly.test/"
CONNECTLY_JWT_AUDIENCE = "connectly-api"
CONNECTLY_JWT_JWKS_URL = ""
CONNECTLY_JWT_SECRET = "connectly-test-jwt-secret-0123456789abcdef"
CONNECTLY_JWT_ALGORITHMS = ["HS256"]
CONNECTLY_JWT_LEEWAY_SECONDS = 0

REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    "DEFAULT_THROTTLE_RATES": {"connectly": "10000/min"},
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
