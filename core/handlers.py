"""
Project-wide DRF exception handler (`REST_FRAMEWORK["EXCEPTION_HANDLER"]`).

Kept apart from `core.exceptions` because it needs `rest_framework.views`,
which must not be imported by anything DRF loads from its own settings.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError
from django.http import Http404
from rest_framework.views import exception_handler as drf_exception_handler

from core.exceptions import Conflict, NotFound

logger = logging.getLogger(__name__)


def _error_code(exc: Exception, default: str) -> str:
    get_codes = getattr(exc, "get_codes", None)
    if callable(get_codes):
        codes = get_codes()
        if isinstance(codes, str):
            return codes
    return default


def connectly_exception_handler(exc, context):
    """
    Wrap DRF's handler so every error carries a `code`.

    - `IntegrityError` escaping a service is a lost uniqueness race: answer 400
      `conflict` instead of a 500.
    - Field-level serializer errors keep DRF's dict shape under `errors`.
    """
    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error surfaced as conflict: %s", exc)
        exc = Conflict()
    elif isinstance(exc, Http404):
        exc = NotFound()

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and "detail" in data:
        data.setdefault("code", _error_code(exc, "error"))
    else:
        response.data = {
            "detail": "Invalid input.",
            "code": "invalid",
            "errors": data,
        }
    return response
