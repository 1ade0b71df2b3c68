"""
Log-record filters for the structured console format.

`request_id_var` holds the current request's id (set and reset by
`core.middleware.RequestIDLogMiddleware`); outside a request it reads `"-"`.

The format string in settings references `request_id` plus the request-line
fields (`method`, `path`, `status`, `user_id`, `duration_ms`). Only the
request logger supplies those, so the filters below fill whatever a record is
missing. Service, telemetry and management-command logs then share the same
handler without KeyErrors at format time.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

STRUCTURED_FIELDS = ("method", "path", "status", "user_id", "duration_ms")


class RequestIDFilter(logging.Filter):
    """Stamp `record.request_id` from the contextvar unless the caller set it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = getattr(record, "request_id", None) or request_id_var.get()
        return True


class DefaultFieldsFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        for key in STRUCTURED_FIELDS:
            if getattr(record, key, None) is None:
                setattr(record, key, "-")
        return True
