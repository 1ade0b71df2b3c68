"""
Custom telemetry events and counters.

Events and metrics are emitted as structured log lines on the
`connectly.telemetry` logger (names prefixed with `Custom/`), so any log
shipper can forward them to a metrics collector. Nothing in the request path
depends on them; a failing handler never breaks a request because logging
swallows handler errors itself.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger("connectly.telemetry")

PREFIX = "Custom/"


def _name(name: str) -> str:
    return name if name.startswith(PREFIX) else f"{PREFIX}{name}"


def record_event(name: str, **attributes: Any) -> None:
    """Emit a custom event, e.g. `record_event("CreatePostInvalidCharacters", UserId=...)`."""
    rendered = " ".join(f"{key}={value!r}" for key, value in sorted(attributes.items()))
    logger.info("event name=%s %s", _name(name), rendered, extra={"telemetry": "event"})


def record_metric(name: str, value: float = 1) -> None:
    """Emit a custom counter increment."""
    logger.info("metric name=%s value=%s", _name(name), value, extra={"telemetry": "metric"})
