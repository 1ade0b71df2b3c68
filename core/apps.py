"""AppConfig for the `core` app.

Scope
-----
Holds shared infrastructure pieces used across the project:
- middleware (observability and size limits),
- logging helpers (request-id) and telemetry events,
- bearer-token authentication, the authorization policy and throttles,
- the DRF exception handler and printable-text validation.

Startup
-------
- `core.schema` registers the drf-spectacular extension that documents the
  bearer scheme. It is optional: in DEBUG import errors surface, otherwise they
  are logged and skipped.
"""

from __future__ import annotations

import logging
from importlib import import_module

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Standard Django AppConfig; keep defaults lightweight."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:  # pragma: no cover
        self._import_optional("core.schema")

    @staticmethod
    def _import_optional(dotted_path: str) -> None:
        """Import a startup module; failures re-raise in DEBUG and are logged otherwise."""
        try:
            import_module(dotted_path)
        except ImportError:
            if settings.DEBUG:
                raise
            logger.warning("Optional startup module failed to import and was skipped: %s", dotted_path)
