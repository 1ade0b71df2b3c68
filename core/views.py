"""`/health/`: unauthenticated readiness probe for load balancers."""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)


def health(request):
    """200 `{"db": "ok"}` while the database answers, 503 `{"db": "down"}` otherwise."""
    body = {"app": "connectly", "time": timezone.now().isoformat()}
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        logger.warning("Health check failed: %s", exc)
        return JsonResponse({**body, "db": "down", "error": str(exc)}, status=503)
    return JsonResponse({**body, "db": "ok"})
