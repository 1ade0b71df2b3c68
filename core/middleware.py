"""
Request guards and the per-request log line.

`RequestSizeLimitMiddleware`
    Answers 413 for POST/PUT/PATCH bodies whose declared `Content-Length`
    exceeds `MAX_REQUEST_BYTES` (64 KiB unless configured). Posts and usernames
    are short text, so anything bigger is refused before DRF parses it.

`RequestIDLogMiddleware`
    Correlates a request with its log lines: honours a safe `X-Request-ID`,
    otherwise mints one, exposes it through `core.logging.request_id_var` and
    echoes it on the response. When the response is ready it writes one record
    to `connectly.request` with method, path, status, account id and latency.
"""

from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response

from .logging import request_id_var

logger = logging.getLogger("connectly.request")

GetResponse = Callable[[HttpRequest], HttpResponse]

REQUEST_ID_HEADER = "X-Request-ID"
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9._\-]{1,200}$")
_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def request_id_from(header_value: str | None) -> str:
    """Client id when it is a safe token; a fresh uuid4 hex otherwise."""
    if header_value and _SAFE_REQUEST_ID.match(header_value):
        return header_value
    return uuid.uuid4().hex


def _declared_length(request: HttpRequest) -> int | None:
    try:
        return int(request.META.get("CONTENT_LENGTH") or "")
    except ValueError:
        return None


def _too_large(limit: int) -> Response:
    # Rendered here: the response never passes through a DRF view.
    response = Response(
        {
            "detail": f"Request entity too large. Max {limit} bytes.",
            "code": "request_too_large",
            "max_bytes": limit,
        },
        status=413,
    )
    response.accepted_renderer = JSONRenderer()
    response.accepted_media_type = "application/json"
    response.renderer_context = {}
    return response.render()


class RequestSizeLimitMiddleware:
    def __init__(self, get_response: GetResponse) -> None:
        self.get_response = get_response
        self.limit = int(getattr(settings, "MAX_REQUEST_BYTES", 65_536))

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if self.limit > 0 and request.method.upper() in _BODY_METHODS:
            length = _declared_length(request)
            if length is not None and length > self.limit:
                return _too_large(self.limit)
        return self.get_response(request)


class RequestIDLogMiddleware:
    """Place last so the logged status is the final one."""

    def __init__(self, get_response: GetResponse) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request_id_from(request.headers.get(REQUEST_ID_HEADER))
        request.request_id = request_id
        reset_token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            response = self.get_response(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            self._log(request, response, started)
            return response
        finally:
            request_id_var.reset(reset_token)

    @staticmethod
    def _log(request: HttpRequest, response: HttpResponse, started: float) -> None:
        # `connectly_user` is memoised by accounts.identity once a view resolves the caller.
        account = getattr(request, "connectly_user", None)
        logger.info(
            "request",
            extra={
                "request_id": request.request_id,
                "method": request.method,
                "path": request.path,
                "status": response.status_code,
                "user_id": str(account.pk) if account is not None else None,
                "duration_ms": int((time.perf_counter() - started) * 1000),
            },
        )
