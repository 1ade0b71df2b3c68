"""
Observability tests: request id header, structured request log and telemetry.

What these tests verify
-----------------------
- Every response includes an `X-Request-ID` header; a safe client-provided id
  is echoed, an unsafe one is replaced by a UUID hex.
- The middleware logs one line per request to `connectly.request` carrying the
  resolved account id once the caller has one.
- Domain events (invalid characters, created posts) reach `connectly.telemetry`
  with the `Custom/` prefix.

Notes
-----
We use `self.assertLogs(...)` to capture the dedicated channels, making the
tests independent of the global LOGGING configuration.
"""

from __future__ import annotations

from rest_framework.test import APITestCase

from core.telemetry import record_event, record_metric
from core.tests.helpers import client_for, make_user


class RequestLogMiddlewareTests(APITestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.client = client_for("auth0|alice")

    def test_response_includes_request_id_and_logs_once(self):
        with self.assertLogs("connectly.request", level="INFO") as cap:
            r = self.client.get("/api/posts/")
        self.assertEqual(r.status_code, 200, r.content)
        self.assertRegex(r.headers.get("X-Request-ID"), r"^[A-Za-z0-9._\-]{1,200}$")

        self.assertEqual(len(cap.records), 1)
        record = cap.records[0]
        self.assertEqual(record.method, "GET")
        self.assertEqual(record.path, "/api/posts/")
        self.assertEqual(record.status, 200)
        self.assertEqual(record.user_id, str(self.alice.id))

    def test_client_provided_request_id_is_respected(self):
        r = self.client.get("/api/posts/", HTTP_X_REQUEST_ID="custom-123_OK")
        self.assertEqual(r.headers.get("X-Request-ID"), "custom-123_OK")

    def test_bad_client_request_id_is_replaced(self):
        r = self.client.get("/api/posts/", HTTP_X_REQUEST_ID="BAD ID")
        self.assertNotEqual(r.headers.get("X-Request-ID"), "BAD ID")
        self.assertRegex(r.headers.get("X-Request-ID") or "", r"^[a-f0-9]{32}$")

    def test_unauthenticated_request_is_logged_without_user(self):
        self.client.credentials()
        with self.assertLogs("connectly.request", level="INFO") as cap:
            r = self.client.get("/api/posts/")
        self.assertEqual(r.status_code, 401)
        self.assertEqual(cap.records[0].status, 401)
        self.assertIsNone(cap.records[0].user_id)


class TelemetryTests(APITestCase):
    def setUp(self):
        make_user("alice")
        self.client = client_for("auth0|alice")

    def test_record_helpers_prefix_names(self):
        with self.assertLogs("connectly.telemetry", level="INFO") as cap:
            record_event("Something", UserId="u1")
            record_metric("Custom/Counter", 2)
        self.assertIn("name=Custom/Something", cap.output[0])
        self.assertIn("UserId='u1'", cap.output[0])
        self.assertIn("name=Custom/Counter value=2", cap.output[1])

    def test_invalid_post_characters_emit_event_and_metric(self):
        with self.assertLogs("connectly.telemetry", level="INFO") as cap:
            r = self.client.post("/api/posts/", {"content": "café"}, format="json")
        self.assertEqual(r.status_code, 400)
        joined = "\n".join(cap.output)
        self.assertIn("event name=Custom/CreatePostInvalidCharacters", joined)
        self.assertIn("metric name=Custom/CreatePostInvalidCharacters", joined)

    def test_created_post_emits_metric(self):
        with self.assertLogs("connectly.telemetry", level="INFO") as cap:
            r = self.client.post("/api/posts/", {"content": "hello"}, format="json")
        self.assertEqual(r.status_code, 201)
        self.assertTrue(any("name=Custom/CreatePost " in line for line in cap.output))
