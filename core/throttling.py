"""
Rate limiting for the API.

`SubjectRateThrottle` keys its window on the verified identity-provider subject
so one account's traffic cannot exhaust another's budget; anonymous callers
fall back to the client address. The rate comes from the `connectly` scope in
`REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"]` (default 30/min).

`UserBurstThrottle` is a low-rate variant used by tests to trigger 429s quickly.
"""

from rest_framework.throttling import SimpleRateThrottle

from core.telemetry import record_event, record_metric


class SubjectRateThrottle(SimpleRateThrottle):
    """Per-subject (or per-host) throttle that records rejections."""
    scope = "connectly"

    def get_cache_key(self, request, view):
        subject = getattr(getattr(request, "user", None), "subject", None)
        ident = subject or self.get_ident(request)
        self.ident = ident
        return self.cache_format % {"scope": self.scope, "ident": ident}

    def throttle_failure(self):
        record_event("RateLimiterMaxedOut", ExternalId=getattr(self, "ident", ""))
        record_metric("RateLimiterMaxedOut")
        return super().throttle_failure()


class UserBurstThrottle(SubjectRateThrottle):
    """
    Low-rate throttle for tests to quickly trigger 429s.

    Rate:
        "3/min" per subject.
    """
    rate = "3/min"
