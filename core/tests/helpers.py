"""
Shared helpers for API tests.

Tokens are HS256-signed with the test settings' shared secret, so they pass the
same verification path as identity-provider tokens (issuer, audience, expiry,
subject).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings
from rest_framework.test import APIClient

from accounts.models import User


def mint_token(subject: str | None = "auth0|alice", *, expires_in: int = 300, **overrides) -> str:
    """Encode a token for `subject`; `overrides` replace or add claims (None removes)."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": subject,
        "iss": settings.CONNECTLY_JWT_ISSUER,
        "aud": settings.CONNECTLY_JWT_AUDIENCE,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    claims.update(overrides)
    claims = {key: value for key, value in claims.items() if value is not None}
    return jwt.encode(claims, settings.CONNECTLY_JWT_SECRET, algorithm="HS256")


def client_for(subject: str, **claims) -> APIClient:
    """APIClient that sends `Authorization: Bearer <token for subject>`."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {mint_token(subject, **claims)}")
    return client


def make_user(username: str, external_id: str | None = None) -> User:
    return User.objects.create(username=username, external_id=external_id or f"auth0|{username}")
