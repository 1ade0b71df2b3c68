"""
Bearer-token authentication against the external identity provider.

Tokens are JWTs issued by an OAuth2 provider. They are verified locally with
PyJWT in one of two modes:

1. JWKS mode (`CONNECTLY_JWT_JWKS_URL` set): the signing key is looked up by
   `kid` from the provider's key set (`RS256` by default).
2. Shared-secret mode (`CONNECTLY_JWT_SECRET` set): HMAC algorithms. Used for
   local development and the test suite.

Signature, expiry, issuer and audience are verified and `sub` is required.
A verified token yields an `ExternalPrincipal`; mapping it to a Connectly
account is the identity resolver's job, not this module's.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import jwt
from django.conf import settings
from rest_framework import authentication, exceptions

logger = logging.getLogger(__name__)

KEYWORD = "Bearer"


class ExternalPrincipal:
    """
    Verified caller identity as asserted by the identity provider.

    This is not a Django user: it only carries the subject claim and the raw
    claims. DRF treats it as authenticated.
    """

    is_authenticated = True
    is_anonymous = False

    def __init__(self, subject: str, claims: dict[str, Any] | None = None):
        self.subject = subject
        self.claims = claims or {}

    def __str__(self):
        return f"ExternalPrincipal(subject={self.subject})"


@lru_cache(maxsize=4)
def _jwks_client(url: str) -> jwt.PyJWKClient:
    return jwt.PyJWKClient(url, cache_keys=True)


def decode_token(token: str) -> dict[str, Any]:
    """
    Verify `token` and return its claims.

    Raises:
        jwt.PyJWTError: when the token is invalid for any reason.
        exceptions.AuthenticationFailed: when no verification key is configured.
    """
    jwks_url = getattr(settings, "CONNECTLY_JWT_JWKS_URL", "")
    secret = getattr(settings, "CONNECTLY_JWT_SECRET", "")
    algorithms = list(getattr(settings, "CONNECTLY_JWT_ALGORITHMS", ["RS256"]))

    if jwks_url:
        key: Any = _jwks_client(jwks_url).get_signing_key_from_jwt(token).key
    elif secret:
        key = secret
    else:
        logger.error("No JWT verification key configured (set CONNECTLY_JWT_JWKS_URL or CONNECTLY_JWT_SECRET)")
        raise exceptions.AuthenticationFailed("Token validation is not configured.")

    audience = getattr(settings, "CONNECTLY_JWT_AUDIENCE", "") or None
    issuer = getattr(settings, "CONNECTLY_JWT_ISSUER", "") or None
    return jwt.decode(
        token,
        key,
        algorithms=algorithms,
        audience=audience,
        issuer=issuer,
        leeway=int(getattr(settings, "CONNECTLY_JWT_LEEWAY_SECONDS", 0)),
        options={
            "require": ["exp", "sub"],
            "verify_aud": audience is not None,
            "verify_iss": issuer is not None,
        },
    )


class ExternalJWTAuthentication(authentication.BaseAuthentication):
    """
    `Authorization: Bearer <jwt>` authentication.

    Returns:
        None when no Authorization header is present (DRF then answers 401 for
        protected views), or `(ExternalPrincipal, token)` on success.

    Raises:
        AuthenticationFailed: malformed header or invalid token.
    """

    def authenticate(self, request):
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != KEYWORD.lower():
            raise exceptions.AuthenticationFailed("Invalid authorization header format.")

        token = parts[1]
        try:
            claims = decode_token(token)
        except jwt.ExpiredSignatureError as exc:
            raise exceptions.AuthenticationFailed("Token has expired.") from exc
        except jwt.PyJWTError as exc:
            logger.info("Rejected bearer token: %s", exc)
            raise exceptions.AuthenticationFailed("Invalid token.") from exc

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise exceptions.AuthenticationFailed("Token has no subject.")

        return ExternalPrincipal(subject, claims), token

    def authenticate_header(self, request):
        return KEYWORD
