"""
Identity resolver: verified external subject -> Connectly account.

"No account" is not an error here. `resolve()` returns None and callers decide
what that means (the authorization policy turns it into 401
`account_required`). An invalid token never reaches this module; it is rejected
during authentication.
"""

from __future__ import annotations

from typing import Optional

from .models import User

_CACHE_ATTR = "connectly_user"
_MISSING = object()


def resolve(external_subject: Optional[str]) -> Optional[User]:
    """Return the User whose external id equals `external_subject`, or None."""
    if not external_subject:
        return None
    return User.objects.filter(external_id=external_subject).first()


def external_subject(request) -> Optional[str]:
    """The verified subject of the request's principal, if any."""
    principal = getattr(request, "user", None)
    if principal is None or not getattr(principal, "is_authenticated", False):
        return None
    return getattr(principal, "subject", None)


def resolve_request(request) -> Optional[User]:
    """
    Resolve the request's principal to an account, once per request.

    The result is stored on the underlying Django request so later callers
    (views, the request-log middleware) reuse it.
    """
    django_request = getattr(request, "_request", request)
    cached = getattr(django_request, _CACHE_ATTR, _MISSING)
    if cached is not _MISSING:
        return cached
    user = resolve(external_subject(request))
    setattr(django_request, _CACHE_ATTR, user)
    return user
