"""
Authorization policy used across the API.

The project has exactly two authorization outcomes, modelled as an enum and
evaluated by a single permission class:

- `AuthorizationPolicy.REQUIRE_ACCOUNT` (default): the verified principal must
  resolve to a Connectly `User`. Otherwise the request is rejected with 401
  `account_required`.
- `AuthorizationPolicy.ALLOW_ANY_PRINCIPAL`: any verified token passes. Used by
  registration, where the account does not exist yet.

Usage
-----
    class RegisterView(APIView):
        authorization_policy = AuthorizationPolicy.ALLOW_ANY_PRINCIPAL

Views read the resolved account through `accounts.identity.resolve_request`,
which memoises the lookup done here.
"""

from __future__ import annotations

import enum

from rest_framework.permissions import BasePermission

from accounts.identity import resolve_request
from core.exceptions import AccountRequired, Unauthenticated


class AuthorizationPolicy(enum.Enum):
    REQUIRE_ACCOUNT = "require_account"
    ALLOW_ANY_PRINCIPAL = "allow_any_principal"


def policy_for(view) -> AuthorizationPolicy:
    """Per-action policy via `get_authorization_policy()`, else the class attribute."""
    getter = getattr(view, "get_authorization_policy", None)
    if callable(getter):
        return getter()
    return getattr(view, "authorization_policy", AuthorizationPolicy.REQUIRE_ACCOUNT)


class ConnectlyPolicyPermission(BasePermission):
    """
    Evaluate the view's `authorization_policy`.

    No verified principal is always a 401 (DRF's `NotAuthenticated` path is
    bypassed so the error code is stable). Identity resolution happens at most
    once per request.
    """

    def has_permission(self, request, view) -> bool:
        principal = getattr(request, "user", None)
        if principal is None or not getattr(principal, "is_authenticated", False):
            raise Unauthenticated()

        policy = policy_for(view)
        if policy is AuthorizationPolicy.ALLOW_ANY_PRINCIPAL:
            return True

        if resolve_request(request) is None:
            raise AccountRequired()
        return True
