"""
Domain errors raised by services and views.

Taxonomy
--------
- `ValidationFailed` (400): malformed or constraint-violating input. Nothing is
  written when it is raised.
  * `Conflict` (400): a uniqueness rule lost, either to a prior row or to a
    concurrent writer caught by the store's unique constraint.
- `NotFound` (404): a referenced id does not exist.
- `Unauthenticated` (401): no verified principal.
  * `AccountRequired` (401): verified principal, but no Connectly account.
- `Forbidden` (403): authenticated but not entitled (e.g., deleting another
  user's post). Handlers check existence first, so NotFound wins over Forbidden.

Every error body has the shape `{"detail": str, "code": str}`; the DRF handler
that guarantees it lives in `core.handlers`. This module must not import
`rest_framework.views`: the permission and authentication classes depend on
it and DRF loads those while `rest_framework.views` is still initialising.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated


class ValidationFailed(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input."
    default_code = "invalid"


class Conflict(ValidationFailed):
    default_detail = "Resource already exists."
    default_code = "conflict"


class NotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class Unauthenticated(NotAuthenticated):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication credentials were not provided."
    default_code = "not_authenticated"


class AccountRequired(Unauthenticated):
    default_detail = "User must have an account and be logged in."
    default_code = "account_required"


class Forbidden(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action."
    default_code = "forbidden"
