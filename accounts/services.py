"""
Account mutations.

`register_user` is the only write path for accounts. Checks run in a fixed
order inside one transaction:

1. username and the caller's external id are printable ASCII,
2. username is not taken,
3. the caller's external id has no account yet (registration is not
   idempotent; a second attempt fails).

The read-then-insert checks are best effort; the unique constraints on
`username` and `external_id` settle concurrent registrations, and the loser
gets a `Conflict`.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from core.exceptions import Conflict, ValidationFailed
from core.telemetry import record_event, record_metric
from core.text import is_printable_ascii

from .models import User

logger = logging.getLogger(__name__)


def _reject_characters(external_id: str, username: str, message: str) -> None:
    record_event("CreateUserInvalidCharacters", ExternalId=external_id or "", Username=username)
    record_metric("CreateUserInvalidCharacters")
    raise ValidationFailed(message)


def register_user(*, external_id: str, username: str) -> User:
    """
    Create the account for `external_id` with the given `username`.

    Raises:
        ValidationFailed: non-printable username, or an empty or non-printable
            external id.
        Conflict: username or external id already registered (including a
            concurrent registration that won the race).
    """
    if not is_printable_ascii(username):
        _reject_characters(external_id, username, "Username may only contain printable ASCII characters.")
    if not external_id or not is_printable_ascii(external_id):
        _reject_characters(external_id, username, "Identity subject must be non-empty printable ASCII.")

    try:
        with transaction.atomic():
            if User.objects.filter(username=username).exists():
                raise Conflict("Username is already taken.")
            if User.objects.filter(external_id=external_id).exists():
                raise Conflict("An account already exists for this identity.")
            user = User.objects.create(username=username, external_id=external_id)
    except IntegrityError as exc:
        logger.info("Concurrent registration lost for username=%s: %s", username, exc)
        raise Conflict("Username or identity is already registered.") from exc

    record_metric("CreateUser")
    logger.info("Registered user id=%s username=%s", user.id, user.username)
    return user
