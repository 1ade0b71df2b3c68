"""
Follow and post mutations.

Every handler receives an already-resolved requester (the authorization policy
rejects callers without an account before a handler runs), validates its
invariants, and writes inside a single transaction. Rejections are raised as
`core.exceptions` errors and leave no partial write.

Check order matters and is part of the contract:

- follow:      target exists -> not self -> edge not present
- unfollow:    target exists -> edge present
- create_post: non-empty -> printable ASCII
- delete_post: post exists -> requester is the author (NotFound before Forbidden)

Uniqueness races on follow are settled by the (user, follower) constraint;
the loser gets a `Conflict`, never a 500 and never a retry.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from accounts.models import User
from core.exceptions import Conflict, Forbidden, NotFound, ValidationFailed
from core.telemetry import record_event, record_metric
from core.text import is_printable_ascii

from .feeds import get_post
from .models import Follower, Post

logger = logging.getLogger(__name__)


def _get_user_or_404(user_id) -> User:
    user = User.objects.filter(pk=user_id).first()
    if user is None:
        raise NotFound("User not found.")
    return user


@transaction.atomic
def follow(requester: User, target_id) -> Follower:
    """Make `requester` follow the user `target_id`; returns the new edge."""
    target = _get_user_or_404(target_id)
    if target.pk == requester.pk:
        raise ValidationFailed("You cannot follow yourself.")
    if Follower.objects.filter(user=target, follower=requester).exists():
        raise Conflict("Already following this user.")

    try:
        with transaction.atomic():
            edge = Follower.objects.create(user=target, follower=requester)
    except IntegrityError as exc:
        logger.info("Concurrent follow lost for follower=%s user=%s: %s", requester.pk, target.pk, exc)
        raise Conflict("Already following this user.") from exc

    logger.info("User %s followed %s", requester.pk, target.pk)
    return edge


@transaction.atomic
def unfollow(requester: User, target_id) -> None:
    """Remove the edge `requester` -> `target_id`."""
    target = _get_user_or_404(target_id)
    deleted, _ = Follower.objects.filter(user=target, follower=requester).delete()
    if not deleted:
        raise ValidationFailed("You are not following this user.")
    logger.info("User %s unfollowed %s", requester.pk, target.pk)


@transaction.atomic
def create_post(requester: User, content: str) -> Post:
    """Create a post stamped with the server's current time."""
    if not content:
        raise ValidationFailed("Post content must not be empty.")
    if not is_printable_ascii(content):
        record_event("CreatePostInvalidCharacters", UserId=str(requester.pk), Content=content)
        record_metric("CreatePostInvalidCharacters")
        raise ValidationFailed("Post content may only contain printable ASCII characters.")

    post = Post.objects.create(user=requester, content=content)
    record_metric("CreatePost")
    return post


@transaction.atomic
def delete_post(requester: User, post_id) -> None:
    """Delete a post; only its author may do so."""
    post = get_post(post_id)
    if post is None:
        raise NotFound("Post not found.")
    if post.user_id != requester.pk:
        raise Forbidden("Only the author may delete this post.")

    post.delete()
    record_metric("DeletePost")
