"""
Feed and relationship queries.

Read-only views over posts and follower edges for an already-resolved
requester. This module makes no authorization decisions; callers only reach it
with a resolved account.

Posts
-----
`list_posts(requester, mode)` supports three feed modes:

- `all`       every post
- `user`      posts authored by the requester
- `following` posts by users the requester follows. The requester is the
              *follower* side of the edge and the post's author is the
              *followed* side; the join runs Post -> author -> inbound edges.

Every mode orders newest first. `-id` is a secondary key so that two calls
with no intervening writes return the same order; callers must not read any
meaning into the tiebreak itself.

Relationships
-------------
`list_relationship(requester, direction)` returns `(user_id, username)` pairs
for the counterpart of each matching edge, in the edge table's scan order.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from accounts.models import User

from .models import Follower, Post

FEED_ORDERING = ("-created_at", "-id")


class FeedMode(str, enum.Enum):
    ALL = "all"
    USER = "user"
    FOLLOWING = "following"

    @classmethod
    def parse(cls, value: Optional[str]) -> "FeedMode":
        """Case-insensitive; anything unrecognised falls back to `ALL`."""
        if not value:
            return cls.ALL
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.ALL


class RelationshipDirection(str, enum.Enum):
    FOLLOWERS = "followers"
    FOLLOWING = "following"

    @classmethod
    def parse(cls, value: Optional[str], default: "RelationshipDirection") -> "RelationshipDirection":
        if not value:
            return default
        try:
            return cls(value.strip().lower())
        except ValueError:
            return default


@dataclass(frozen=True)
class Relationship:
    user_id: UUID
    username: str


def list_posts(requester: User, mode: FeedMode | str = FeedMode.ALL) -> QuerySet:
    """Posts visible in `mode` for `requester`, newest first."""
    if not isinstance(mode, FeedMode):
        mode = FeedMode.parse(mode)

    qs = Post.objects.all()
    if mode is FeedMode.USER:
        qs = qs.filter(user=requester)
    elif mode is FeedMode.FOLLOWING:
        # Unique (user, follower) means at most one matching edge per post: no duplicates.
        qs = qs.filter(user__followers__follower=requester)
    return qs.order_by(*FEED_ORDERING)


def get_post(post_id) -> Optional[Post]:
    """Any authenticated caller may read any single post."""
    try:
        return Post.objects.filter(pk=post_id).first()
    except ValidationError:
        # Not a UUID: nothing can match.
        return None


def list_relationship(requester: User, direction: RelationshipDirection | str) -> List[Relationship]:
    """
    Counterparts of `requester` in `direction`.

    - `following`: edges where requester is the follower; counterpart is the followed user.
    - `followers`: edges where requester is the followed user; counterpart is the follower.
    """
    if not isinstance(direction, RelationshipDirection):
        direction = RelationshipDirection.parse(direction, RelationshipDirection.FOLLOWING)

    if direction is RelationshipDirection.FOLLOWING:
        rows = Follower.objects.filter(follower=requester).values_list("user_id", "user__username")
    else:
        rows = Follower.objects.filter(user=requester).values_list("follower_id", "follower__username")
    return [Relationship(user_id=user_id, username=username) for user_id, username in rows]
