"""
Social graph and content models.

Follower
--------
A directed edge: `user` is followed by `follower`. The pair is unique and a
user cannot follow themself; both rules are enforced by database constraints
so that concurrent writers cannot slip a duplicate in.

Post
----
Short text authored by a user. `created_at` is stamped by the server at
creation and never edited; feeds order on it, newest first.
"""

import uuid

from django.db import models
from django.db.models import F, Q
from django.utils import timezone

from accounts.models import User


class Follower(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="followers",   # user.followers -> edges pointing at this user (inbound)
        db_column="user_id",
    )
    follower = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="following",   # user.following -> edges this user created (outbound)
        db_column="follower_id",
    )

    class Meta:
        db_table = "followers"
        constraints = [
            models.UniqueConstraint(fields=["user", "follower"], name="uniq_followers_user_follower"),
            models.CheckConstraint(condition=~Q(user=F("follower")), name="chk_followers_not_self"),
        ]
        indexes = [
            models.Index(fields=["follower"], name="followers_follower_idx"),
            models.Index(fields=["user"], name="followers_user_idx"),
        ]

    def __str__(self) -> str:
        return f"Follower(user={self.user_id}, follower={self.follower_id})"


class Post(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="posts",
        db_column="user_id",
    )
    content = models.TextField()
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = "posts"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(condition=~Q(content=""), name="chk_posts_content_not_empty"),
        ]
        indexes = [
            models.Index(fields=["-created_at"], name="posts_created_at_idx"),
            models.Index(fields=["user", "-created_at"], name="posts_user_created_at_idx"),
        ]

    def __str__(self) -> str:
        return f"Post {self.id} by {self.user_id}"
