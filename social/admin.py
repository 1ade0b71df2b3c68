"""
Django admin registrations for the social models.

Back-office only: staff can browse edges and posts for troubleshooting.
Post content and timestamps are read-only here; posts have no update path.
"""

from __future__ import annotations

from django.contrib import admin

from .models import Follower, Post


@admin.register(Follower)
class FollowerAdmin(admin.ModelAdmin):
    """Edges read as "user is followed by follower"."""
    list_display = ("id", "user", "follower")
    search_fields = ("user__username", "follower__username")
    list_select_related = ("user", "follower")


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "created_at")
    search_fields = ("content", "user__username")
    readonly_fields = ("id", "user", "content", "created_at")
    date_hierarchy = "created_at"
    list_select_related = ("user",)
