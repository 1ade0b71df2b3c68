# Explicit re-exports for URL wiring:
#   from social.api import PostViewSet, FollowView, ...

from .follows import FollowView, FollowerListView, RelationshipListView
from .posts import PostViewSet

__all__ = [
    "PostViewSet",
    "FollowView",
    "FollowerListView",
    "RelationshipListView",
]
