"""
Project URL configuration.

Surfaces
--------
- `/admin/`  Django admin (back-office only).
- `/health/` unauthenticated readiness probe.
- `/api/`    router-driven ViewSets (`users`, `posts`) plus the follow views.
- `/api/schema`, `/api/docs`, `/api/redoc`  OpenAPI schema & UIs.

Notes
-----
- `/api/followers/` mounts the relationship list again with `followers` as
  the default direction.
"""

from __future__ import annotations

from django.contrib import admin
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

from accounts.views import UserViewSet
from core.views import health
from social.api import FollowView, FollowerListView, PostViewSet, RelationshipListView

# ---------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------
router = DefaultRouter()
router.register(r"users", UserViewSet, basename="user")
router.register(r"posts", PostViewSet, basename="post")

# ---------------------------------------------------------------------
# URL patterns
# ---------------------------------------------------------------------
urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health, name="health"),

    # OpenAPI / Docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    # Follows
    path("api/follows/", RelationshipListView.as_view(), name="follow-list"),
    path("api/follows/<uuid:user_id>/", FollowView.as_view(), name="follow-detail"),
    path("api/followers/", FollowerListView.as_view(), name="follower-list"),

    # Router-driven API
    path("api/", include(router.urls)),
]
