"""
Follow relationship endpoints.

- `GET    /api/follows/?direction=following|followers`  counterpart list (default: following)
- `POST   /api/follows/{userId}/`                       follow -> 201 `{"id"}`
- `DELETE /api/follows/{userId}/`                       unfollow -> 204

`GET /api/followers/` mounts the list view with `followers` as the default
direction; older clients use that path.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.identity import resolve_request
from core.schema import ERROR_RESPONSE, NOT_AUTHENTICATED_RESPONSE, VALIDATION_ERROR_RESPONSE
from social import services
from social.feeds import RelationshipDirection, list_relationship
from social.serializers import CreatedIdSerializer, RelationshipSerializer

DIRECTION_PARAM = OpenApiParameter(
    name="direction",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.QUERY,
    required=False,
    enum=[d.value for d in RelationshipDirection],
    description="`following` (users I follow) or `followers` (users following me).",
)


class RelationshipListView(APIView):
    """List the caller's followings or followers as `{user_id, username}` pairs."""
    default_direction = RelationshipDirection.FOLLOWING

    @extend_schema(
        tags=["Follows"],
        operation_id="GetFollowing",
        description="Gets the current user's followings (or followers with ?direction=followers)",
        parameters=[DIRECTION_PARAM],
        responses={200: RelationshipSerializer(many=True), 401: NOT_AUTHENTICATED_RESPONSE},
    )
    def get(self, request, *args, **kwargs):
        direction = RelationshipDirection.parse(
            request.query_params.get("direction"), self.default_direction
        )
        rows = list_relationship(resolve_request(request), direction)
        return Response(RelationshipSerializer(rows, many=True).data)


class FollowerListView(RelationshipListView):
    default_direction = RelationshipDirection.FOLLOWERS

    @extend_schema(
        tags=["Follows"],
        operation_id="GetFollowers",
        description="Gets the current user's followers (or followings with ?direction=following)",
        parameters=[DIRECTION_PARAM],
        responses={200: RelationshipSerializer(many=True), 401: NOT_AUTHENTICATED_RESPONSE},
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class FollowView(APIView):
    """Follow or unfollow the user in the path."""

    @extend_schema(
        tags=["Follows"],
        operation_id="FollowUser",
        description="Follows a user",
        request=None,
        responses={
            201: CreatedIdSerializer,
            400: VALIDATION_ERROR_RESPONSE,
            401: NOT_AUTHENTICATED_RESPONSE,
            404: ERROR_RESPONSE,
        },
    )
    def post(self, request, user_id, *args, **kwargs):
        edge = services.follow(resolve_request(request), user_id)
        return Response({"id": str(edge.id)}, status=status.HTTP_201_CREATED)

    @extend_schema(
        tags=["Follows"],
        operation_id="UnfollowUser",
        description="Unfollows a user",
        responses={
            204: OpenApiResponse(description="Unfollowed"),
            400: VALIDATION_ERROR_RESPONSE,
            401: NOT_AUTHENTICATED_RESPONSE,
            404: ERROR_RESPONSE,
        },
    )
    def delete(self, request, user_id, *args, **kwargs):
        services.unfollow(resolve_request(request), user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
