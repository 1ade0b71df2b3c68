"""
Post endpoints.

- `GET    /api/posts/?type=all|user|following`  paginated feed, newest first
- `GET    /api/posts/{id}/`                      any single post
- `POST   /api/posts/`                           create (`{"content": ...}`) -> 201 `{"id"}`
- `DELETE /api/posts/{id}/`                      author only -> 204

Feed ordering is fixed (newest first), so the generic ordering/search/filter
backends are switched off for this ViewSet.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from accounts.identity import resolve_request
from accounts.views import UUID_REGEX
from core.exceptions import NotFound
from core.schema import ERROR_RESPONSE, NOT_AUTHENTICATED_RESPONSE, VALIDATION_ERROR_RESPONSE
from social import services
from social.feeds import FeedMode, get_post, list_posts
from social.models import Post
from social.serializers import CreatedIdSerializer, NewPostSerializer, PostSerializer

FEED_TYPE_PARAM = OpenApiParameter(
    name="type",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.QUERY,
    required=False,
    enum=[mode.value for mode in FeedMode],
    description="Feed mode (case-insensitive). Unknown values fall back to `all`.",
)


class PostViewSet(viewsets.GenericViewSet):
    """Feed, single-post lookup, create and delete."""
    lookup_value_regex = UUID_REGEX
    queryset = Post.objects.none()
    serializer_class = PostSerializer
    filter_backends: list = []

    def get_queryset(self):
        requester = resolve_request(self.request)
        mode = FeedMode.parse(self.request.query_params.get("type"))
        return list_posts(requester, mode)

    @extend_schema(
        tags=["Posts"],
        operation_id="GetPosts",
        description="Get posts for the selected feed mode, newest first",
        parameters=[FEED_TYPE_PARAM],
        responses={200: PostSerializer(many=True), 401: NOT_AUTHENTICATED_RESPONSE},
    )
    def list(self, request, *args, **kwargs):
        qs = self.get_queryset()
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(PostSerializer(page, many=True).data)
        return Response(PostSerializer(qs, many=True).data)

    @extend_schema(
        tags=["Posts"],
        operation_id="GetPost",
        description="Get a post by id",
        responses={200: PostSerializer, 401: NOT_AUTHENTICATED_RESPONSE, 404: ERROR_RESPONSE},
    )
    def retrieve(self, request, pk=None, *args, **kwargs):
        post = get_post(pk)
        if post is None:
            raise NotFound("Post not found.")
        return Response(PostSerializer(post).data)

    @extend_schema(
        tags=["Posts"],
        operation_id="CreatePost",
        description="Create a new post",
        request=NewPostSerializer,
        responses={201: CreatedIdSerializer, 400: VALIDATION_ERROR_RESPONSE, 401: NOT_AUTHENTICATED_RESPONSE},
    )
    def create(self, request, *args, **kwargs):
        ser = NewPostSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        post = services.create_post(resolve_request(request), ser.validated_data["content"])
        return Response(
            {"id": str(post.id)},
            status=status.HTTP_201_CREATED,
            headers={"Location": f"/api/posts/{post.id}/"},
        )

    @extend_schema(
        tags=["Posts"],
        operation_id="DeletePost",
        description="Delete a post (author only)",
        responses={
            204: OpenApiResponse(description="Deleted"),
            401: NOT_AUTHENTICATED_RESPONSE,
            403: ERROR_RESPONSE,
            404: ERROR_RESPONSE,
        },
    )
    def destroy(self, request, pk=None, *args, **kwargs):
        services.delete_post(resolve_request(request), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
