"""
User endpoints.

Routes (registered on the API router as `users`)
------------------------------------------------
- `GET  /api/users/`          paginated public projections, `?username=` filter
- `POST /api/users/`          register the caller's identity (any verified token)
- `GET  /api/users/{id}/`     single public projection
- `GET  /api/users/profile/`  the caller's own projection

Everything except registration requires a resolvable account.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from core.permissions import AuthorizationPolicy
from core.schema import ERROR_RESPONSE, NOT_AUTHENTICATED_RESPONSE, VALIDATION_ERROR_RESPONSE

from .identity import external_subject, resolve_request
from .models import User
from .serializers import RegisterUserSerializer, UserPublicSerializer
from .services import register_user

UUID_REGEX = r"[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}"


@extend_schema_view(
    list=extend_schema(
        tags=["Users"],
        operation_id="GetUsers",
        description="Gets all users",
        responses={200: UserPublicSerializer(many=True), 401: NOT_AUTHENTICATED_RESPONSE},
    ),
    retrieve=extend_schema(
        tags=["Users"],
        operation_id="GetUser",
        description="Gets a user by id",
        responses={200: UserPublicSerializer, 401: NOT_AUTHENTICATED_RESPONSE, 404: ERROR_RESPONSE},
    ),
)
class UserViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    lookup_value_regex = UUID_REGEX
    queryset = User.objects.all()
    serializer_class = UserPublicSerializer
    filterset_fields = ["username"]
    search_fields = ["username"]
    ordering_fields = ["username"]
    ordering = ["username"]

    def get_authorization_policy(self) -> AuthorizationPolicy:
        if self.action == "create":
            return AuthorizationPolicy.ALLOW_ANY_PRINCIPAL
        return AuthorizationPolicy.REQUIRE_ACCOUNT

    def get_serializer_class(self):
        if self.action == "create":
            return RegisterUserSerializer
        return UserPublicSerializer

    @extend_schema(
        tags=["Users"],
        operation_id="CreateUser",
        description="Creates a new user for the caller's identity",
        request=RegisterUserSerializer,
        responses={
            201: UserPublicSerializer,
            400: VALIDATION_ERROR_RESPONSE,
            401: NOT_AUTHENTICATED_RESPONSE,
        },
    )
    def create(self, request, *args, **kwargs):
        ser = RegisterUserSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        user = register_user(
            external_id=external_subject(request),
            username=ser.validated_data["username"],
        )
        return Response(
            UserPublicSerializer(user).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": f"/api/users/{user.id}/"},
        )

    @extend_schema(
        tags=["Users"],
        operation_id="GetProfile",
        description="Gets the current user's profile",
        responses={200: UserPublicSerializer, 401: NOT_AUTHENTICATED_RESPONSE},
    )
    @action(detail=False, methods=["get"], url_path="profile", pagination_class=None)
    def profile(self, request, *args, **kwargs):
        return Response(UserPublicSerializer(resolve_request(request)).data)

