"""
drf-spectacular helpers for OpenAPI schema generation.

Purpose
-------
- Document `core.authentication.ExternalJWTAuthentication` as an HTTP bearer
  (JWT) security scheme so Swagger UI can attach tokens.
- Centralize reusable error response shapes.

Notes
-----
This module is imported at startup by `core.apps.CoreConfig.ready()`. It must
remain side-effect free beyond constant definitions and extension registration.
"""

from __future__ import annotations

from drf_spectacular.extensions import OpenApiAuthenticationExtension
from drf_spectacular.utils import OpenApiResponse, inline_serializer
from rest_framework import serializers


class ExternalJWTAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "core.authentication.ExternalJWTAuthentication"
    name = "Bearer"

    def get_security_definition(self, auto_schema):
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "JWT access token from the identity provider.",
        }


ERROR_RESPONSE = OpenApiResponse(
    response=inline_serializer(
        name="Error",
        fields={
            "detail": serializers.CharField(),
            "code": serializers.CharField(),
        },
    ),
    description="Error response",
)

VALIDATION_ERROR_RESPONSE = OpenApiResponse(
    response=inline_serializer(
        name="ValidationError",
        fields={
            "detail": serializers.CharField(),
            "code": serializers.CharField(),
            "errors": serializers.DictField(
                child=serializers.ListField(child=serializers.CharField()),
                required=False,
            ),
        },
    ),
    description="Validation error",
)

NOT_AUTHENTICATED_RESPONSE = OpenApiResponse(
    response=ERROR_RESPONSE.response,
    description="Missing/invalid token, or no account for the token's subject",
)
