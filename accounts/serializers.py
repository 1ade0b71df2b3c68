"""Serializers for the account endpoints.

The public shape is `{id, username}`. `external_id` is never rendered and is
never accepted from the client; it comes from the verified token.
"""

from rest_framework import serializers

from .models import User


class UserPublicSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username"]
        read_only_fields = fields


class RegisterUserSerializer(serializers.Serializer):
    # Blank is allowed at the field level; printable/uniqueness rules live in the service.
    username = serializers.CharField(max_length=150, allow_blank=True, trim_whitespace=False)
