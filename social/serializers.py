"""
DRF serializers for posts and follow relationships.

Input serializers only carry the field shape; content rules (non-empty,
printable ASCII) are enforced by `social.services` so every caller gets them.
Authorship is never accepted from the client.
"""

from __future__ import annotations

from rest_framework import serializers

from .models import Post


class PostSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Post
        fields = ["id", "user_id", "content", "created_at"]
        read_only_fields = fields


class NewPostSerializer(serializers.Serializer):
    # Blank passes here so the service reports the empty-content rule itself.
    content = serializers.CharField(allow_blank=True, trim_whitespace=False, max_length=10_000)


class CreatedIdSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)


class RelationshipSerializer(serializers.Serializer):
    """Counterpart of a follow edge: public fields only."""
    user_id = serializers.UUIDField(read_only=True)
    username = serializers.CharField(read_only=True)
