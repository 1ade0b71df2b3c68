"""AppConfig for the `social` app: follower edges, posts, feeds."""

from django.apps import AppConfig


class SocialConfig(AppConfig):
    """Primary app configuration for the social graph and post feeds."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "social"
