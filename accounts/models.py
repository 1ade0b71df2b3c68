"""Connectly account model.

Accounts are provisioned on first registration from a verified identity
provider token; there are no local passwords. `external_id` is the token's
subject claim and never changes after creation. `username` is the public
handle and may change later.

Only the public projection (`id`, `username`) is ever rendered to clients.
"""

import uuid

from django.db import models


class User(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=150, unique=True)
    external_id = models.CharField(max_length=255, unique=True, editable=False)

    class Meta:
        db_table = "users"
        ordering = ["username"]

    def __str__(self) -> str:
        return self.username

    def public_projection(self) -> dict:
        """Id and username only; the external id stays server-side."""
        return {"id": str(self.id), "username": self.username}
