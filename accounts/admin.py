"""Admin registrations for the accounts app.

Admin is back-office only (not a public UI). `external_id` is shown read-only:
it is the identity provider's subject and must not be edited.
"""

from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "username", "external_id")
    search_fields = ("username", "external_id")
    readonly_fields = ("id", "external_id")
