"""Django AppConfig for the accounts app.

This app houses the Connectly account model (`accounts.User`), the identity
resolver that maps verified token subjects onto accounts, and the user
registration/profile endpoints.
"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Standard Django app config; UUID primary keys are declared on the model."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
