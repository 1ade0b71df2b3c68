"""WSGI entrypoint. Defaults to production settings; override with DJANGO_SETTINGS_MODULE."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "connectly.settings.prod")

application = get_wsgi_application()
