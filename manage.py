#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""

import os
import sys


def main():
    # `manage.py test` runs against the test settings unless told otherwise.
    default_settings = "connectly.settings.test" if sys.argv[1:2] == ["test"] else "connectly.settings.dev"
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", default_settings)
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
