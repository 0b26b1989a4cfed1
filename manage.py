#!/usr/bin/env python
import os
import sys


def main():
    env = os.environ.get("DJANGO_ENV", "development")
    if env == "production":
        os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.django.production")
    elif env == "test":
        os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.django.test")
    else:
        os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.django.base")

    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
