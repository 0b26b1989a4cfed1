"""
WSGI config for the chain API project.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

ENV = os.environ.get("DJANGO_ENV", "development")
if ENV == "production":
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.django.production")
elif ENV == "test":
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.django.test")
else:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.django.base")

application = get_wsgi_application()
