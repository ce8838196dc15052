"""WSGI-точка входа проекта FC."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "FC.settings")

application = get_wsgi_application()
