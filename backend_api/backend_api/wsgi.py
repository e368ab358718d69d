"""WSGI entry point for the puzzle arcade backend."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend_api.settings")

application = get_wsgi_application()
