"""
ASGI config for the myFlix project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "myflix.settings.development")

application = get_asgi_application()
