"""
ASGI config for BrandDirectoryService project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "BrandDirectoryService.settings.dev")

application = get_asgi_application()
