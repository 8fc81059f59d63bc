"""
WSGI config for BrandDirectoryService project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "BrandDirectoryService.settings.dev")

application = get_wsgi_application()
