"""
App configuration for Brand Directory Service.
"""

import logging
import os
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)

# Management commands that never serve requests.
SKIP_SETUP_COMMANDS = (
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "check",
    "createsuperuser",
)


class BrandDirectoryServiceConfig(AppConfig):
    """App configuration for BrandDirectoryService."""

    name = "BrandDirectoryService"
    verbose_name = "Brand Directory Service"

    def ready(self):
        """Called when Django starts."""
        # Event handlers are in-process, so every process needs them.
        self.register_event_handlers()

        if len(sys.argv) > 1 and sys.argv[1] in SKIP_SETUP_COMMANDS:
            return
        # The autoreloader's parent process never serves requests.
        if os.environ.get("RUN_MAIN") == "false":
            return
        if not getattr(settings, "OTEL_ENABLED", True):
            return

        logger.info("Setting up observability...")
        self.setup_observability()

    def setup_observability(self):
        """Setup tracing and the metrics endpoint."""
        from core.instrumentation import setup_opentelemetry

        try:
            setup_opentelemetry()
        except (OSError, RuntimeError, ValueError) as e:
            logger.warning("Failed to setup OpenTelemetry: %s", e)
        else:
            logger.info("Observability setup complete")

    def register_event_handlers(self):
        """Register event handlers once per process."""
        from core.infrastructure.event_handlers import register_event_handlers

        if getattr(self, "_handlers_registered", False):
            return
        register_event_handlers()
        self._handlers_registered = True
