"""
Event handlers for domain events.

These handlers process domain events for side effects: the audit sink
(a structured log stream, there is no audit store) and public catalog
cache invalidation.
"""

import logging

from brands.domain.events import (
    BrandCreated,
    BrandDeleted,
    BrandProfileUpdated,
    BrandStatusChanged,
)
from core.domain.events import DomainEvent, EventHandler
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit")

CATALOG_EVENTS = (BrandCreated, BrandProfileUpdated, BrandStatusChanged, BrandDeleted)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every domain event to the ``audit`` logger.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        audit_logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
                "payload": event.payload(),
            },
        )


class CatalogCacheInvalidationHandler(EventHandler):
    """
    Event handler for cache invalidation.

    Drops the cached public brand lists when any brand changes.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for cache invalidation.

        Args:
            event: Domain event
        """
        from brands.application.services.catalog_cache_service import CatalogCacheService
        from core.infrastructure.cache_adapters import cache_adapter

        await CatalogCacheService(cache_adapter).invalidate()
        logger.info(
            "Catalog cache invalidated (event: %s, aggregate_id: %s)",
            event.event_type,
            event.aggregate_id,
        )


audit_log_handler = AuditLogEventHandler()
catalog_cache_handler = CatalogCacheInvalidationHandler()


def register_event_handlers():
    """Register all event handlers with the event bus."""
    event_bus.subscribe(DomainEvent, audit_log_handler)
    for event_type in CATALOG_EVENTS:
        event_bus.subscribe(event_type, catalog_cache_handler)
    logger.info("Event handlers registered")
