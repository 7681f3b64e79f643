"""Composition root — wires concrete implementations to the ports.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog import config
from catalog.application.product_management import ProductManagementService
from catalog.infrastructure.events.logging_event_publisher import (
    LoggingProductEventPublisher,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(config.get_data_dir() / "products.json")


def event_publisher() -> LoggingProductEventPublisher:
    return LoggingProductEventPublisher()


def product_management_service() -> ProductManagementService:
    return ProductManagementService(
        product_repo=product_repository(),
        event_publisher=event_publisher(),
    )
