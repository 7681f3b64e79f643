"""ProductEventPublisher that writes each event to the log.

There is no message broker behind this adapter; an INFO record per
event is the whole delivery mechanism.
"""

from __future__ import annotations

import logging

from catalog.application.event_publisher import ProductEventPublisher
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId

logger = logging.getLogger(__name__)


class LoggingProductEventPublisher(ProductEventPublisher):

    def publish_product_created(self, product: Product) -> None:
        logger.info("Product created: %s", product.id)

    def publish_product_updated(self, product: Product) -> None:
        logger.info("Product updated: %s", product.id)

    def publish_product_deleted(self, product_id: ProductId) -> None:
        logger.info("Product deleted: %s", product_id)

    def publish_product_activated(self, product: Product) -> None:
        logger.info("Product activated: %s", product.id)

    def publish_product_deactivated(self, product: Product) -> None:
        logger.info("Product deactivated: %s", product.id)
