"""Application service: Product Management use cases.

Orchestrates the flow between the repository, the Product aggregate
and the event publisher. Every mutating use case follows the same
sequence: load, apply the domain rule, save, notify, project. Read use
cases never notify.
"""

from __future__ import annotations

import logging
from typing import Callable

from catalog.application.dto import (
    CreateProductCommand,
    ProductDTO,
    UpdateProductCommand,
    to_dto,
)
from catalog.application.event_publisher import ProductEventPublisher
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductId
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductManagementService:

    def __init__(
        self,
        product_repo: ProductRepository,
        event_publisher: ProductEventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._event_publisher = event_publisher

    # --- Commands -------------------------------------------------------------

    def create_product(self, command: CreateProductCommand) -> ProductDTO:
        price = Money.of(command.price) if command.price is not None else None
        product = Product.create(ProductId.generate(), command.name, price)

        saved = self._product_repo.save(product)
        logger.debug("Saved new product %s", saved.id)
        self._notify(self._event_publisher.publish_product_created, saved)
        return to_dto(saved)

    def update_product(
        self, product_id: ProductId, command: UpdateProductCommand
    ) -> ProductDTO:
        product = self._load(product_id)

        product.update(
            name=command.name,
            price=Money.of(command.price) if command.price is not None else None,
        )

        saved = self._product_repo.save(product)
        logger.debug("Saved updated product %s", saved.id)
        self._notify(self._event_publisher.publish_product_updated, saved)
        return to_dto(saved)

    def delete_product(self, product_id: ProductId) -> None:
        # Existence check only; the aggregate itself is not needed.
        self._load(product_id)

        self._product_repo.delete_by_id(product_id)
        logger.debug("Deleted product %s", product_id)
        self._notify(self._event_publisher.publish_product_deleted, product_id)

    def activate_product(self, product_id: ProductId) -> ProductDTO:
        product = self._load(product_id)
        product.activate()

        saved = self._product_repo.save(product)
        logger.debug("Saved activated product %s", saved.id)
        self._notify(self._event_publisher.publish_product_activated, saved)
        return to_dto(saved)

    def deactivate_product(self, product_id: ProductId) -> ProductDTO:
        product = self._load(product_id)
        product.deactivate()

        saved = self._product_repo.save(product)
        logger.debug("Saved deactivated product %s", saved.id)
        self._notify(self._event_publisher.publish_product_deactivated, saved)
        return to_dto(saved)

    # --- Queries --------------------------------------------------------------

    def find_product(self, product_id: ProductId) -> ProductDTO:
        return to_dto(self._load(product_id))

    def find_all_products(self) -> list[ProductDTO]:
        return [to_dto(p) for p in self._product_repo.list_all()]

    # --- Internal helpers -----------------------------------------------------

    def _load(self, product_id: ProductId) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    @staticmethod
    def _notify(publish: Callable[[object], None], subject: object) -> None:
        """Call a publisher method after the write has already succeeded.

        A failure here is logged and dropped: the change is stored, so the
        caller must see the use case as successful.
        """
        try:
            publish(subject)
        except Exception:
            logger.exception(
                "Failed to publish %s for %s",
                getattr(publish, "__name__", publish),
                subject,
            )
