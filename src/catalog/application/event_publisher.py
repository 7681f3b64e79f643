"""Abstract publisher of product lifecycle events.

The service calls exactly one of these after every successful write.
Delivery is fire-and-forget: implementations should not raise, and the
service does not let a failed notification undo a completed write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId


class ProductEventPublisher(ABC):

    @abstractmethod
    def publish_product_created(self, product: Product) -> None:
        """A product was added to the catalog."""

    @abstractmethod
    def publish_product_updated(self, product: Product) -> None:
        """A product's name and/or price changed."""

    @abstractmethod
    def publish_product_deleted(self, product_id: ProductId) -> None:
        """A product was removed. Only the ID survives."""

    @abstractmethod
    def publish_product_activated(self, product: Product) -> None:
        """A product was switched on."""

    @abstractmethod
    def publish_product_deactivated(self, product: Product) -> None:
        """A product was switched off."""
