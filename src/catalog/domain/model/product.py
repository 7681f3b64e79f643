"""Product aggregate.

A product has a name, a price and a status. The status is tied to the
price: a product with a negative price can never be ACTIVE. All the
rules live here; the application layer only loads, calls and saves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catalog.domain.exceptions import InvalidProductError
from catalog.domain.model.value_objects import Money, ProductId


class ProductStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. It is a mutable dataclass because name,
    price and status legitimately change over its lifetime; the id does
    not. Build new products through ``Product.create`` so the name and
    initial status are validated.
    """

    id: ProductId
    name: str
    price: Money
    status: ProductStatus

    @classmethod
    def create(cls, id: ProductId, name: str | None, price: Money | None) -> Product:
        if name is None or not name.strip():
            raise InvalidProductError("Product name cannot be empty")
        if price is None:
            raise InvalidProductError("Product price cannot be null")

        status = ProductStatus.INACTIVE if price.is_negative() else ProductStatus.ACTIVE
        return cls(id=id, name=name, price=price, status=status)

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def update(self, name: str | None = None, price: Money | None = None) -> None:
        """Apply a partial change.

        A missing or blank name leaves the current name alone. A new
        negative price switches an ACTIVE product off; a new non-negative
        price never switches it back on, only ``activate()`` does that.
        """
        if name is not None and name.strip():
            self.name = name

        if price is not None:
            self.price = price
            if self.is_active and price.is_negative():
                self.status = ProductStatus.INACTIVE

    def activate(self) -> None:
        if self.price.is_negative():
            raise InvalidProductError("Cannot activate product with negative price")
        self.status = ProductStatus.ACTIVE

    def deactivate(self) -> None:
        self.status = ProductStatus.INACTIVE
