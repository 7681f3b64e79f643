"""Data Transfer Objects — plain containers that cross layer boundaries.

Commands carry caller input into the service; ProductDTO is the
read-only projection handed back out. Neither exposes the aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class CreateProductCommand:
    """Input: a new product's name and price."""

    name: str | None
    price: Decimal | None


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input: a partial change. None means "leave as is"."""

    name: str | None = None
    price: Decimal | None = None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown to callers."""

    id: str
    name: str
    price: Decimal  # always 2 decimal places
    status: str

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "status": self.status,
        }


def to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id.value,
        name=product.name,
        price=product.price.amount,
        status=product.status.value,
    )
