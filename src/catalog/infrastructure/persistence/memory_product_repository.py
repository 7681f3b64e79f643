"""In-process implementation of ProductRepository.

Keeps products in a dict for the lifetime of the process. Stored
products are copies, so mutating an aggregate after ``save`` does not
change what the repository holds until it is saved again.
"""

from __future__ import annotations

from dataclasses import replace

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[ProductId, Product] = {}
        for p in products or []:
            self._store[p.id] = replace(p)

    def get_by_id(self, product_id: ProductId) -> Product | None:
        product = self._store.get(product_id)
        return replace(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return [replace(p) for p in self._store.values()]

    def save(self, product: Product) -> Product:
        self._store[product.id] = replace(product)
        return replace(product)

    def delete_by_id(self, product_id: ProductId) -> None:
        self._store.pop(product_id, None)
