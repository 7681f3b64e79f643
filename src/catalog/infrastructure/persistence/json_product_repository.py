"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money, ProductId
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: ProductId) -> Product | None:
        return self._load().get(product_id.value)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> Product:
        products = self._load()
        products[product.id.value] = product
        self._persist(products)
        return product

    def delete_by_id(self, product_id: ProductId) -> None:
        products = self._load()
        if products.pop(product_id.value, None) is not None:
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=ProductId(item["id"]),
                name=item["name"],
                price=Money(Decimal(item["price"])),
                status=ProductStatus(item["status"]),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id.value,
                "name": p.name,
                "price": str(p.price.amount),
                "status": p.status.value,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
