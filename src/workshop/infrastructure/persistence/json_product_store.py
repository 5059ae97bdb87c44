"""JSON-file-backed ProductStore for local development and demos."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from workshop.domain.exceptions import StoreError, ValidationError
from workshop.domain.model.product import Product, ProductFields
from workshop.domain.model.value_objects import Money
from workshop.domain.repository.product_store import ProductStore


class JsonProductStore(ProductStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductStore interface -----------------------------------------------

    def list(self) -> list[Product]:
        return sorted(self._load().values(), key=lambda p: p.id)

    def insert(self, fields: ProductFields) -> Product:
        products = self._load()
        next_id = max(products, default=0) + 1
        product = Product.from_fields(next_id, fields)
        products[next_id] = product
        self._persist(products)
        return product

    def update(self, product_id: int, fields: ProductFields) -> Product:
        products = self._load()
        if product_id not in products:
            raise StoreError(f"Product with ID '{product_id}' not found")
        product = Product.from_fields(product_id, fields)
        products[product_id] = product
        self._persist(products)
        return product

    def delete(self, product_id: int) -> None:
        products = self._load()
        if products.pop(product_id, None) is not None:
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {
                int(item["id"]): Product(
                    id=int(item["id"]),
                    name=item["name"],
                    cost=Money.of(item["cost"]),
                    image=item.get("image", ""),
                )
                for item in raw
            }
        except (OSError, ValueError, KeyError, TypeError, ValidationError) as exc:
            raise StoreError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist(self, products: dict[int, Product]) -> None:
        raw: list[dict[str, Any]] = [
            {
                "id": p.id,
                "name": p.name,
                "cost": format(p.cost.amount, "f"),
                "image": p.image,
            }
            for p in sorted(products.values(), key=lambda p: p.id)
        ]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StoreError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
