"""Abstract product store.

Defined in the domain layer so the domain never depends on
infrastructure. The hosted REST store and the JSON file store live in
the infrastructure layer.

Each call is an independent round trip; nothing is transactional across
calls. Every failure surfaces as ``StoreError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from workshop.domain.model.product import Product, ProductFields


class ProductStore(ABC):

    @abstractmethod
    def list(self) -> list[Product]:
        """Return every product, ordered by id ascending."""

    @abstractmethod
    def insert(self, fields: ProductFields) -> Product:
        """Store a new product and return it with its assigned id."""

    @abstractmethod
    def update(self, product_id: int, fields: ProductFields) -> Product:
        """Replace the fields of an existing product and return the new row.

        Raises StoreError if no product has *product_id*.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Delete a product. Deleting a missing id is not an error."""
