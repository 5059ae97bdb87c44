"""Application service: the in-memory catalog and its sync contract.

The catalog is a mirror of the product store. Its contents change in
exactly one way: a successful ``refresh()``. Add, update and remove call
the store first and then refresh; local state is never patched
optimistically.
"""

from __future__ import annotations

import logging

from workshop.domain.model.cart import Cart
from workshop.domain.model.draft import EditDraft, NewDraft
from workshop.domain.model.product import Product
from workshop.domain.repository.product_store import ProductStore

_log = logging.getLogger("workshop.catalog")


class CatalogState:

    def __init__(self, store: ProductStore, cart: Cart) -> None:
        self._store = store
        self._cart = cart
        self._products: tuple[Product, ...] = ()

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def get(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def refresh(self) -> tuple[Product, ...]:
        """Replace the snapshot with the store's current list.

        On StoreError the previous snapshot is kept and the error
        propagates.
        """
        products = tuple(self._store.list())
        self._products = products
        _log.info("catalog_refreshed", extra={"data": {"count": len(products)}})
        return products

    def add_product(self, draft: NewDraft) -> Product:
        """Validate the draft, insert it, then refresh."""
        fields = draft.to_fields()
        product = self._store.insert(fields)
        _log.info("product_inserted", extra={"data": {"id": product.id}})
        self.refresh()
        return product

    def update_product(self, draft: EditDraft) -> Product:
        fields = draft.to_fields()
        product = self._store.update(draft.original_id, fields)
        _log.info("product_updated", extra={"data": {"id": product.id}})
        self.refresh()
        return product

    def remove_product(self, product_id: int) -> None:
        """Delete a product, refresh, and drop it from the cart.

        The cart is cleaned up even when the follow-up refresh fails,
        since the delete itself has already happened.
        """
        self._store.delete(product_id)
        _log.info("product_deleted", extra={"data": {"id": product_id}})
        try:
            self.refresh()
        finally:
            self._cart.remove_product_references(product_id)
