"""Cart aggregate: the user's current selection of products.

Holds at most one entry per product id. Entries keep the product
snapshot taken when the product was first added; later quantity
changes never replace it.
"""

from __future__ import annotations

from dataclasses import dataclass

from workshop.domain.model.product import Product
from workshop.domain.model.value_objects import Money, Quantity


@dataclass
class CartEntry:
    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.cost * self.quantity.value


class Cart:
    """Aggregate root for the selection.

    Invariants:
    - one entry per product id
    - no entry ever has a quantity below 1
    """

    def __init__(self) -> None:
        self._entries: dict[int, CartEntry] = {}

    # --- Queries --------------------------------------------------------------

    @property
    def entries(self) -> list[CartEntry]:
        return list(self._entries.values())

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def get(self, product_id: int) -> CartEntry | None:
        return self._entries.get(product_id)

    def total(self) -> Money:
        result = Money.zero()
        for entry in self._entries.values():
            result = result + entry.line_total
        return result

    def item_count(self) -> int:
        return sum(entry.quantity.value for entry in self._entries.values())

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> CartEntry:
        """Add one unit of *product*, creating the entry on first add."""
        entry = self._entries.get(product.id)
        if entry is None:
            entry = CartEntry(product=product, quantity=Quantity(1))
            self._entries[product.id] = entry
        else:
            entry.quantity = Quantity(entry.quantity.value + 1)
        return entry

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Set the quantity of an existing entry.

        A quantity below 1 removes the entry. Unknown ids are ignored:
        only ``add`` creates entries.
        """
        if quantity < 1:
            self._entries.pop(product_id, None)
            return
        entry = self._entries.get(product_id)
        if entry is not None:
            entry.quantity = Quantity(quantity)

    def remove_product_references(self, product_id: int) -> None:
        """Drop the entry for a product that no longer exists in the catalog."""
        self._entries.pop(product_id, None)
