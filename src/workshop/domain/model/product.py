"""Product entity.

Products are owned by the remote product store; the application only
ever holds snapshots of them. Identity is the store-assigned ``id``.
"""

from __future__ import annotations

from dataclasses import dataclass

from workshop.domain.exceptions import ValidationError
from workshop.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductFields:
    """The mutable part of a product, as sent to the store on insert/update."""

    name: str
    cost: Money
    image: str

    @staticmethod
    def from_input(name: str, cost: str | int | float, image: str) -> ProductFields:
        """Validate raw form input.

        Raises ValidationError for a blank name or a cost that is not a
        non-negative number.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if cost is None or (isinstance(cost, str) and not cost.strip()):
            raise ValidationError("Product cost is required")
        return ProductFields(name=name.strip(), cost=Money.of(cost), image=image)


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Frozen: a snapshot taken from the store. Changes go through the store
    and come back with the next catalog refresh.
    """

    id: int
    name: str
    cost: Money
    image: str

    @property
    def fields(self) -> ProductFields:
        return ProductFields(name=self.name, cost=self.cost, image=self.image)

    @staticmethod
    def from_fields(product_id: int, fields: ProductFields) -> Product:
        return Product(
            id=product_id, name=fields.name, cost=fields.cost, image=fields.image
        )
