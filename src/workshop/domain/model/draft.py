"""Unsaved product form state.

A draft is either a ``NewDraft`` (a product that does not exist yet) or
an ``EditDraft`` (a working copy of a stored product). Costs are kept as
the raw text of the input field and only validated on save.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from workshop.domain.model.product import Product, ProductFields

PLACEHOLDER_IMAGE = "/api/placeholder/200/200"


@dataclass(frozen=True)
class NewDraft:
    name: str = ""
    cost: str = ""
    image: str = PLACEHOLDER_IMAGE

    @property
    def is_complete(self) -> bool:
        return bool(self.name) and bool(self.cost)

    def to_fields(self) -> ProductFields:
        return ProductFields.from_input(self.name, self.cost, self.image)

    @staticmethod
    def blank(image: str = PLACEHOLDER_IMAGE) -> NewDraft:
        return NewDraft(image=image)


@dataclass(frozen=True)
class EditDraft:
    original_id: int
    name: str
    cost: str
    image: str

    def to_fields(self) -> ProductFields:
        return ProductFields.from_input(self.name, self.cost, self.image)

    @staticmethod
    def of(product: Product) -> EditDraft:
        return EditDraft(
            original_id=product.id,
            name=product.name,
            cost=format(product.cost.amount, "f"),
            image=product.image,
        )


Draft = Union[NewDraft, EditDraft]


def with_changes(draft: Draft, **changes: str) -> Draft:
    """Return a copy of *draft* with the given fields replaced."""
    return replace(draft, **changes)
