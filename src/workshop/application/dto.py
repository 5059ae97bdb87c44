"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display-ready data from the orchestrator to whatever renders
it (the interactive shell, the one-shot CLI commands) without exposing
domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    cost: str  # formatted, e.g. "150 000 so'm"
    image: str


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    name: str
    quantity: int
    unit_cost: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    item_count: int
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderReceipt:
    """Output: what the user is shown after placing an order."""

    lines: list[CartLineDTO]
    item_count: int
    total: str
