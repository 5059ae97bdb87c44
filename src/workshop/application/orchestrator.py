"""Application service: user actions over the shared ``AppState``.

Every action that talks to the product store is a recovery boundary:
a ``DomainException`` (store failure or invalid input) is logged and the
action reports failure through its return value, leaving state as it
was. Observers are notified after each successful state change.
"""

from __future__ import annotations

import logging

from workshop.application.dto import CartDTO, CartLineDTO, OrderReceipt, ProductDTO
from workshop.application.state import AppState
from workshop.domain.exceptions import DomainException
from workshop.domain.model.draft import (
    PLACEHOLDER_IMAGE,
    Draft,
    EditDraft,
    NewDraft,
    with_changes,
)
from workshop.domain.model.navigation import Page
from workshop.domain.model.product import Product
from workshop.domain.service.currency import DEFAULT_FORMAT, CurrencyFormat
from workshop.domain.service.image_encoder import encode_image

_log = logging.getLogger("workshop.orchestrator")


class Orchestrator:

    def __init__(
        self,
        state: AppState,
        currency_format: CurrencyFormat = DEFAULT_FORMAT,
        placeholder_image: str = PLACEHOLDER_IMAGE,
    ) -> None:
        self._state = state
        self._fmt = currency_format
        self._placeholder_image = placeholder_image

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def current_page(self) -> Page:
        return self._state.navigation.current

    # --- Startup --------------------------------------------------------------

    def start(self) -> bool:
        """Load the catalog once."""
        try:
            self._state.catalog.refresh()
        except DomainException:
            _log.exception("load_products_failed")
            return False
        self._state.notify()
        return True

    # --- Navigation -----------------------------------------------------------

    def go_to(self, page: Page) -> None:
        self._state.navigation.go_to(page)
        self._state.notify()

    def go_back(self) -> None:
        self._state.navigation.go_back()
        self._state.notify()

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(self, product_id: int) -> bool:
        product = self._state.catalog.get(product_id)
        if product is None:
            _log.warning("add_to_cart_unknown_product", extra={"data": {"id": product_id}})
            return False
        self._state.cart.add(product)
        self._state.notify()
        return True

    def set_quantity(self, product_id: int, quantity: int) -> None:
        self._state.cart.set_quantity(product_id, quantity)
        self._state.notify()

    def increment(self, product_id: int) -> None:
        entry = self._state.cart.get(product_id)
        if entry is not None:
            self.set_quantity(product_id, entry.quantity.value + 1)

    def decrement(self, product_id: int) -> None:
        entry = self._state.cart.get(product_id)
        if entry is not None:
            self.set_quantity(product_id, entry.quantity.value - 1)

    def place_order(self) -> OrderReceipt | None:
        """Summarise the cart and return to the home page.

        The cart itself is left as it is. Returns None for an empty cart.
        """
        cart = self.cart_view()
        if cart.is_empty:
            return None
        receipt = OrderReceipt(lines=cart.lines, item_count=cart.item_count, total=cart.total)
        _log.info(
            "order_placed",
            extra={"data": {"items": cart.item_count, "total": str(self._state.cart.total().amount)}},
        )
        self.go_to(Page.HOME)
        return receipt

    # --- Drafts ---------------------------------------------------------------

    def open_new_draft(self) -> None:
        """Show the new-product form, or hide it if it is already showing."""
        if isinstance(self._state.active_draft, NewDraft):
            self._state.active_draft = None
        else:
            self._state.active_draft = self._state.new_draft
        self._state.notify()

    def open_edit_draft(self, product_id: int) -> bool:
        product = self._state.catalog.get(product_id)
        if product is None:
            _log.warning("edit_unknown_product", extra={"data": {"id": product_id}})
            return False
        self._state.active_draft = EditDraft.of(product)
        self._state.notify()
        return True

    def cancel_draft(self) -> None:
        """Hide the form. New-product fields survive for next time."""
        self._state.active_draft = None
        self._state.notify()

    def update_draft(self, name: str | None = None, cost: str | int | None = None) -> bool:
        draft = self._state.active_draft
        if draft is None:
            return False
        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = name
        if cost is not None:
            changes["cost"] = str(cost)
        self._replace_draft(with_changes(draft, **changes))
        self._state.notify()
        return True

    def assign_image(self, raw: bytes, filename: str | None = None) -> bool:
        """Encode an uploaded file and put it into the draft being edited.

        With no form showing, the image goes to the pending new product.
        """
        try:
            image = encode_image(raw, filename=filename)
        except DomainException:
            _log.exception("image_upload_failed", extra={"data": {"filename": filename}})
            return False
        target = self._state.active_draft or self._state.new_draft
        self._replace_draft(with_changes(target, image=image))
        self._state.notify()
        return True

    def save_draft(self) -> bool:
        """Persist the visible draft.

        An edit draft is sent as an update; a new draft is inserted only
        when both name and cost were filled in. On success the form is
        hidden and, for a new product, the pending fields are reset.
        """
        draft = self._state.active_draft
        if isinstance(draft, EditDraft):
            try:
                self._state.catalog.update_product(draft)
            except DomainException:
                _log.exception("save_product_failed", extra={"data": {"id": draft.original_id}})
                return False
            self._state.active_draft = None
        elif isinstance(draft, NewDraft):
            if not draft.is_complete:
                _log.warning("save_product_incomplete")
                return False
            try:
                self._state.catalog.add_product(draft)
            except DomainException:
                _log.exception("save_product_failed", extra={"data": {"name": draft.name}})
                return False
            self._state.new_draft = NewDraft.blank(self._placeholder_image)
            self._state.active_draft = None
        else:
            return False
        self._state.notify()
        return True

    def delete_product(self, product_id: int) -> bool:
        try:
            self._state.catalog.remove_product(product_id)
        except DomainException:
            _log.exception("delete_product_failed", extra={"data": {"id": product_id}})
            ok = False
        else:
            ok = True
        # A failed refresh after a successful delete still changed the cart.
        self._state.notify()
        return ok

    # --- Views ----------------------------------------------------------------

    def format(self, product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            cost=self._fmt.format(product.cost.amount),
            image=product.image,
        )

    def catalog_view(self) -> list[ProductDTO]:
        return [self.format(p) for p in self._state.catalog.products]

    def cart_view(self) -> CartDTO:
        cart = self._state.cart
        lines = [
            CartLineDTO(
                product_id=entry.product.id,
                name=entry.product.name,
                quantity=entry.quantity.value,
                unit_cost=self._fmt.format(entry.product.cost.amount),
                line_total=self._fmt.format(entry.line_total.amount),
            )
            for entry in cart.entries
        ]
        return CartDTO(
            lines=lines,
            item_count=cart.item_count(),
            total=self._fmt.format(cart.total().amount),
        )

    # --- Internal helpers -----------------------------------------------------

    def _replace_draft(self, draft: Draft) -> None:
        if isinstance(draft, NewDraft):
            self._state.new_draft = draft
            if self._state.active_draft is not None:
                self._state.active_draft = draft
        else:
            self._state.active_draft = draft
