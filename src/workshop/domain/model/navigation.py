"""Page navigation with a single-step back stack."""

from __future__ import annotations

from enum import Enum


class Page(Enum):
    HOME = "home"
    SELECT = "select"  # browse the catalog and pick products
    SELECTIONS = "selections"  # review the cart
    PRODUCTS = "products"  # manage the catalog


ROOT_PAGE = Page.HOME


class NavigationHistory:
    """Stack of visited pages; the top is the current page.

    Starts at the root. Going back past the bottom leaves the stack empty
    and reports the root as current without pushing it again, so repeated
    ``go_back`` calls at the floor are harmless. Forward navigation is
    unbounded.
    """

    def __init__(self) -> None:
        self._stack: list[Page] = [ROOT_PAGE]

    @property
    def current(self) -> Page:
        return self._stack[-1] if self._stack else ROOT_PAGE

    @property
    def depth(self) -> int:
        return len(self._stack)

    def go_to(self, page: Page) -> Page:
        self._stack.append(page)
        return page

    def go_back(self) -> Page:
        if self._stack:
            self._stack.pop()
        return self.current
