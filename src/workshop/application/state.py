"""Explicit application state shared by every front end.

One ``AppState`` is built at startup and handed to the orchestrator;
nothing in the package keeps module-level state. Observers registered
with ``subscribe`` are called after each state change so they can
re-render from the new snapshot.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from workshop.application.catalog import CatalogState
from workshop.domain.model.cart import Cart
from workshop.domain.model.draft import Draft, NewDraft
from workshop.domain.model.navigation import NavigationHistory

Listener = Callable[["AppState"], None]


@dataclass
class AppState:
    catalog: CatalogState
    cart: Cart
    navigation: NavigationHistory = field(default_factory=NavigationHistory)
    new_draft: NewDraft = field(default_factory=NewDraft)
    active_draft: Draft | None = None
    _listeners: list[Listener] = field(default_factory=list, repr=False)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
