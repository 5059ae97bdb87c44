"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from workshop.application.catalog import CatalogState
from workshop.application.orchestrator import Orchestrator
from workshop.application.state import AppState
from workshop.domain.exceptions import ValidationError
from workshop.domain.model.cart import Cart
from workshop.domain.model.draft import NewDraft
from workshop.domain.repository.product_store import ProductStore
from workshop.infrastructure.config import Settings, get_settings
from workshop.infrastructure.log import setup_logging
from workshop.infrastructure.persistence.json_product_store import JsonProductStore
from workshop.infrastructure.persistence.rest_product_store import RestProductStore


def product_store(settings: Settings) -> ProductStore:
    if settings.store_backend == "json":
        return JsonProductStore(settings.data_dir / "products.json")
    if settings.store_backend == "rest":
        if not settings.store_url:
            raise ValidationError("WORKSHOP_STORE_URL is required for the rest store")
        return RestProductStore(
            base_url=settings.store_url,
            api_key=settings.store_key,
            table=settings.store_table,
            timeout=settings.store_timeout,
        )
    raise ValidationError(f"Unknown store backend '{settings.store_backend}'")


def app_state(store: ProductStore, settings: Settings) -> AppState:
    cart = Cart()
    return AppState(
        catalog=CatalogState(store, cart),
        cart=cart,
        new_draft=NewDraft.blank(settings.placeholder_image),
    )


def orchestrator(settings: Settings | None = None) -> Orchestrator:
    settings = settings or get_settings()
    setup_logging(settings.log_dir, settings.log_level)
    state = app_state(product_store(settings), settings)
    return Orchestrator(
        state,
        currency_format=settings.currency_format,
        placeholder_image=settings.placeholder_image,
    )
