"""Integration tests for CatalogState and its sync contract with the store.

Uses the in-memory fake store, no network.
"""

import pytest

from tests.fakes import FakeProductStore, make_product
from workshop.application.catalog import CatalogState
from workshop.domain.exceptions import StoreError, ValidationError
from workshop.domain.model.cart import Cart
from workshop.domain.model.draft import EditDraft, NewDraft


def _setup(products=None) -> tuple[CatalogState, FakeProductStore, Cart]:
    if products is None:
        products = [
            make_product(1, "Chair", 10000),
            make_product(2, "Table", 150000),
        ]
    store = FakeProductStore(products)
    cart = Cart()
    catalog = CatalogState(store, cart)
    catalog.refresh()
    store.calls.clear()
    return catalog, store, cart


def _snapshot(catalog: CatalogState):
    return [(p.id, p.name, p.cost, p.image) for p in catalog.products]


class TestRefresh:

    def test_loads_products_in_id_order(self):
        store = FakeProductStore([make_product(5, "Bench", 1), make_product(2, "Stool", 1)])
        catalog = CatalogState(store, Cart())
        catalog.refresh()
        assert [p.id for p in catalog.products] == [2, 5]

    def test_failed_refresh_keeps_previous_snapshot(self):
        catalog, store, _ = _setup()
        before = _snapshot(catalog)
        store.fail_on("list")
        with pytest.raises(StoreError):
            catalog.refresh()
        assert _snapshot(catalog) == before

    def test_get(self):
        catalog, _, _ = _setup()
        assert catalog.get(2).name == "Table"
        assert catalog.get(99) is None


class TestAddProduct:

    def test_inserts_then_refreshes(self):
        catalog, store, _ = _setup()
        product = catalog.add_product(NewDraft(name="Bed", cost="300000", image="bed.png"))
        assert store.calls == ["insert", "list"]
        assert product.id == 3
        assert catalog.get(3).name == "Bed"

    def test_invalid_draft_never_reaches_store(self):
        catalog, store, _ = _setup()
        with pytest.raises(ValidationError):
            catalog.add_product(NewDraft(name="", cost="100"))
        with pytest.raises(ValidationError):
            catalog.add_product(NewDraft(name="Bed", cost="a lot"))
        assert store.calls == []

    def test_failed_insert_leaves_catalog_identical(self):
        catalog, store, _ = _setup()
        before = _snapshot(catalog)
        store.fail_on("insert")
        with pytest.raises(StoreError):
            catalog.add_product(NewDraft(name="Bed", cost="300000"))
        assert _snapshot(catalog) == before
        assert store.calls == ["insert"]


class TestUpdateProduct:

    def test_updates_then_refreshes(self):
        catalog, store, _ = _setup()
        draft = EditDraft.of(catalog.get(1))
        catalog.update_product(EditDraft(draft.original_id, "Armchair", "12000", draft.image))
        assert store.calls == ["update", "list"]
        assert catalog.get(1).name == "Armchair"

    def test_catalog_is_not_patched_without_refresh(self):
        catalog, store, _ = _setup()
        store.fail_on("list")
        draft = EditDraft.of(catalog.get(1))
        with pytest.raises(StoreError):
            catalog.update_product(EditDraft(1, "Armchair", draft.cost, draft.image))
        assert catalog.get(1).name == "Chair"

    def test_missing_product_fails(self):
        catalog, _, _ = _setup()
        with pytest.raises(StoreError, match="not found"):
            catalog.update_product(EditDraft(99, "Ghost", "1", ""))


class TestRemoveProduct:

    def test_removes_from_catalog_and_cart(self):
        catalog, store, cart = _setup()
        cart.add(catalog.get(1))
        cart.add(catalog.get(2))
        catalog.remove_product(1)
        assert store.calls == ["delete", "list"]
        assert catalog.get(1) is None
        assert cart.get(1) is None
        assert cart.get(2) is not None

    def test_failed_delete_changes_nothing(self):
        catalog, store, cart = _setup()
        cart.add(catalog.get(1))
        store.fail_on("delete")
        with pytest.raises(StoreError):
            catalog.remove_product(1)
        assert catalog.get(1) is not None
        assert cart.get(1) is not None
        assert store.calls == ["delete"]

    def test_failed_refresh_after_delete_still_cleans_cart(self):
        catalog, store, cart = _setup()
        cart.add(catalog.get(1))
        store.fail_on("list")
        with pytest.raises(StoreError):
            catalog.remove_product(1)
        assert cart.get(1) is None
        # The snapshot is only replaced by a successful refresh.
        assert catalog.get(1) is not None

    def test_deleting_unknown_id_is_not_an_error(self):
        catalog, _, _ = _setup()
        catalog.remove_product(42)
        assert len(catalog.products) == 2
