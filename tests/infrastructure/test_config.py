"""Tests for environment-driven settings and the composition root."""

import logging
from pathlib import Path

import pytest

from workshop.domain.exceptions import ValidationError
from workshop.infrastructure import bootstrap, config
from workshop.infrastructure.config import Settings, get_settings
from workshop.infrastructure.persistence.json_product_store import JsonProductStore
from workshop.infrastructure.persistence.rest_product_store import RestProductStore

_VARS = [
    "WORKSHOP_STORE",
    "WORKSHOP_STORE_URL",
    "WORKSHOP_STORE_KEY",
    "WORKSHOP_STORE_TABLE",
    "WORKSHOP_STORE_TIMEOUT",
    "WORKSHOP_DATA_DIR",
    "WORKSHOP_LOG_DIR",
    "WORKSHOP_LOG_LEVEL",
    "WORKSHOP_CURRENCY_SUFFIX",
    "WORKSHOP_PLACEHOLDER_IMAGE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in _VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config, "_load_env", lambda: None)


class TestGetSettings:

    def test_defaults(self):
        settings = get_settings()
        assert settings.store_backend == "rest"
        assert settings.store_table == "products"
        assert settings.store_timeout == 10.0
        assert settings.log_dir is None
        assert settings.log_level == logging.INFO
        assert settings.currency_format.suffix == "so'm"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WORKSHOP_STORE", "JSON")
        monkeypatch.setenv("WORKSHOP_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("WORKSHOP_STORE_TIMEOUT", "2.5")
        monkeypatch.setenv("WORKSHOP_LOG_LEVEL", "debug")
        monkeypatch.setenv("WORKSHOP_LOG_DIR", str(tmp_path / "logs"))
        monkeypatch.setenv("WORKSHOP_CURRENCY_SUFFIX", "UZS")
        settings = get_settings()
        assert settings.store_backend == "json"
        assert settings.data_dir == Path(tmp_path)
        assert settings.store_timeout == 2.5
        assert settings.log_level == logging.DEBUG
        assert settings.log_dir == tmp_path / "logs"
        assert settings.currency_format.suffix == "UZS"

    def test_bad_numbers_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("WORKSHOP_STORE_TIMEOUT", "soon")
        monkeypatch.setenv("WORKSHOP_LOG_LEVEL", "chatty")
        settings = get_settings()
        assert settings.store_timeout == 10.0
        assert settings.log_level == logging.INFO


class TestProductStoreFactory:

    def test_json_backend(self, tmp_path):
        store = bootstrap.product_store(Settings(store_backend="json", data_dir=tmp_path))
        assert isinstance(store, JsonProductStore)
        assert (tmp_path / "products.json").exists()

    def test_rest_backend(self):
        store = bootstrap.product_store(Settings(store_url="https://example.test"))
        assert isinstance(store, RestProductStore)
        store.close()

    def test_rest_backend_needs_url(self):
        with pytest.raises(ValidationError, match="WORKSHOP_STORE_URL"):
            bootstrap.product_store(Settings())

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown store backend"):
            bootstrap.product_store(Settings(store_backend="redis"))

    def test_app_state_uses_configured_placeholder(self, tmp_path):
        settings = Settings(store_backend="json", data_dir=tmp_path, placeholder_image="none.png")
        state = bootstrap.app_state(bootstrap.product_store(settings), settings)
        assert state.new_draft.image == "none.png"
        assert state.catalog.products == ()
