"""Runtime configuration.

Values come from ``WORKSHOP_*`` environment variables; a ``.env`` file
found from the current directory upwards is loaded first without
overriding anything already set.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from workshop.domain.model.draft import PLACEHOLDER_IMAGE
from workshop.domain.service.currency import CurrencyFormat


def _load_env() -> None:
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path, override=False)


def _get_env(key: str, default: str | None = None) -> str | None:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    return value


def _get_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_log_level(key: str, default: int) -> int:
    value = os.getenv(key)
    if not value:
        return default
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    store_backend: str = "rest"
    store_url: str = ""
    store_key: str = ""
    store_table: str = "products"
    store_timeout: float = 10.0
    data_dir: Path = Path("data")
    log_dir: Path | None = None
    log_level: int = logging.INFO
    currency_suffix: str = "so'm"
    placeholder_image: str = PLACEHOLDER_IMAGE

    @property
    def currency_format(self) -> CurrencyFormat:
        return CurrencyFormat(suffix=self.currency_suffix)


def get_settings() -> Settings:
    _load_env()
    log_dir = _get_env("WORKSHOP_LOG_DIR")
    return Settings(
        store_backend=(_get_env("WORKSHOP_STORE", "rest") or "rest").lower(),
        store_url=_get_env("WORKSHOP_STORE_URL", "") or "",
        store_key=_get_env("WORKSHOP_STORE_KEY", "") or "",
        store_table=_get_env("WORKSHOP_STORE_TABLE", "products") or "products",
        store_timeout=_get_float("WORKSHOP_STORE_TIMEOUT", 10.0),
        data_dir=Path(_get_env("WORKSHOP_DATA_DIR", "data") or "data"),
        log_dir=Path(log_dir) if log_dir else None,
        log_level=_get_log_level("WORKSHOP_LOG_LEVEL", logging.INFO),
        currency_suffix=_get_env("WORKSHOP_CURRENCY_SUFFIX", "so'm") or "so'm",
        placeholder_image=_get_env("WORKSHOP_PLACEHOLDER_IMAGE", PLACEHOLDER_IMAGE)
        or PLACEHOLDER_IMAGE,
    )
