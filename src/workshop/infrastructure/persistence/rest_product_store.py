"""ProductStore backed by a hosted PostgREST (Supabase-style) table.

Rows are ``{"id", "name", "cost", "image"}``; ids are generated by the
database. Every HTTP or decoding failure is raised as StoreError.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

import httpx

from workshop.domain.exceptions import StoreError, ValidationError
from workshop.domain.model.product import Product, ProductFields
from workshop.domain.model.value_objects import Money
from workshop.domain.repository.product_store import ProductStore

_log = logging.getLogger("workshop.store")

_RETURN_ROWS = "return=representation"


class RestProductStore(ProductStore):

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        table: str = "products",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if api_key:
            headers["apikey"] = api_key
            headers["Authorization"] = f"Bearer {api_key}"
        self._table = table
        self._path = f"/rest/v1/{table}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    # --- ProductStore interface -----------------------------------------------

    def list(self) -> list[Product]:
        rows = self._request("GET", params={"select": "*", "order": "id.asc"})
        return [self._to_product(row) for row in self._rows(rows)]

    def insert(self, fields: ProductFields) -> Product:
        rows = self._rows(
            self._request(
                "POST",
                params={"select": "*"},
                json=[self._to_row(fields)],
                prefer=_RETURN_ROWS,
            )
        )
        if not rows:
            raise StoreError(f"Insert into '{self._table}' returned no row")
        return self._to_product(rows[0])

    def update(self, product_id: int, fields: ProductFields) -> Product:
        rows = self._rows(
            self._request(
                "PATCH",
                params={"id": f"eq.{product_id}", "select": "*"},
                json=self._to_row(fields),
                prefer=_RETURN_ROWS,
            )
        )
        if not rows:
            raise StoreError(f"Product with ID '{product_id}' not found")
        return self._to_product(rows[0])

    def delete(self, product_id: int) -> None:
        self._request("DELETE", params={"id": f"eq.{product_id}"})

    # --- Lifecycle ------------------------------------------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RestProductStore:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # --- HTTP helpers ---------------------------------------------------------

    def _request(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        prefer: str | None = None,
    ) -> Any:
        headers = {"Prefer": prefer} if prefer else None
        try:
            response = self._client.request(
                method, self._path, params=params, json=json, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            _log.warning(
                "store_http_error",
                extra={"data": {"method": method, "status": status}},
            )
            raise StoreError(
                f"{method} {self._table} failed with HTTP {status}: "
                f"{exc.response.text[:200]}"
            ) from exc
        except httpx.HTTPError as exc:
            _log.warning(
                "store_transport_error",
                extra={"data": {"method": method, "error": str(exc)}},
            )
            raise StoreError(f"{method} {self._table} failed: {exc}") from exc

        if not response.content:
            return None
        try:
            return response.json(parse_float=Decimal)
        except ValueError as exc:
            raise StoreError(f"{method} {self._table} returned invalid JSON") from exc

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _rows(payload: Any) -> list[dict[str, Any]]:
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise StoreError(f"Expected a list of rows, got {type(payload).__name__}")
        return payload

    @staticmethod
    def _to_row(fields: ProductFields) -> dict[str, Any]:
        amount = fields.cost.amount
        cost: int | str = int(amount) if amount == amount.to_integral_value() else format(amount, "f")
        return {"name": fields.name, "cost": cost, "image": fields.image}

    @staticmethod
    def _to_product(row: dict[str, Any]) -> Product:
        try:
            return Product(
                id=int(row["id"]),
                name=str(row["name"]),
                cost=Money.of(row["cost"]),
                image=str(row.get("image") or ""),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise StoreError(f"Malformed product row: {row!r}") from exc
