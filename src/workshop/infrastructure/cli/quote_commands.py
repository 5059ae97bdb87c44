"""CLI command that prices a selection of products."""

from __future__ import annotations

import click

from workshop.application.dto import CartDTO
from workshop.infrastructure.cli.product_commands import load_catalog


def _parse_items(raw: str) -> list[tuple[int, int]]:
    """Parse '3:2,7:1' into (product id, quantity) pairs."""
    pairs: list[tuple[int, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        id_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id, qty = int(id_str), int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
        if qty < 1:
            raise click.BadParameter(f"Quantity for product {product_id} must be positive.")
        pairs.append((product_id, qty))
    return pairs


def display_cart(cart: CartDTO) -> None:
    """Shared formatting for a cart or receipt."""
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Cost':>16} {'Total':>18}")
    click.echo(f"  {'-'*66}")
    for line in cart.lines:
        click.echo(
            f"  {line.name:<24} {line.quantity:>5} {line.unit_cost:>16} {line.line_total:>18}"
        )
    click.echo(f"  {'-'*66}")
    click.echo(f"  {'Total (' + str(cart.item_count) + ' items)':<30} {cart.total:>36}")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
def quote(items: str) -> None:
    """Price a selection of catalog products."""
    pairs = _parse_items(items)
    orch = load_catalog()

    for product_id, qty in pairs:
        if not orch.add_to_cart(product_id):
            raise click.ClickException(f"Product with ID '{product_id}' not found")
        entry = orch.state.cart.get(product_id)
        orch.set_quantity(product_id, entry.quantity.value - 1 + qty)

    cart = orch.cart_view()
    if cart.is_empty:
        click.echo("Nothing selected.")
        return
    display_cart(cart)
