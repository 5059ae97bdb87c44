"""CLI commands for managing the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from workshop.application.orchestrator import Orchestrator
from workshop.domain.exceptions import DomainException
from workshop.domain.model.draft import EditDraft, with_changes
from workshop.domain.service.image_encoder import encode_image
from workshop.infrastructure.bootstrap import orchestrator

_image_file = click.Path(exists=True, dir_okay=False, path_type=Path)


def load_catalog() -> Orchestrator:
    """Build the orchestrator and fetch the catalog, failing loudly."""
    try:
        orch = orchestrator()
        orch.state.catalog.refresh()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    return orch


def _image_value(image: Path | None, image_url: str | None) -> str | None:
    if image is not None:
        try:
            return encode_image(image.read_bytes(), filename=image.name)
        except DomainException as exc:
            raise click.BadParameter(str(exc), param_hint="--image")
    return image_url


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    orch = load_catalog()
    products = orch.catalog_view()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Cost':>18}")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.cost:>18}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--cost", required=True, help="Cost in so'm (e.g. 150000).")
@click.option("--image", type=_image_file, help="Image file to embed.")
@click.option("--image-url", help="Image URL to store as-is.")
def product_add(name: str, cost: str, image: Path | None, image_url: str | None) -> None:
    """Add a new product to the catalog."""
    orch = load_catalog()
    draft = with_changes(orch.state.new_draft, name=name, cost=cost)
    picture = _image_value(image, image_url)
    if picture is not None:
        draft = with_changes(draft, image=picture)

    try:
        product = orch.state.catalog.add_product(draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {orch.format(product).cost}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", help="New name.")
@click.option("--cost", help="New cost in so'm.")
@click.option("--image", type=_image_file, help="New image file to embed.")
@click.option("--image-url", help="New image URL.")
def product_update(
    product_id: int,
    name: str | None,
    cost: str | None,
    image: Path | None,
    image_url: str | None,
) -> None:
    """Change a product's name, cost or image."""
    orch = load_catalog()
    current = orch.state.catalog.get(product_id)
    if current is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    changes: dict[str, str] = {}
    if name is not None:
        changes["name"] = name
    if cost is not None:
        changes["cost"] = cost
    picture = _image_value(image, image_url)
    if picture is not None:
        changes["image"] = picture

    try:
        product = orch.state.catalog.update_product(with_changes(EditDraft.of(current), **changes))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated ({orch.format(product).cost})")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    orch = load_catalog()

    try:
        orch.state.catalog.remove_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
