import click

from workshop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from workshop.infrastructure.cli.quote_commands import quote
from workshop.infrastructure.cli.shell import shell


@click.group()
def cli() -> None:
    """Workshop — furniture catalog and order calculator"""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
cli.add_command(quote)
cli.add_command(shell)
