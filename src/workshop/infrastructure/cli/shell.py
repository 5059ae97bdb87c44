"""Interactive text front end.

Renders the current page after every state change and maps typed
commands to orchestrator actions. Commands available everywhere:
``home``, ``select``, ``cart``, ``products``, ``back``, ``help``, ``quit``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click

from workshop.application.orchestrator import Orchestrator
from workshop.application.state import AppState
from workshop.domain.exceptions import DomainException
from workshop.domain.model.draft import EditDraft
from workshop.domain.model.navigation import Page
from workshop.infrastructure.bootstrap import orchestrator
from workshop.infrastructure.cli.quote_commands import display_cart

_PAGE_HELP: dict[Page, str] = {
    Page.HOME: "select | products",
    Page.SELECT: "add ID | cart",
    Page.SELECTIONS: "+ ID | - ID | qty ID N | order",
    Page.PRODUCTS: (
        "new | edit ID | delete ID | name TEXT | cost VALUE | image PATH | save | cancel"
    ),
}

_GLOBAL_HELP = "home | back | help | quit"


class ShellUsageError(Exception):
    """A command was typed with missing or malformed arguments."""


def _int_arg(args: list[str], index: int, what: str = "ID") -> int:
    try:
        return int(args[index])
    except (IndexError, ValueError):
        raise ShellUsageError(f"expected {what}")


class Shell:

    def __init__(self, orch: Orchestrator) -> None:
        self._orch = orch
        self._running = False
        self._commands: dict[Page, dict[str, Callable[[list[str]], None]]] = {
            Page.HOME: {},
            Page.SELECT: {"add": self._add_to_cart},
            Page.SELECTIONS: {
                "+": lambda a: self._orch.increment(_int_arg(a, 0)),
                "-": lambda a: self._orch.decrement(_int_arg(a, 0)),
                "qty": lambda a: self._orch.set_quantity(_int_arg(a, 0), _int_arg(a, 1, "N")),
                "order": self._place_order,
            },
            Page.PRODUCTS: {
                "new": lambda a: self._orch.open_new_draft(),
                "edit": self._edit,
                "delete": self._delete,
                "name": lambda a: self._field(name=" ".join(a)),
                "cost": lambda a: self._field(cost=" ".join(a)),
                "image": self._image,
                "save": self._save,
                "cancel": lambda a: self._orch.cancel_draft(),
            },
        }
        self._global: dict[str, Callable[[list[str]], None]] = {
            "home": lambda a: self._orch.go_to(Page.HOME),
            "select": lambda a: self._orch.go_to(Page.SELECT),
            "cart": lambda a: self._orch.go_to(Page.SELECTIONS),
            "products": lambda a: self._orch.go_to(Page.PRODUCTS),
            "back": lambda a: self._orch.go_back(),
            "help": lambda a: self._help(),
            "quit": lambda a: self._stop(),
        }

    # --- Loop -----------------------------------------------------------------

    def run(self) -> None:
        if not self._orch.start():
            click.echo("! Could not load products; the catalog is empty for now.")
        unsubscribe = self._orch.state.subscribe(self.render)
        self._running = True
        try:
            self.render(self._orch.state)
            while self._running:
                try:
                    line = click.prompt(f"{self._orch.current_page.value}>", prompt_suffix=" ")
                except click.Abort:
                    break
                self.dispatch(line)
        finally:
            unsubscribe()

    def dispatch(self, line: str) -> None:
        if not line.strip():
            return
        name, *args = line.split()
        page_commands = self._commands[self._orch.current_page]
        handler = page_commands.get(name) or self._global.get(name)
        if handler is None:
            click.echo(f"? Unknown command '{name}'. Type 'help'.")
            return
        try:
            handler(args)
        except ShellUsageError as exc:
            click.echo(f"? {name}: {exc}")

    # --- Rendering ------------------------------------------------------------

    def render(self, state: AppState) -> None:
        page = state.navigation.current
        click.echo()
        click.echo(f"== {page.value} ==")
        if page is Page.SELECT:
            self._render_catalog()
            cart = self._orch.cart_view()
            if not cart.is_empty:
                click.echo(f"Selected: {cart.item_count} items, {cart.total}")
        elif page is Page.SELECTIONS:
            cart = self._orch.cart_view()
            if cart.is_empty:
                click.echo("Nothing selected yet.")
            else:
                display_cart(cart)
        elif page is Page.PRODUCTS:
            self._render_catalog()
            self._render_draft(state)
        click.echo(f"[{_PAGE_HELP[page]} | {_GLOBAL_HELP}]")

    def _render_catalog(self) -> None:
        products = self._orch.catalog_view()
        if not products:
            click.echo("No products yet.")
        for p in products:
            click.echo(f"  {p.id:<6} {p.name:<24} {p.cost:>18}")

    def _render_draft(self, state: AppState) -> None:
        draft = state.active_draft
        if draft is None:
            return
        title = "Edit product" if isinstance(draft, EditDraft) else "New product"
        image = draft.image if len(draft.image) <= 40 else draft.image[:37] + "..."
        click.echo(f"-- {title}: name={draft.name!r} cost={draft.cost!r} image={image}")

    def _help(self) -> None:
        click.echo(f"[{_PAGE_HELP[self._orch.current_page]} | {_GLOBAL_HELP}]")

    # --- Commands -------------------------------------------------------------

    def _stop(self) -> None:
        self._running = False

    def _add_to_cart(self, args: list[str]) -> None:
        if not self._orch.add_to_cart(_int_arg(args, 0)):
            click.echo("! No such product.")

    def _place_order(self, args: list[str]) -> None:
        receipt = self._orch.place_order()
        if receipt is None:
            click.echo("! Nothing selected.")
            return
        click.echo(f"Order accepted. Total: {receipt.total}")

    def _edit(self, args: list[str]) -> None:
        if not self._orch.open_edit_draft(_int_arg(args, 0)):
            click.echo("! No such product.")

    def _delete(self, args: list[str]) -> None:
        if not self._orch.delete_product(_int_arg(args, 0)):
            click.echo("! Delete failed; see the log.")

    def _field(self, **changes: str) -> None:
        if not self._orch.update_draft(**changes):
            click.echo("! Open a form first with 'new' or 'edit ID'.")

    def _image(self, args: list[str]) -> None:
        if not args:
            raise ShellUsageError("expected PATH")
        path = Path(" ".join(args)).expanduser()
        try:
            raw = path.read_bytes()
        except OSError as exc:
            click.echo(f"! Cannot read {path}: {exc.strerror}")
            return
        if not self._orch.assign_image(raw, filename=path.name):
            click.echo("! Not an image.")

    def _save(self, args: list[str]) -> None:
        if not self._orch.save_draft():
            click.echo("! Product not saved; fill in name and cost or see the log.")


@click.command("shell")
def shell() -> None:
    """Start an interactive catalog session."""
    try:
        orch = orchestrator()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    Shell(orch).run()
