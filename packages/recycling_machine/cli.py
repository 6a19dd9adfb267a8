# ruff: noqa: I001
"""CLI for the ``recycling_machine`` package.

Typer-based console interface over a single in-memory machine. Environment
variables (``RCM_MACHINE_ID``, ``RCM_LOCATION``, ``RCM_CATALOG_PATH``,
``RECYCLING_MACHINE_LOG_LEVEL``) are loaded from a local ``.env`` using
``python-dotenv`` before any command runs; the root options override them.
Business logic lives in ``recycling_machine.ledger``.

Commands
--------
- ``run``: interactive session (prompt for type and weight until quit).
- ``recycle --item TYPE:WEIGHT [...]``: submit a batch non-interactively.
- ``price TYPE WEIGHT``: quote an item's value without paying out.
- ``catalog``: list accepted types and prices.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from .config import Settings
from .errors import InvalidInput, UnknownItemType
from .ledger import Ledger
from .logging_setup import configure_logging
from .machine import build_ledger, display, parse_weight, submit
from .models import Transaction, format_amount


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Simulate a reverse-vending recycling machine. "
        "Loads RCM_* settings from a local .env before running."
    ),
)


def _ledger_from_ctx(ctx: typer.Context) -> Ledger:
    """Build the machine for this invocation or exit non-zero with a clear error."""

    settings: Settings = ctx.obj if isinstance(ctx.obj, Settings) else Settings.from_env()
    try:
        return build_ledger(settings)
    except FileNotFoundError:
        typer.echo(f"Error: Catalog file not found: {settings.catalog_path}", err=True)
    except PermissionError:
        typer.echo(f"Error: Permission denied: {settings.catalog_path}", err=True)
    except ValueError as e:
        typer.echo(f"Error: failed to load catalog: {e}", err=True)
    raise typer.Exit(1)


@app.command("run")
def run_cmd(ctx: typer.Context) -> None:
    """Start an interactive session (Enter on an empty type to quit)."""

    from .term_ui import run_session  # deferred: prompt_toolkit import is slow

    ledger = _ledger_from_ctx(ctx)
    run_session(ledger, echo=typer.echo)


@app.command("recycle")
def recycle_cmd(
    ctx: typer.Context,
    items: Annotated[
        list[str],
        typer.Option(
            "--item",
            "-i",
            help="Item to recycle as TYPE:WEIGHT (repeatable), e.g. --item glass:2.0",
        ),
    ],
) -> None:
    """Submit items in order and print one result line per item, then the summary."""

    ledger = _ledger_from_ctx(ctx)
    for raw in items:
        type_text, sep, weight_text = raw.rpartition(":")
        if not sep:
            type_text, weight_text = raw, ""
        typer.echo(f"{type_text.strip() or '?'}: {submit(ledger, type_text, weight_text)}")
    typer.echo(display(ledger))


@app.command("price")
def price_cmd(
    ctx: typer.Context,
    item_type: Annotated[str, typer.Argument(help="Item type, e.g. glass")],
    weight: Annotated[str, typer.Argument(help="Weight in pounds")],
) -> None:
    """Quote the value of an item without paying out or recording it."""

    ledger = _ledger_from_ctx(ctx)
    try:
        price = ledger.price_of(Transaction(item_type, parse_weight(weight)))
    except InvalidInput:
        typer.echo(f"Error: Invalid Input: {weight!r}", err=True)
        raise typer.Exit(1) from None
    except UnknownItemType as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(f"${format_amount(price)}")


@app.command("catalog")
def catalog_cmd(ctx: typer.Context) -> None:
    """List accepted item types with their price per pound."""

    ledger = _ledger_from_ctx(ctx)
    for entry in ledger.catalog:
        typer.echo(f"{entry.type}\t${format_amount(entry.price_per_weight)}/lb")


@app.callback()
def _root(
    ctx: typer.Context,
    *,
    machine_id: str | None = typer.Option(
        None, "--machine-id", help="Machine identifier (falls back to RCM_MACHINE_ID)."
    ),
    location: str | None = typer.Option(
        None, help="Machine location (falls back to RCM_LOCATION)."
    ),
    catalog_path: Path | None = typer.Option(
        None,
        dir_okay=False,
        help="JSON catalog file replacing the default prices (falls back to RCM_CATALOG_PATH).",
    ),
    log_level: str | None = typer.Option(
        None, help="Log level, e.g. DEBUG or WARNING (falls back to RECYCLING_MACHINE_LOG_LEVEL)."
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables), configures logging and resolves the
    machine settings shared by every subcommand.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    try:
        configure_logging(log_level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    ctx.obj = Settings.from_env().override(
        machine_id=machine_id,
        location=location,
        catalog_path=catalog_path,
    )


if __name__ == "__main__":  # pragma: no cover
    # Running as a module: `python -m recycling_machine.cli`
    app()
