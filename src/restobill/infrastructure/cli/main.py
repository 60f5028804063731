import logging
import sys
from pathlib import Path

import click

from restobill.application.show_menu import ShowMenuHandler
from restobill.infrastructure.bootstrap import build_restaurant
from restobill.infrastructure.menu_seed import default_menu_items
from restobill.infrastructure.persistence.in_memory_menu_repository import (
    InMemoryMenuRepository,
)
from restobill.infrastructure.cli.session import display_menu, run_session

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@click.group()
def cli() -> None:
    """restobill — Restaurant Order & Billing"""


@cli.command("menu")
def menu() -> None:
    """Print the full menu grouped by category."""
    display_menu(ShowMenuHandler(InMemoryMenuRepository(default_menu_items())).handle())


@cli.command("run")
@click.option(
    "--receipt-dir",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Directory receipt files are written to (default: current directory).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def run(receipt_dir: Path | None, verbose: bool) -> None:
    """Start an interactive order & billing session."""
    _configure_logging(verbose)
    restaurant = build_restaurant(receipt_dir=receipt_dir)
    try:
        run_session(restaurant)
    except click.Abort:
        # end of input closes the session like option 8
        click.echo()
        click.echo("Exiting...")
