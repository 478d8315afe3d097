"""framewise CLI -- Main Typer entry point.

Registers all subcommands and provides --version / --verbose global options.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from framewise import __version__

TAGLINE = "Find it in any frame, wait until it's real, then click."

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]framewise[/bold cyan] v{__version__}")
        console.print(f"  {TAGLINE}", style="dim")
        raise typer.Exit()


app = typer.Typer(
    name="framewise",
    help=f"framewise -- {TAGLINE}",
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show framewise version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
) -> None:
    """framewise -- resilient clicks, typing and dropdown picks for SPA pages and iframes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s  %(message)s")


# ── Register subcommands ──────────────────────────────────────────────────

from framewise.cli.actions import click, select, snapshot, type_text  # noqa: E402
from framewise.cli.config_cmd import config_app  # noqa: E402
from framewise.cli.install import install  # noqa: E402

app.command(name="click", help="Click the first matching element in the page or any frame.")(click)
app.command(name="type", help="Clear a field (best-effort) and type text into it.")(type_text)
app.command(name="select", help="Pick an item from an open dropdown by its text.")(select)
app.command(name="snapshot", help="Save a screenshot and print the page's visible text.")(snapshot)
app.command(name="install", help="Install browser dependencies (Playwright).")(install)
app.add_typer(config_app, name="config", help="View framewise configuration.")
