"""framewise config -- Inspect the effective configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from framewise.config import ENV_PREFIX, FramewiseConfig, FramewiseConfigError, find_config_file

console = Console()

config_app = typer.Typer(
    name="config",
    help="View framewise configuration.",
    no_args_is_help=True,
)


def _source(env_name: str, config_file: Path | None) -> str:
    if os.environ.get(f"{ENV_PREFIX}{env_name}") is not None:
        return f"env {ENV_PREFIX}{env_name}"
    return "file" if config_file else "default"


@config_app.command(name="show")
def config_show(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to framewise.yaml (default: search upward from cwd).",
    ),
) -> None:
    """Show the resolved configuration: file values merged with defaults and env overrides."""
    try:
        config = FramewiseConfig.load(config_path)
    except FramewiseConfigError as exc:
        console.print(Panel(f"[red]{exc}[/red]", title="[red]Config Error[/red]", border_style="red"))
        raise typer.Exit(code=2)

    config_file = config_path or find_config_file()

    table = Table(title="framewise Configuration", border_style="cyan")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_column("Source", style="dim")

    table.add_row("Config File", str(config_file) if config_file else "-", "found" if config_file else "none")
    table.add_row("Headless", str(config.headless), _source("HEADLESS", config_file))
    table.add_row("Navigation Timeout", f"{config.navigation_timeout}ms", _source("NAVIGATION_TIMEOUT", config_file))
    table.add_row("Selector Timeout", f"{config.selector_timeout}ms", _source("SELECTOR_TIMEOUT", config_file))
    table.add_row("Typing Delay", f"{config.typing_delay}ms", _source("TYPING_DELAY", config_file))
    table.add_row(
        "Dropdown Item Selector",
        config.dropdown_item_selector or "-",
        _source("DROPDOWN_ITEM_SELECTOR", config_file),
    )
    table.add_row("User Agent", config.user_agent or "(browser default)", _source("USER_AGENT", config_file))
    table.add_row("Viewport", f"{config.viewport[0]}x{config.viewport[1]}", "file" if config_file else "default")
    table.add_row("Snapshot Dir", str(config.snapshot_dir), "file" if config_file else "default")

    console.print()
    console.print(table)
    console.print()
