"""framewise click / type / select / snapshot -- one-shot interactions from the shell.

Each command opens a browser session, navigates to the URL, performs a single
interaction through the ActionExecutor and closes the browser again.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Optional

import typer
from playwright.async_api import Error as PlaywrightError
from rich.console import Console
from rich.panel import Panel

from framewise.config import FramewiseConfig, FramewiseConfigError
from framewise.engine.action_executor import ActionExecutor, ActionOptions
from framewise.engine.browser_runner import BrowserSession
from framewise.engine.diagnostics import debug_snapshot
from framewise.errors import InteractionError
from framewise.models import DEFAULT_RETRIES

console = Console(stderr=True)
output_console = Console()

logger = logging.getLogger("framewise.cli.actions")

Action = Callable[[ActionExecutor], Awaitable[None]]


def _load_config(config_path: Optional[Path], headless: Optional[bool]) -> FramewiseConfig:
    """Resolve config, letting --headless/--no-headless win over the file and env."""
    try:
        config = FramewiseConfig.load(config_path)
    except FramewiseConfigError as exc:
        console.print(Panel(f"[red]{exc}[/red]", title="[red]Config Error[/red]", border_style="red"))
        raise typer.Exit(code=2)
    if headless is not None:
        config.headless = headless
    return config


async def _run_in_session(
    config: FramewiseConfig,
    url: str,
    action: Action,
    label: str,
    snapshot_on_failure: bool,
) -> None:
    async with BrowserSession(config) as session:
        await session.navigate_to_url(url, f"Failed to open {url}")
        try:
            await action(session.executor())
        except InteractionError:
            if snapshot_on_failure:
                snap = await debug_snapshot(session.page, f"{label}-failure", config.snapshot_dir)
                if snap.screenshot_path is not None:
                    console.print(f"[dim]Snapshot saved to {snap.screenshot_path}[/dim]")
            raise


def _execute(
    config: FramewiseConfig,
    url: str,
    action: Action,
    label: str,
    snapshot_on_failure: bool = False,
) -> None:
    """Run ``action`` in a fresh session and map failures to exit codes."""
    logger.debug("Running %s against %s (headless=%s)", label, url, config.headless)
    try:
        asyncio.run(_run_in_session(config, url, action, label, snapshot_on_failure))
    except InteractionError as exc:
        console.print(
            Panel(
                f"[red]{exc}[/red]",
                title=f"[red]{label.capitalize()} Failed[/red]",
                border_style="red",
            )
        )
        raise typer.Exit(code=1)
    except PlaywrightError as exc:
        console.print(
            Panel(
                f"[red]{exc}[/red]",
                title="[red]Browser Error[/red]",
                border_style="red",
            )
        )
        raise typer.Exit(code=1)


def _options(timeout: Optional[int], retries: int, delay: Optional[int]) -> ActionOptions:
    return ActionOptions(timeout=timeout, retries=retries, delay=delay)


# Shared option declarations
_URL = typer.Argument(..., help="Page to open before interacting.")
_SELECTORS = typer.Option(
    ...,
    "--selector",
    "-s",
    help="Candidate CSS selector. Repeat for alternatives; earlier ones are preferred.",
)
_TIMEOUT = typer.Option(None, "--timeout", "-t", help="Resolution/visibility budget in ms (default: config).")
_RETRIES = typer.Option(DEFAULT_RETRIES, "--retries", "-r", min=0, help="Extra attempts after the first.")
_CONFIG = typer.Option(None, "--config", "-c", help="Path to framewise.yaml.")
_HEADLESS = typer.Option(None, "--headless/--no-headless", help="Override the configured headless mode.")
_SNAPSHOT = typer.Option(False, "--snapshot-on-failure", help="Capture a debug snapshot if the action fails.")


def click(
    url: str = _URL,
    selector: list[str] = _SELECTORS,
    timeout: Optional[int] = _TIMEOUT,
    retries: int = _RETRIES,
    delay: Optional[int] = typer.Option(None, "--delay", help="Click hold in ms (default: 80)."),
    config_path: Optional[Path] = _CONFIG,
    headless: Optional[bool] = _HEADLESS,
    snapshot_on_failure: bool = _SNAPSHOT,
) -> None:
    """Click the first candidate that matches, in the page or any frame."""
    config = _load_config(config_path, headless)
    options = _options(timeout, retries, delay)

    async def action(executor: ActionExecutor) -> None:
        await executor.click_element(selector, options)

    _execute(config, url, action, "click", snapshot_on_failure)
    output_console.print(f"[green]Clicked[/green] {' | '.join(selector)}")


def type_text(
    url: str = _URL,
    selector: list[str] = _SELECTORS,
    text: str = typer.Option(..., "--text", help="Text to type."),
    timeout: Optional[int] = _TIMEOUT,
    retries: int = _RETRIES,
    delay: Optional[int] = typer.Option(None, "--delay", help="Delay between keystrokes in ms (default: config)."),
    config_path: Optional[Path] = _CONFIG,
    headless: Optional[bool] = _HEADLESS,
    snapshot_on_failure: bool = _SNAPSHOT,
) -> None:
    """Clear a field (best-effort) and type text into it."""
    config = _load_config(config_path, headless)
    options = _options(timeout, retries, delay)

    async def action(executor: ActionExecutor) -> None:
        await executor.type_into_field(selector, text, options)

    _execute(config, url, action, "type", snapshot_on_failure)
    output_console.print(f"[green]Typed[/green] {len(text)} characters into {' | '.join(selector)}")


def select(
    url: str = _URL,
    item_text: str = typer.Argument(..., help="Visible text (or data-value) of the item to pick."),
    opener: Optional[list[str]] = typer.Option(
        None,
        "--open",
        "-o",
        help="Candidate selector of the control that opens the dropdown. Repeatable.",
    ),
    timeout: Optional[int] = _TIMEOUT,
    config_path: Optional[Path] = _CONFIG,
    headless: Optional[bool] = _HEADLESS,
    snapshot_on_failure: bool = _SNAPSHOT,
) -> None:
    """Pick an item from a dropdown, optionally clicking its opener first."""
    config = _load_config(config_path, headless)
    options = ActionOptions(timeout=timeout)

    async def action(executor: ActionExecutor) -> None:
        if opener:
            await executor.click_element(opener, options)
        await executor.select_dropdown_item(item_text, options)

    _execute(config, url, action, "select", snapshot_on_failure)
    output_console.print(f'[green]Selected[/green] "{item_text}"')


def snapshot(
    url: str = _URL,
    name: str = typer.Option("debug", "--name", "-n", help="Base file name for the screenshot."),
    config_path: Optional[Path] = _CONFIG,
    headless: Optional[bool] = _HEADLESS,
) -> None:
    """Open a page, save a full-page screenshot and print its visible text."""
    config = _load_config(config_path, headless)
    captured = {}

    async def action(executor: ActionExecutor) -> None:
        captured["snapshot"] = await debug_snapshot(executor.page, name, config.snapshot_dir)

    _execute(config, url, action, "snapshot")

    snap = captured["snapshot"]
    location = str(snap.screenshot_path) if snap.screenshot_path else "[red]screenshot failed[/red]"
    output_console.print(
        Panel(
            snap.text or "[dim](no visible text)[/dim]",
            title=f"[bold cyan]{name}[/bold cyan]  {location}",
            border_style="cyan",
        )
    )
