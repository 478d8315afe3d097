"""framewise install -- Download the Playwright browser binaries framewise drives."""

from __future__ import annotations

import subprocess
import sys

import typer
from rich.console import Console
from rich.panel import Panel

console = Console()

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
INSTALL_TIMEOUT_SECONDS = 600


def build_install_command(browsers: list[str], with_deps: bool = False) -> list[str]:
    """Build the ``playwright install`` invocation for the current interpreter."""
    cmd = [sys.executable, "-m", "playwright", "install"]
    if with_deps:
        cmd.append("--with-deps")
    return cmd + browsers


def _fail(message: str, title: str) -> typer.Exit:
    console.print(Panel(message, title=f"[red]{title}[/red]", border_style="red"))
    return typer.Exit(code=3)


def install(
    browsers: str = typer.Option(
        "chromium",
        "--browsers",
        "-b",
        help="Browsers to install (comma-separated): chromium, firefox, webkit.",
    ),
    with_deps: bool = typer.Option(
        False,
        "--with-deps",
        help="Also install the system libraries the browsers need (may require root).",
    ),
) -> None:
    """Install the Playwright browsers used by framewise sessions."""
    browser_list = [b.strip().lower() for b in browsers.split(",") if b.strip()]
    unknown = [b for b in browser_list if b not in SUPPORTED_BROWSERS]
    if not browser_list or unknown:
        raise _fail(
            f"Unknown browser(s): {', '.join(unknown) or '(none given)'}\n\n"
            f"Choose from: {', '.join(SUPPORTED_BROWSERS)}",
            "Invalid Option",
        )

    cmd = build_install_command(browser_list, with_deps)
    try:
        with console.status(f"[bold blue]Installing {', '.join(browser_list)}...[/bold blue]", spinner="dots"):
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=INSTALL_TIMEOUT_SECONDS)
    except subprocess.TimeoutExpired:
        raise _fail("Installation timed out after 10 minutes.", "Timeout")
    except FileNotFoundError:
        raise _fail("Playwright is not installed.\n\nInstall it first:\n  pip install playwright", "Missing Dependency")

    if result.returncode != 0:
        raise _fail(
            f"playwright install exited with code {result.returncode}.\n\n"
            f"{(result.stderr or '').strip() or 'No error output.'}\n\n"
            f"[dim]Try running manually:[/dim]\n  {' '.join(cmd)}",
            "Installation Failed",
        )

    console.print(
        Panel(
            f"[green]Installed: {', '.join(browser_list)}[/green]",
            title="[bold green]Installation Complete[/bold green]",
            border_style="green",
        )
    )
