"""Debug snapshots: a full-page screenshot plus the start of the visible text."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

from framewise.models import SNAPSHOT_TEXT_LIMIT

logger = logging.getLogger("framewise.engine.diagnostics")

_VISIBLE_TEXT = "(limit) => (document.body && document.body.innerText ? document.body.innerText.slice(0, limit) : '')"


@dataclasses.dataclass
class DebugSnapshot:
    name: str
    screenshot_path: Path | None
    text: str


async def debug_snapshot(page: Any, name: str = "debug", directory: Path | None = None) -> DebugSnapshot:
    """Capture page state for debugging. Never raises."""
    target_dir = directory or Path.cwd()
    screenshot_path: Path | None = target_dir / f"{name}.png"
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=str(screenshot_path), full_page=True)
    except Exception as exc:
        logger.debug("Screenshot for %s failed: %s", name, exc)
        screenshot_path = None

    try:
        text = await page.evaluate(_VISIBLE_TEXT, SNAPSHOT_TEXT_LIMIT) or ""
    except Exception as exc:
        logger.debug("Visible text capture for %s failed: %s", name, exc)
        text = ""

    logger.info("DEBUG(%s) visible text:\n%s", name, text)
    return DebugSnapshot(name=name, screenshot_path=screenshot_path, text=text)
