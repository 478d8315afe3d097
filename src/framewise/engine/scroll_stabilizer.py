"""Scroll Stabilizer -- center the target in the viewport before acting on it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from framewise.engine.best_effort import best_effort

if TYPE_CHECKING:
    from framewise.engine.protocols import BrowsingContext

SCROLL_TO_CENTER = """(selector) => {
    const el = document.querySelector(selector);
    if (el) el.scrollIntoView({ block: 'center', inline: 'center' });
}"""


async def ensure_in_view(context: BrowsingContext, selector: str) -> None:
    """Scroll ``selector`` to the viewport center.  Never raises."""
    await best_effort(context.evaluate(SCROLL_TO_CENTER, selector), f"scroll to {selector}")
