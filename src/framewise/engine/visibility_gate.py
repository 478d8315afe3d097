"""Visibility Gate -- block until a matched element is actually rendered.

Playwright's ``state="visible"`` check alone passes for elements that are
attached but still collapsed or faded out, so a second in-context predicate
rechecks geometry and computed style.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from framewise.errors import VisibilityTimeout

if TYPE_CHECKING:
    from framewise.engine.protocols import BrowsingContext

logger = logging.getLogger("framewise.engine.visibility_gate")

RENDERED_PREDICATE = """(selector) => {
    const el = document.querySelector(selector);
    if (!el) return false;
    const rect = el.getBoundingClientRect();
    const style = window.getComputedStyle(el);
    return (
        rect.width > 0 &&
        rect.height > 0 &&
        style.display !== 'none' &&
        style.visibility !== 'hidden' &&
        style.opacity !== '0'
    );
}"""


async def await_visible(context: BrowsingContext, selector: str, timeout: float) -> None:
    """Wait until ``selector`` is present, sized, and not hidden by style.

    Each of the two phases gets the full ``timeout`` (milliseconds).

    Raises:
        VisibilityTimeout: either phase ran out of time.
    """
    try:
        await context.wait_for_selector(selector, state="visible", timeout=timeout)
        await context.wait_for_function(RENDERED_PREDICATE, arg=selector, timeout=timeout)
    except PlaywrightTimeoutError as exc:
        logger.debug("Visibility wait for %r timed out: %s", selector, exc)
        raise VisibilityTimeout(selector, timeout) from exc
