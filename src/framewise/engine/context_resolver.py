"""Context Resolver -- find which document, and which candidate selector, matches first.

Polls the main document and then every child frame until one of the candidate
selectors matches an element.  The frame list is re-read on every poll
because single-page apps attach and detach frames at will.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from framewise.engine.best_effort import best_effort
from framewise.errors import ResolutionTimeout
from framewise.models import POLL_INTERVAL_MS

if TYPE_CHECKING:
    from framewise.engine.protocols import BrowsingContext, InteractivePage

logger = logging.getLogger("framewise.engine.context_resolver")


@dataclasses.dataclass(frozen=True)
class ResolvedTarget:
    """Where (context) and how (selector) an element was found."""

    context: BrowsingContext
    selector: str


def normalize_candidates(candidates: str | Sequence[str]) -> list[str]:
    """Accept a single selector or an ordered list of alternatives."""
    if isinstance(candidates, str):
        selectors = [candidates]
    else:
        selectors = [s for s in candidates if s]
    if not selectors:
        raise ValueError("At least one candidate selector is required")
    return selectors


def child_frames(page: InteractivePage) -> list[Any]:
    """Current child frames of ``page`` in enumeration order, main frame excluded."""
    main = page.main_frame
    return [frame for frame in page.frames if frame is not main]


async def exists(context: BrowsingContext, selector: str) -> bool:
    """Existential probe.  Query errors count as no match."""
    try:
        handle = await context.query_selector(selector)
    except Exception as exc:
        logger.debug("Query for %r failed, treating as no match: %s", selector, exc)
        return False
    if handle is None:
        return False
    dispose = getattr(handle, "dispose", None)
    if dispose is not None:
        await best_effort(dispose(), "handle dispose")
    return True


async def _first_match(page: InteractivePage, selectors: list[str]) -> ResolvedTarget | None:
    # Main document always goes first.
    for selector in selectors:
        if await exists(page, selector):
            return ResolvedTarget(page, selector)

    for frame in child_frames(page):
        for selector in selectors:
            if await exists(frame, selector):
                return ResolvedTarget(frame, selector)

    return None


async def resolve(
    page: InteractivePage,
    candidates: str | Sequence[str],
    timeout: float,
) -> ResolvedTarget:
    """Return the first (context, selector) pair with a matching element.

    Args:
        page: Top-level page; its frames are enumerated on every poll.
        candidates: Selector or ordered alternatives for the same element.
        timeout: Budget in milliseconds.

    Raises:
        ResolutionTimeout: nothing matched anywhere before the budget ran out.
    """
    selectors = normalize_candidates(candidates)
    start = time.monotonic()
    deadline = start + timeout / 1000

    while time.monotonic() < deadline:
        target = await _first_match(page, selectors)
        if target is not None:
            logger.debug(
                "Resolved %r in %s after %.0fms",
                target.selector,
                "main document" if target.context is page else "frame",
                (time.monotonic() - start) * 1000,
            )
            return target

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        await asyncio.sleep(min(POLL_INTERVAL_MS / 1000, remaining))

    raise ResolutionTimeout(selectors, timeout)
