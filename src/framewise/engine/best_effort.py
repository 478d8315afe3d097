"""Fire-and-forget helper for optional interaction steps."""

from __future__ import annotations

import logging
from collections.abc import Awaitable

logger = logging.getLogger("framewise.engine.best_effort")


async def best_effort(step: Awaitable[object], description: str) -> None:
    """Await ``step`` and discard both its result and any failure.

    Used for steps that improve the odds of an interaction succeeding but are
    not part of its contract (scrolling, clearing a field).  Callers must not
    assume the step took effect.
    """
    try:
        await step
    except Exception as exc:
        logger.debug("Ignored failure in %s: %s", description, exc)
