"""framewise Action Executor -- retryable click, type, and dropdown selection.

Composes the Context Resolver, Visibility Gate and Scroll Stabilizer into
high-level actions.  Every attempt re-resolves from scratch: nothing about a
previous attempt (context, selector, visibility) is reused, because the DOM
may have been re-rendered in between.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from framewise.config import FramewiseConfig
from framewise.engine.best_effort import best_effort
from framewise.engine.context_resolver import ResolvedTarget, normalize_candidates, resolve
from framewise.engine.scroll_stabilizer import ensure_in_view
from framewise.engine.visibility_gate import await_visible
from framewise.errors import ActionFailed, ItemNotFoundError, VisibilityTimeout
from framewise.models import (
    CLEAR_CLICK_DELAY_MS,
    DEFAULT_CLICK_DELAY_MS,
    DEFAULT_RETRIES,
    DROPDOWN_ITEM_SELECTORS,
    RETRY_DELAY_MS,
)

if TYPE_CHECKING:
    from framewise.engine.protocols import InteractivePage

logger = logging.getLogger("framewise.engine.action_executor")

# Exact text, then substring text, then data-value.  The first tier with any
# match wins; within a tier the first element in document order wins.
PICK_DROPDOWN_ITEM = """([selector, wanted]) => {
    const norm = (value) => String(value || '').trim().toLowerCase();
    const items = Array.from(document.querySelectorAll(selector));
    const tiers = [
        (el) => norm(el.textContent) === wanted,
        (el) => norm(el.textContent).includes(wanted),
        (el) => norm(el.getAttribute('data-value')) === wanted,
    ];
    let target = null;
    for (const matches of tiers) {
        target = items.find(matches);
        if (target) break;
    }
    if (!target || typeof target.click !== 'function') return false;
    target.click();
    return true;
}"""


@dataclasses.dataclass
class ActionOptions:
    """Per-call overrides.  ``None`` means "use the configured default"."""

    timeout: int | None = None  # ms budget for resolution, and again for visibility
    retries: int = DEFAULT_RETRIES  # attempts after the first
    delay: int | None = None  # ms between keystrokes, or click hold


class ActionExecutor:
    """Runs resilient element interactions against one Playwright page."""

    RETRY_DELAY_MS = RETRY_DELAY_MS

    def __init__(self, page: InteractivePage, config: FramewiseConfig | None = None) -> None:
        self._page = page
        self._config = config or FramewiseConfig()

    @property
    def page(self) -> InteractivePage:
        return self._page

    # -- Retry shell ---------------------------------------------------------

    async def _with_retries(
        self,
        label: str,
        attempt: Callable[[], Awaitable[None]],
        retries: int,
    ) -> None:
        """Run ``attempt`` up to ``retries + 1`` times, strictly one after another.

        Only the most recent failure is kept; it is re-raised unchanged once
        attempts are exhausted.
        """
        if retries < 0:
            raise ValueError(f"retries must be >= 0, got {retries}")

        for attempt_no in range(retries + 1):
            try:
                await attempt()
                if attempt_no:
                    logger.info("%s succeeded on attempt %d/%d", label, attempt_no + 1, retries + 1)
                return
            except Exception as exc:
                logger.warning(
                    "%s attempt %d/%d failed: %s",
                    label,
                    attempt_no + 1,
                    retries + 1,
                    exc,
                )
                if attempt_no == retries:
                    raise
            await asyncio.sleep(self.RETRY_DELAY_MS / 1000)

    async def _locate(self, candidates: str | Sequence[str], timeout: int) -> ResolvedTarget:
        target = await resolve(self._page, candidates, timeout)
        await await_visible(target.context, target.selector, timeout)
        await ensure_in_view(target.context, target.selector)
        return target

    # -- Actions -------------------------------------------------------------

    async def click_element(
        self,
        candidates: str | Sequence[str],
        options: ActionOptions | None = None,
    ) -> None:
        """Click the first matching candidate, in the page or any frame.

        Raises the last attempt's ``ResolutionTimeout``, ``VisibilityTimeout``
        or ``ActionFailed`` once retries are exhausted.
        """
        selectors = normalize_candidates(candidates)
        opts = options or ActionOptions()
        timeout = self._timeout(opts)
        delay = opts.delay if opts.delay is not None else DEFAULT_CLICK_DELAY_MS

        async def attempt() -> None:
            target = await self._locate(selectors, timeout)
            try:
                await target.context.click(target.selector, delay=delay)
            except PlaywrightError as exc:
                raise ActionFailed("click", target.selector, str(exc)) from exc

        await self._with_retries(f"click {_describe(selectors)}", attempt, opts.retries)

    async def type_into_field(
        self,
        candidates: str | Sequence[str],
        text: str,
        options: ActionOptions | None = None,
    ) -> None:
        """Focus, clear (best-effort), and type ``text`` into the first matching field.

        Clearing is a triple-click select plus one Backspace.  It usually
        empties the field but is not verified.
        """
        selectors = normalize_candidates(candidates)
        opts = options or ActionOptions()
        timeout = self._timeout(opts)
        delay = opts.delay if opts.delay is not None else self._config.typing_delay

        async def attempt() -> None:
            target = await self._locate(selectors, timeout)
            ctx, selector = target.context, target.selector

            await best_effort(
                ctx.click(selector, click_count=3, delay=CLEAR_CLICK_DELAY_MS),
                f"select contents of {selector}",
            )
            # Keyboard input is dispatched at page level even when the field lives in a frame.
            await best_effort(self._page.keyboard.press("Backspace"), "clear field")

            try:
                await ctx.type(selector, text, delay=delay)
            except PlaywrightError as exc:
                raise ActionFailed("type", selector, str(exc)) from exc

        await self._with_retries(f"type into {_describe(selectors)}", attempt, opts.retries)

    async def select_dropdown_item(
        self,
        item_text: str,
        options: ActionOptions | None = None,
    ) -> None:
        """Click the open dropdown's item matching ``item_text``.

        Single attempt.  Items are matched case-insensitively on trimmed text:
        exact match first, then substring, then the ``data-value`` attribute.

        Raises:
            ResolutionTimeout: no list-item selector matched anything.
            VisibilityTimeout: the items never became visible.
            ItemNotFoundError: no item matched ``item_text`` in any tier.
        """
        opts = options or ActionOptions()
        timeout = self._timeout(opts)

        target = await resolve(self._page, self.dropdown_item_selectors(), timeout)
        try:
            await target.context.wait_for_selector(target.selector, state="visible", timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise VisibilityTimeout(target.selector, timeout) from exc

        wanted = str(item_text).strip().lower()
        clicked = await target.context.evaluate(PICK_DROPDOWN_ITEM, [target.selector, wanted])
        if not clicked:
            raise ItemNotFoundError(item_text, target.selector)
        logger.debug("Selected dropdown item %r via %r", item_text, target.selector)

    # -- Helpers -------------------------------------------------------------

    def dropdown_item_selectors(self) -> list[str]:
        """List-item selectors to try, configured override first."""
        selectors = list(DROPDOWN_ITEM_SELECTORS)
        if self._config.dropdown_item_selector:
            selectors.insert(0, self._config.dropdown_item_selector)
        return selectors

    def _timeout(self, opts: ActionOptions) -> int:
        return opts.timeout if opts.timeout is not None else self._config.selector_timeout


def _describe(candidates: str | Sequence[str]) -> str:
    if isinstance(candidates, str):
        return repr(candidates)
    return " | ".join(candidates)
