"""framewise Browser Session -- Playwright browser lifecycle and navigation.

Launches Chromium, applies the configured viewport, user agent and default
timeouts, and hands out a page plus an ``ActionExecutor`` bound to it.
Launch and navigation are one-shot: no retry logic lives here.
"""

from __future__ import annotations

import logging
from typing import Any

from framewise.config import FramewiseConfig
from framewise.engine.action_executor import ActionExecutor

logger = logging.getLogger("framewise.engine.browser_runner")

# Flags that let Chromium start inside containers and CI runners.
LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]


class BrowserSession:
    """Owns one Playwright instance, browser, context and page.

    Use as an async context manager, or call start()/stop() explicitly::

        async with BrowserSession(config) as session:
            await session.navigate_to_url(url, "Could not open the editor")
            await session.executor().click_element(["#export", "button.export"])
    """

    def __init__(self, config: FramewiseConfig | None = None) -> None:
        self._config = config or FramewiseConfig()

        # Managed browser lifecycle -- set by start()/stop()
        self._playwright: Any = None
        self._browser: Any = None
        self._context: Any = None
        self._page: Any = None

    @property
    def config(self) -> FramewiseConfig:
        return self._config

    @property
    def page(self) -> Any:
        if self._page is None:
            raise RuntimeError("Browser session not started. Call start() first.")
        return self._page

    # -- Browser Lifecycle ---------------------------------------------------

    async def start(self) -> tuple[Any, Any]:
        """Launch the browser and open a configured page. Returns (browser, page)."""
        from playwright.async_api import async_playwright

        if self._page is not None:
            return self._browser, self._page

        config = self._config
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=config.headless,
            args=LAUNCH_ARGS,
        )

        context_options: dict[str, Any] = {
            "viewport": {"width": config.viewport[0], "height": config.viewport[1]},
        }
        if config.user_agent:
            context_options["user_agent"] = config.user_agent
        self._context = await self._browser.new_context(**context_options)

        self._page = await self._context.new_page()
        self._page.set_default_navigation_timeout(config.navigation_timeout)
        self._page.set_default_timeout(config.selector_timeout)

        logger.info(
            "Browser started: headless=%s viewport=%dx%d",
            config.headless,
            config.viewport[0],
            config.viewport[1],
        )
        return self._browser, self._page

    async def stop(self) -> None:
        """Close the context, browser and Playwright. Safe to call more than once."""
        for name, resource, closer in (
            ("context", self._context, "close"),
            ("browser", self._browser, "close"),
            ("playwright", self._playwright, "stop"),
        ):
            if resource is None:
                continue
            try:
                await getattr(resource, closer)()
            except Exception as exc:
                logger.debug("Error closing %s: %s", name, exc)
        self._context = None
        self._browser = None
        self._playwright = None
        self._page = None

    async def __aenter__(self) -> BrowserSession:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    # -- Navigation ----------------------------------------------------------

    async def navigate_to_url(
        self,
        url: str,
        error_message: str,
        timeout: int | None = None,
    ) -> None:
        """Navigate the session page and wait for the network to go idle."""
        await navigate_to_url(
            self.page,
            url,
            error_message,
            timeout if timeout is not None else self._config.navigation_timeout,
        )

    def executor(self) -> ActionExecutor:
        return ActionExecutor(self.page, self._config)


async def navigate_to_url(page: Any, url: str, error_message: str, timeout: int) -> None:
    """Open ``url``; on failure log ``error_message`` and re-raise the original error."""
    try:
        await page.goto(url, wait_until="networkidle", timeout=timeout)
    except Exception:
        logger.error("%s (url=%s)", error_message, url)
        raise
