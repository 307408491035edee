"""
Headless browser session.

Brackets a catalog run with a Chromium instance launched through
playwright. The browser is released on every exit path.
"""

from typing import Optional, Sequence

import structlog
from playwright.async_api import async_playwright, Browser, Playwright

logger = structlog.get_logger(__name__)

DEFAULT_BROWSER_ARGS = ("--no-sandbox",)


class BrowserSession:
    """
    Async context manager owning a headless browser.

    Usage:
        async with BrowserSession() as session:
            ...
    """

    def __init__(
        self,
        headless: bool = True,
        args: Sequence[str] = DEFAULT_BROWSER_ARGS,
        enabled: bool = True,
    ):
        """
        Initialize browser session.

        Args:
            headless: Launch without a visible window
            args: Extra Chromium command line flags
            enabled: When False, nothing is launched
        """
        self.headless = headless
        self.args = list(args)
        self.enabled = enabled

        self._playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None

    @property
    def is_open(self) -> bool:
        return self.browser is not None

    async def __aenter__(self) -> "BrowserSession":
        """Start playwright and launch Chromium."""
        if not self.enabled:
            logger.info("browser_disabled")
            return self

        self._playwright = await async_playwright().start()
        try:
            self.browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=self.args,
            )
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise

        logger.info("browser_launched", headless=self.headless, args=self.args)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the browser and stop playwright."""
        try:
            if self.browser:
                await self.browser.close()
                logger.info("browser_closed")
        finally:
            self.browser = None
            if self._playwright:
                await self._playwright.stop()
                self._playwright = None
