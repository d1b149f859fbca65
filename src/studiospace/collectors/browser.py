"""Headless Chromium session shared by all listing sources.

Wraps Playwright's async API behind the few operations the sources need:
open a page, navigate with a timeout, wait for content to settle, run a
page script, and take a diagnostic screenshot. Playwright failures are
translated into the collector error types so callers never depend on
Playwright exceptions directly.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config import DEFAULT_USER_AGENT
from .errors import BrowserSessionError, ExtractionError, NavigationError

logger = logging.getLogger(__name__)

VIEWPORT = {"width": 1920, "height": 1080}


class BrowserPage:
    """A single browser tab."""

    def __init__(self, page: Page, session: "BrowserSession"):
        self._page = page
        self._session = session

    def _check_session(self, error: Exception) -> None:
        if not self._session.is_connected():
            raise BrowserSessionError("browser", f"Browser session lost: {error}") from error

    async def navigate(self, url: str, timeout_ms: int) -> None:
        """Load ``url`` and wait for the DOM to be ready.

        Raises:
            NavigationError: On timeout or navigation failure
            BrowserSessionError: If the browser died
        """
        try:
            await self._page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationError(url, f"Timed out after {timeout_ms}ms") from e
        except PlaywrightError as e:
            self._check_session(e)
            raise NavigationError(url, str(e)) from e

    async def settle(self, ms: int) -> None:
        """Give client-side rendering time to finish."""
        if ms > 0:
            await self._page.wait_for_timeout(ms)

    async def evaluate(self, script: str) -> Any:
        """Run a page script and return its JSON-compatible result.

        Raises:
            ExtractionError: If the script throws
            BrowserSessionError: If the browser died
        """
        try:
            return await self._page.evaluate(script)
        except PlaywrightError as e:
            self._check_session(e)
            raise ExtractionError(self._page.url, f"Page script failed: {e}") from e

    async def screenshot(self, path: Path) -> None:
        """Save a full-page screenshot. Failures are only logged."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            await self._page.screenshot(path=str(path), full_page=True)
        except (PlaywrightError, OSError) as e:
            logger.debug(f"Screenshot {path} failed: {e}")

    async def close(self) -> None:
        try:
            await self._page.close()
        except PlaywrightError as e:
            logger.debug(f"Error closing page: {e}")


class BrowserSession:
    """A Chromium browser context used by one logical task at a time.

    Example:
        async with BrowserSession(headless=True) as session:
            page = await session.new_page()
            await page.navigate("https://www.kijiji.ca", timeout_ms=20000)
            cards = await page.evaluate("() => document.title")
            await page.close()

    ``spawn()`` opens a second context on the same browser for sources that
    run concurrently.
    """

    def __init__(
        self,
        headless: bool = True,
        user_agent: Optional[str] = None,
        timeout_seconds: int = 60,
    ):
        """Initialize the session (the browser starts on ``start()``).

        Args:
            headless: Run Chromium without a window
            user_agent: User-Agent string (uses a desktop Chrome UA if None)
            timeout_seconds: Default timeout for every browser operation
        """
        self.headless = headless
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout_seconds = timeout_seconds
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._owns_browser = True

    async def start(self) -> "BrowserSession":
        """Launch Chromium and open the browsing context.

        Raises:
            BrowserSessionError: If the browser cannot be launched
        """
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=self.headless)
            self._context = await self._new_context()
        except PlaywrightError as e:
            await self.close()
            raise BrowserSessionError("browser", f"Could not launch Chromium: {e}") from e
        logger.debug(f"Browser started (headless={self.headless})")
        return self

    async def _new_context(self) -> BrowserContext:
        context = await self._browser.new_context(
            user_agent=self.user_agent,
            viewport=VIEWPORT,
        )
        context.set_default_timeout(self.timeout_seconds * 1000)
        return context

    async def spawn(self) -> "BrowserSession":
        """Return a session with its own context on this session's browser."""
        if not self.is_connected():
            raise BrowserSessionError("browser", "Browser is not running")
        child = BrowserSession(self.headless, self.user_agent, self.timeout_seconds)
        child._browser = self._browser
        child._owns_browser = False
        try:
            child._context = await child._new_context()
        except PlaywrightError as e:
            raise BrowserSessionError("browser", f"Could not open context: {e}") from e
        return child

    def is_connected(self) -> bool:
        return self._browser is not None and self._browser.is_connected()

    async def new_page(self) -> BrowserPage:
        """Open a new tab in this session's context.

        Raises:
            BrowserSessionError: If the browser is not running
        """
        if self._context is None or not self.is_connected():
            raise BrowserSessionError("browser", "Browser is not running")
        try:
            page = await self._context.new_page()
        except PlaywrightError as e:
            raise BrowserSessionError("browser", f"Could not open page: {e}") from e
        return BrowserPage(page, self)

    async def close(self) -> None:
        """Close the context and, if owned, the browser."""
        try:
            if self._context is not None:
                await self._context.close()
            if self._owns_browser and self._browser is not None:
                await self._browser.close()
        except PlaywrightError as e:
            logger.debug(f"Error closing browser: {e}")
        finally:
            self._context = None
            if self._owns_browser:
                self._browser = None
                if self._playwright is not None:
                    await self._playwright.stop()
                    self._playwright = None

    async def __aenter__(self) -> "BrowserSession":
        """Async context manager entry."""
        if self._context is None:
            await self.start()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
