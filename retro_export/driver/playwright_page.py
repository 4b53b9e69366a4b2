"""Playwright page provider for live, JavaScript-rendered boards.

Board pages render their columns client-side, so the page is loaded in a real
browser. Extraction stays pure by working on a snapshot:

1. Navigate to the board URL
2. Wait for the readiness selector
3. Serialize the rendered DOM to HTML
4. Parse it with LXML and hand back a PageElement
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from playwright.async_api import (
    Browser,
    Page,
    async_playwright,
)
from playwright.async_api import (
    Error as PlaywrightError,
)
from playwright.async_api import (
    TimeoutError as PlaywrightTimeoutError,
)

from retro_export.common.exceptions import (
    ExtractionError,
    ReadinessTimeoutError,
)
from retro_export.common.lxml_page_element import LxmlPageElement
from retro_export.common.selector_utils import to_playwright_selector

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


class PlaywrightBoardPage:
    """BoardPage backed by a live Playwright page.

    Use PlaywrightBoardPage.open() so the browser is always shut down.

    Example:
        async with PlaywrightBoardPage.open(url) as page:
            board = await extract_board(page, config)
    """

    def __init__(self, page: Page, url: str) -> None:
        self._page = page
        self._url = url

    @classmethod
    @asynccontextmanager
    async def open(
        cls,
        url: str,
        browser_type: str = "chromium",
        headless: bool = True,
        navigation_timeout_ms: int | None = None,
        **context_kwargs: Any,
    ) -> AsyncIterator[PlaywrightBoardPage]:
        """Launch a browser and navigate to the board.

        Args:
            url: The board URL.
            browser_type: "chromium", "firefox", or "webkit" (default: "chromium").
            headless: Run browser in headless mode (default: True).
            navigation_timeout_ms: Optional bound on the initial navigation.
                If None, uses Playwright's default.
            **context_kwargs: Passed to Browser.new_context().

        Yields:
            The ready-to-wait page.
        """
        playwright = await async_playwright().start()
        try:
            browser_launcher = getattr(playwright, browser_type)
            browser: Browser = await browser_launcher.launch(
                headless=headless
            )
            try:
                browser_context = await browser.new_context(**context_kwargs)
                try:
                    page = await browser_context.new_page()
                    logger.info(f"Navigating to {url}")
                    goto_kwargs: dict[str, Any] = {
                        "wait_until": "domcontentloaded"
                    }
                    if navigation_timeout_ms is not None:
                        goto_kwargs["timeout"] = navigation_timeout_ms
                    try:
                        await page.goto(url, **goto_kwargs)
                    except PlaywrightError as e:
                        raise ExtractionError(
                            f"Could not load board page: {e.message}", url
                        ) from e

                    yield cls(page, url)

                finally:
                    await browser_context.close()
            finally:
                await browser.close()
        finally:
            await playwright.stop()

    @property
    def url(self) -> str:
        return self._url

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> None:
        """Wait until an element matching the selector is attached.

        Raises:
            ReadinessTimeoutError: If the selector does not match in time.
            ExtractionError: If Playwright fails for any other reason.
        """
        try:
            await self._page.wait_for_selector(
                to_playwright_selector(selector),
                state="attached",
                timeout=timeout_ms,
            )
        except PlaywrightTimeoutError as e:
            logger.warning(
                f"Timed out after {timeout_ms}ms waiting for {selector!r} "
                f"on {self._url}"
            )
            raise ReadinessTimeoutError(selector, timeout_ms, self._url) from e
        except PlaywrightError as e:
            raise ExtractionError(
                f"Could not wait for {selector!r}: {e.message}", self._url
            ) from e

    async def snapshot(self) -> LxmlPageElement:
        try:
            html_content = await self._page.content()
        except PlaywrightError as e:
            raise ExtractionError(
                f"Could not read rendered page: {e.message}", self._url
            ) from e
        return LxmlPageElement.from_html(html_content, self._page.url)
