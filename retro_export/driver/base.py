"""BoardPage protocol: what the extractor needs from a page provider.

A provider navigates to the board, waits until it is ready, and hands back a
static snapshot of the DOM. Extraction never touches a live browser.
"""

from __future__ import annotations

from typing import Protocol

from retro_export.common.page_element import PageElement


class BoardPage(Protocol):
    """Page-like handle for a rendered board."""

    @property
    def url(self) -> str:
        """URL of the board page."""
        ...

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> None:
        """Block until an element matching the selector is present.

        Args:
            selector: CSS or XPath selector.
            timeout_ms: Upper bound on the wait, in milliseconds.

        Raises:
            ReadinessTimeoutError: If nothing matches within the timeout.
        """
        ...

    async def snapshot(self) -> PageElement:
        """Return the current DOM as a static PageElement."""
        ...
