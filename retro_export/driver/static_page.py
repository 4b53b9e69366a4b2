"""Page provider over HTML that is already rendered.

Used to export a board page saved from a browser, and in tests in place of a
live page. There is nothing to wait for: a readiness selector either matches
the document or it never will.
"""

from __future__ import annotations

import logging
from pathlib import Path

from retro_export.common.exceptions import (
    HTMLStructuralAssumptionException,
    ReadinessTimeoutError,
)
from retro_export.common.lxml_page_element import LxmlPageElement

logger = logging.getLogger(__name__)


class StaticBoardPage:
    """BoardPage backed by a fixed HTML document.

    Args:
        root: Parsed document root.
    """

    def __init__(self, root: LxmlPageElement) -> None:
        self._root = root

    @classmethod
    def from_html(
        cls, content: str | bytes, url: str = ""
    ) -> StaticBoardPage:
        return cls(LxmlPageElement.from_html(content, url))

    @classmethod
    def from_file(cls, path: str | Path, url: str = "") -> StaticBoardPage:
        """Load a saved board page.

        Args:
            path: HTML file to read.
            url: URL the page was saved from; defaults to a file:// URL.

        Raises:
            OSError: If the file cannot be read.
            ExtractionError: If the file is not parseable HTML.
        """
        path = Path(path)
        # Raw bytes, so the page's own charset declaration decides decoding
        content = path.read_bytes()
        return cls.from_html(content, url or path.resolve().as_uri())

    @property
    def url(self) -> str:
        return self._root.url

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> None:
        try:
            self._root.query(selector, "readiness gate", min_count=1)
        except HTMLStructuralAssumptionException as e:
            raise ReadinessTimeoutError(selector, timeout_ms, self.url) from e
        logger.debug(f"Readiness selector {selector!r} present")

    async def snapshot(self) -> LxmlPageElement:
        return self._root
