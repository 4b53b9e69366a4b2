"""PageElement protocol for driver-agnostic board extraction.

PageElement is always backed by static parsed HTML (LXML). The page provider
is responsible for obtaining the HTML, whether by reading a saved file or by
serializing a rendered Playwright DOM. Extraction code only ever sees this
interface, never a live browser.

Lookups are typed: element queries return PageElements, text accessors return
str, and a lookup that matches nothing raises
HTMLStructuralAssumptionException unless the caller allowed zero matches.
"""

from __future__ import annotations

from typing import Protocol


class PageElement(Protocol):
    """Protocol for driver-agnostic data extraction from HTML elements.

    All query methods support count validation and raise
    HTMLStructuralAssumptionException if the actual count doesn't match
    expectations.
    """

    @property
    def url(self) -> str:
        """URL of the page this element belongs to."""
        ...

    def query_xpath(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[PageElement]:
        """Query elements by XPath selector.

        Args:
            selector: XPath expression to execute.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching PageElement instances.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        ...

    def query_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[PageElement]:
        """Query elements by CSS selector.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching PageElement instances.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        ...

    def query(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[PageElement]:
        """Query elements with either engine, chosen from the selector syntax.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        ...

    def query_first(self, selector: str, description: str) -> PageElement:
        """Return the first element in document order matching the selector.

        Raises:
            HTMLStructuralAssumptionException: If nothing matches.
        """
        ...

    def text_content(self) -> str:
        """Extract the rendered text of the element and its descendants.

        Script, style, template and noscript bodies are not included.
        """
        ...

    def trimmed_text(self) -> str:
        """Extract the text content with surrounding whitespace removed."""
        ...

