"""LxmlPageElement implementation wrapping CheckedHtmlElement.

This is the PageElement implementation used by every page provider: the
static provider parses saved HTML directly and the Playwright provider parses
a snapshot of the rendered DOM.
"""

from __future__ import annotations

from lxml import etree, html

from retro_export.common.checked_html import CheckedHtmlElement
from retro_export.common.exceptions import ExtractionError
from retro_export.common.selector_utils import selector_type

# Text nodes a browser would render; script and style bodies are skipped
_RENDERED_TEXT_XPATH = (
    ".//text()[not(ancestor::script) and not(ancestor::style)"
    " and not(ancestor::template) and not(ancestor::noscript)]"
)


class LxmlPageElement:
    """Implementation of PageElement protocol wrapping CheckedHtmlElement.

    Attributes:
        _element: The underlying CheckedHtmlElement.
        _url: The URL of the page, used for error context.
    """

    def __init__(self, element: CheckedHtmlElement, url: str = "") -> None:
        """Initialize LxmlPageElement.

        Args:
            element: The CheckedHtmlElement to wrap.
            url: URL of the page the element was parsed from.
        """
        self._element = element
        self._url = url

    @classmethod
    def from_html(
        cls, content: str | bytes, url: str = ""
    ) -> LxmlPageElement:
        """Parse an HTML document into a root LxmlPageElement.

        Args:
            content: The HTML document. Pass bytes to let lxml pick the
                encoding from the document's own declaration.
            url: URL the document was loaded from.

        Returns:
            LxmlPageElement for the document root.

        Raises:
            ExtractionError: If the content is empty or not parseable.
        """
        try:
            doc = html.document_fromstring(content)
        except (etree.ParserError, etree.XMLSyntaxError, ValueError) as e:
            # ValueError covers decoding failures and str input that
            # carries an XML encoding declaration
            raise ExtractionError(
                f"Could not parse page HTML: {e}", url
            ) from e
        return cls(CheckedHtmlElement(doc, url), url)

    @property
    def url(self) -> str:
        return self._url

    def query_xpath(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[LxmlPageElement]:
        """Query elements by XPath selector.

        Args:
            selector: XPath expression to execute.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching LxmlPageElement instances.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        checked_elements = self._element.checked_xpath(
            selector, description, min_count, max_count
        )
        return [LxmlPageElement(elem, self._url) for elem in checked_elements]

    def query_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[LxmlPageElement]:
        """Query elements by CSS selector.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching LxmlPageElement instances.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        checked_elements = self._element.checked_css(
            selector, description, min_count, max_count
        )
        return [LxmlPageElement(elem, self._url) for elem in checked_elements]

    def query(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[LxmlPageElement]:
        """Query elements with XPath or CSS depending on the selector syntax.

        Settings documents mix both kinds of selector, so callers should not
        have to know which one they hold.
        """
        if selector_type(selector) == "xpath":
            return self.query_xpath(
                selector, description, min_count, max_count
            )
        return self.query_css(selector, description, min_count, max_count)

    def query_first(self, selector: str, description: str) -> LxmlPageElement:
        """Return the first element in document order matching the selector.

        Raises:
            HTMLStructuralAssumptionException: If nothing matches.
        """
        return self.query(selector, description, min_count=1)[0]

    def text_content(self) -> str:
        return "".join(self._element.xpath(_RENDERED_TEXT_XPATH))

    def trimmed_text(self) -> str:
        return self.text_content().strip()
