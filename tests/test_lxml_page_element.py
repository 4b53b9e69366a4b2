"""Tests for CheckedHtmlElement and LxmlPageElement."""

import pytest
from lxml import html

from retro_export.common.checked_html import CheckedHtmlElement
from retro_export.common.exceptions import (
    ExtractionError,
    HTMLStructuralAssumptionException,
)
from retro_export.common.lxml_page_element import LxmlPageElement


@pytest.fixture
def simple_page():
    """Simple board-like page for testing."""
    html_content = """
    <html>
    <body>
        <div id="main">
            <h1>  Test Board  </h1>
            <ul>
                <li class="row" data-id="1">Cell 1</li>
                <li class="row" data-id="2">Cell 2</li>
            </ul>
        </div>
    </body>
    </html>
    """
    return LxmlPageElement.from_html(html_content, "https://example.com/page")


class TestCheckedHtmlElement:
    """Tests for count-validated queries."""

    def test_checked_css_returns_wrapped_elements(self):
        tree = CheckedHtmlElement(
            html.fromstring("<div><p>a</p><p>b</p></div>")
        )

        results = tree.checked_css("p", "paragraphs", min_count=2)

        assert all(isinstance(r, CheckedHtmlElement) for r in results)
        assert [r.text_content() for r in results] == ["a", "b"]

    def test_checked_xpath_ignores_text_results(self):
        tree = CheckedHtmlElement(
            html.fromstring("<div><p>a</p><p>b</p></div>")
        )

        with pytest.raises(HTMLStructuralAssumptionException) as exc_info:
            tree.checked_xpath("//p/text()", "texts")

        assert exc_info.value.actual_count == 0

    def test_checked_xpath_max_count(self):
        tree = CheckedHtmlElement(
            html.fromstring("<div><p>a</p><p>b</p></div>"),
            "https://example.com/",
        )

        with pytest.raises(HTMLStructuralAssumptionException) as exc_info:
            tree.checked_xpath("//p", "paragraph", max_count=1)

        assert exc_info.value.actual_count == 2
        assert exc_info.value.request_url == "https://example.com/"

    def test_invalid_css_raises_structural_error(self):
        tree = CheckedHtmlElement(html.fromstring("<div></div>"))

        with pytest.raises(HTMLStructuralAssumptionException) as exc_info:
            tree.checked_css("div[[", "broken")

        assert exc_info.value.selector_type == "css"

    def test_invalid_xpath_raises_structural_error(self):
        tree = CheckedHtmlElement(html.fromstring("<div></div>"))

        with pytest.raises(HTMLStructuralAssumptionException) as exc_info:
            tree.checked_xpath("//div[", "broken")

        assert exc_info.value.selector_type == "xpath"

    def test_delegates_attributes(self):
        tree = CheckedHtmlElement(html.fromstring('<div id="x"></div>'))

        assert tree.tag == "div"
        assert tree.get("id") == "x"


class TestLxmlPageElement:
    """Tests for the PageElement implementation."""

    def test_query_css(self, simple_page):
        rows = simple_page.query_css("li.row", "rows")

        assert len(rows) == 2
        assert all(isinstance(row, LxmlPageElement) for row in rows)

    def test_query_xpath(self, simple_page):
        rows = simple_page.query_xpath("//li[@class='row']", "rows")

        assert [row.trimmed_text() for row in rows] == ["Cell 1", "Cell 2"]

    def test_query_dispatches_on_selector_type(self, simple_page):
        by_css = simple_page.query("li.row", "rows")
        by_xpath = simple_page.query("//li", "rows")

        assert [r.text_content() for r in by_css] == [
            r.text_content() for r in by_xpath
        ]

    def test_query_min_count_zero_allows_empty(self, simple_page):
        assert simple_page.query(".missing", "nothing", min_count=0) == []

    def test_query_missing_raises(self, simple_page):
        with pytest.raises(HTMLStructuralAssumptionException) as exc_info:
            simple_page.query(".missing", "something")

        assert exc_info.value.description == "something"
        assert exc_info.value.request_url == "https://example.com/page"

    def test_query_first(self, simple_page):
        first = simple_page.query_first("li.row", "row")

        assert first.trimmed_text() == "Cell 1"

    def test_query_first_missing_raises(self, simple_page):
        with pytest.raises(HTMLStructuralAssumptionException):
            simple_page.query_first("table", "table")

    def test_nested_queries_are_scoped(self, simple_page):
        ul = simple_page.query_first("ul", "list")

        assert ul.query("h1", "heading", min_count=0) == []
        assert len(ul.query(".//li", "items")) == 2

    def test_text_accessors(self, simple_page):
        heading = simple_page.query_first("h1", "heading")

        assert heading.text_content() == "  Test Board  "
        assert heading.trimmed_text() == "Test Board"

    def test_url_inherited_by_children(self, simple_page):
        row = simple_page.query_first("li", "row")

        assert row.url == "https://example.com/page"

    def test_from_html_empty_document(self):
        with pytest.raises(ExtractionError) as exc_info:
            LxmlPageElement.from_html("", "https://example.com/empty")

        assert exc_info.value.request_url == "https://example.com/empty"

    def test_text_skips_script_and_style(self):
        root = LxmlPageElement.from_html(
            "<div id='m'>Ship it<script>var x = 1;</script>"
            "<style>.a {}</style> now</div>"
        )

        message = root.query_first("#m", "message")

        assert message.trimmed_text() == "Ship it now"

    def test_from_html_bytes_uses_declared_charset(self):
        content = (
            '<html><head><meta http-equiv="Content-Type" '
            'content="text/html; charset=iso-8859-1"></head>'
            "<body><p>Café</p></body></html>"
        ).encode("latin-1")

        root = LxmlPageElement.from_html(content)

        assert root.query_first("p", "paragraph").trimmed_text() == "Café"

    def test_from_html_bytes_with_xml_declaration(self):
        content = (
            b'<?xml version="1.0" encoding="utf-8"?>\n'
            b"<html><body><h1>Board</h1></body></html>"
        )

        root = LxmlPageElement.from_html(content)

        assert root.query_first("h1", "heading").trimmed_text() == "Board"

    def test_from_html_str_with_xml_declaration(self):
        content = (
            '<?xml version="1.0" encoding="utf-8"?>\n'
            "<html><body><h1>Board</h1></body></html>"
        )

        with pytest.raises(ExtractionError) as exc_info:
            LxmlPageElement.from_html(content, "https://example.com/x")

        assert exc_info.value.request_url == "https://example.com/x"
