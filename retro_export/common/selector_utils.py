"""Selector utility functions.

Settings may hold either XPath or CSS selectors. These helpers decide which
engine a selector belongs to and whether Playwright can wait on it.
"""


def selector_type(selector: str) -> str:
    """Classify a selector as XPath or CSS.

    Args:
        selector: The selector string.

    Returns:
        "xpath" for path expressions, "css" otherwise.

    Examples:
        >>> selector_type("//div[@class='column']")
        'xpath'
        >>> selector_type("(//h1)[1]")
        'xpath'
        >>> selector_type(".//span")
        'xpath'
        >>> selector_type("div.column > h2")
        'css'
    """
    selector = selector.strip()
    if selector.startswith(("/", "./", "../", "(")):
        return "xpath"
    return "css"


def can_playwright_wait(selector: str, selector_type: str) -> bool:
    """Determine if a selector can be used with Playwright's wait_for_selector().

    Playwright's wait_for_selector() only works with selectors that target
    elements. It does not support XPath expressions that return text nodes,
    attributes, or use EXSLT functions.

    Args:
        selector: The selector string.
        selector_type: Type of selector ("xpath" or "css").

    Returns:
        True if Playwright can wait for this selector, False otherwise.

    Examples:
        >>> can_playwright_wait("//div[@class='content']", "xpath")
        True
        >>> can_playwright_wait("//div/@href", "xpath")
        False
        >>> can_playwright_wait("//div/text()", "xpath")
        False
        >>> can_playwright_wait("div.content", "css")
        True
    """
    if selector_type == "css":
        return True

    selector = selector.strip()

    if selector.endswith("/text()"):
        return False

    # Attribute selection ends with /@name
    if "/@" in selector:
        parts = selector.split("/")
        if parts and parts[-1].startswith("@"):
            return False

    exslt_prefixes = [
        "re:",
        "str:",
        "math:",
        "set:",
        "dyn:",
        "exsl:",
        "func:",
        "date:",
    ]

    return all(prefix not in selector for prefix in exslt_prefixes)


def to_playwright_selector(selector: str) -> str:
    """Prefix XPath selectors with the engine name Playwright expects.

    Playwright guesses XPath for selectors starting with "//" but not for
    relative or parenthesized expressions, so the prefix is always explicit.

    Args:
        selector: The selector string from settings.

    Returns:
        A selector Playwright resolves with the right engine.

    Examples:
        >>> to_playwright_selector("(//div)[1]")
        'xpath=(//div)[1]'
        >>> to_playwright_selector("div.card")
        'div.card'
    """
    if selector_type(selector) == "xpath":
        return f"xpath={selector.strip()}"
    return selector
