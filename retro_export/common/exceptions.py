"""Exception types for export errors.

Every error raised by the export pipeline derives from RetroExportError,
which carries the page URL and a context dict so the invoker can tell which
check failed. Filter-level non-matches (votes below the threshold, vote
counts that do not parse) are not errors and never raise.
"""

from typing import Any


class RetroExportError(Exception):
    """Base class for export pipeline failures.

    Attributes:
        message: Human-readable description of the failure.
        request_url: The URL of the board page (may be empty).
        context: Additional diagnostic context (selector, counts, etc).
    """

    def __init__(
        self,
        message: str,
        request_url: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the failure.
            request_url: The URL of the board page.
            context: Optional dict of additional context.
        """
        self.message = message
        self.request_url = request_url
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with URL and context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]
        if self.request_url:
            parts.append(f"URL: {self.request_url}")

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class ExtractionError(RetroExportError):
    """Raised when a board cannot be extracted from the page.

    Extraction aborts as a whole: no partial Board is ever returned.
    """


class ReadinessTimeoutError(ExtractionError):
    """Raised when the readiness selector does not appear in time.

    Attributes:
        selector: The selector that was waited for.
        timeout_ms: The wait bound in milliseconds.
    """

    def __init__(
        self, selector: str, timeout_ms: int, request_url: str = ""
    ) -> None:
        self.selector = selector
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Page was not ready: no element matched the message container "
            f"selector within {timeout_ms}ms",
            request_url,
            {"selector": selector, "timeout_ms": timeout_ms},
        )


class MissingBoardTitleError(ExtractionError):
    """Raised when the board title is empty after trimming."""

    def __init__(self, selector: str, request_url: str = "") -> None:
        self.selector = selector
        super().__init__(
            "Board title does not exist. "
            "Please check if provided URL is correct.",
            request_url,
            {"selector": selector},
        )


class HTMLStructuralAssumptionException(ExtractionError):
    """Raised when HTML structure doesn't match expectations.

    This exception is raised when XPath or CSS selectors return a different
    number of elements than expected. This usually indicates that the board
    page layout has changed or the settings point at the wrong elements.

    Attributes:
        selector: The XPath or CSS selector that was used.
        selector_type: Type of selector ("xpath" or "css").
        description: What was being selected.
        expected_min: Minimum number of elements expected.
        expected_max: Maximum number of elements expected (None = unlimited).
        actual_count: Number of elements found.
    """

    def __init__(
        self,
        selector: str,
        selector_type: str,
        description: str,
        expected_min: int,
        expected_max: int | None,
        actual_count: int,
        request_url: str = "",
    ) -> None:
        """Initialize the exception.

        Args:
            selector: The XPath or CSS selector that was used.
            selector_type: Type of selector ("xpath" or "css").
            description: Human-readable description of what was being selected.
            expected_min: Minimum number of elements expected.
            expected_max: Maximum number of elements expected (None = unlimited).
            actual_count: Actual number of elements found.
            request_url: The URL of the page being queried.
        """
        self.selector = selector
        self.selector_type = selector_type
        self.description = description
        self.expected_min = expected_min
        self.expected_max = expected_max
        self.actual_count = actual_count

        if expected_max is None:
            expected_str = f"at least {expected_min}"
        elif expected_min == expected_max:
            expected_str = f"exactly {expected_min}"
        else:
            expected_str = f"between {expected_min} and {expected_max}"

        message = (
            f"HTML structure mismatch: Expected {expected_str} "
            f"elements for '{description}', but found {actual_count}"
        )

        context = {
            "selector": selector,
            "selector_type": selector_type,
            "expected_min": expected_min,
            "expected_max": expected_max
            if expected_max is not None
            else "unlimited",
            "actual_count": actual_count,
        }

        super().__init__(message, request_url, context)


class UnsupportedFormatError(RetroExportError):
    """Raised when the requested export format is not recognized.

    Attributes:
        requested: The format value that was asked for.
        supported: The accepted format values.
    """

    def __init__(self, requested: str, supported: list[str]) -> None:
        self.requested = requested
        self.supported = supported
        super().__init__(
            f"File type '{requested}' is not supported, "
            f"currently supports: {', '.join(supported)}",
            context={"requested": requested},
        )


class SettingsError(RetroExportError):
    """Raised when the selector settings document is missing or invalid.

    Attributes:
        path: The settings file path.
    """

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message, context={"settings": path})
