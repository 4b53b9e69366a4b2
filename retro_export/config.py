"""Selector settings for locating board content on a rendered page.

Settings are read once at startup from a JSON document shaped like::

    {
        "selectors": {
            "boardTitleIdentifier": "#board-name",
            "messageColumn": ".column",
            "columnHeader": ".column-header",
            "messageContainer": ".message",
            "messageText": ".message-body .text",
            "messageVotes": ".votes"
        },
        "voteCount": 1,
        "waitTimeout": 30000
    }

and passed explicitly to the extractor as a frozen SelectorConfig.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from retro_export.common.exceptions import SettingsError
from retro_export.common.selector_utils import (
    can_playwright_wait,
    selector_type,
)

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path("settings.json")

# Readiness wait bound for the message container selector.
DEFAULT_WAIT_TIMEOUT_MS = 30_000


class SelectorConfig(BaseModel):
    """Lookup expressions for each semantic role on a board page.

    Selectors may be CSS or XPath. Selectors evaluated inside a column or a
    message are scoped to that element, so XPath ones should be relative
    (``.//span``).

    Attributes:
        board_title: Selector for the board title element.
        message_column: Selector for each column element.
        column_header: Selector for the header inside a column.
        message_container: Selector for each message inside a column. Also the
            readiness gate: extraction starts once one of these is present.
        message_text: Selector for the text inside a message.
        message_votes: Selector for the vote count inside a message.
        vote_threshold: Minimum vote count for a message to be exported.
        wait_timeout_ms: Bound on the readiness wait, in milliseconds.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    board_title: str = Field(alias="boardTitleIdentifier", min_length=1)
    message_column: str = Field(alias="messageColumn", min_length=1)
    column_header: str = Field(alias="columnHeader", min_length=1)
    message_container: str = Field(alias="messageContainer", min_length=1)
    message_text: str = Field(alias="messageText", min_length=1)
    message_votes: str = Field(alias="messageVotes", min_length=1)
    vote_threshold: int = Field(alias="voteCount", ge=0)
    wait_timeout_ms: int = Field(
        default=DEFAULT_WAIT_TIMEOUT_MS, alias="waitTimeout", gt=0
    )

    @classmethod
    def from_settings(
        cls, settings: dict[str, Any], path: str = "<settings>"
    ) -> SelectorConfig:
        """Build a SelectorConfig from a parsed settings document.

        Args:
            settings: The decoded JSON document.
            path: Where the document came from, for error messages.

        Returns:
            The validated, frozen configuration.

        Raises:
            SettingsError: If the document is not shaped as expected or a
                value fails validation.
        """
        if not isinstance(settings, dict):
            raise SettingsError(
                "Settings must be a JSON object", path
            )
        selectors = settings.get("selectors")
        if not isinstance(selectors, dict):
            raise SettingsError(
                "Settings must contain a 'selectors' object", path
            )

        data: dict[str, Any] = dict(selectors)
        for key in ("voteCount", "waitTimeout"):
            if key in settings:
                data[key] = settings[key]

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings: {e}", path) from e

        # The readiness gate is handed to Playwright's wait_for_selector
        if not can_playwright_wait(
            config.message_container, selector_type(config.message_container)
        ):
            raise SettingsError(
                "messageContainer must select elements, got "
                f"'{config.message_container}'",
                path,
            )
        return config


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> SelectorConfig:
    """Read and validate the selector settings file.

    Args:
        path: Path to the JSON settings document.

    Returns:
        The validated SelectorConfig.

    Raises:
        SettingsError: If the file is missing, unreadable, not JSON, or invalid.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(
            f"Could not read settings file: {e}", str(path)
        ) from e

    try:
        settings = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SettingsError(
            f"Settings file is not valid JSON: {e}", str(path)
        ) from e

    config = SelectorConfig.from_settings(settings, str(path))
    logger.debug(
        f"Loaded settings from {path} (vote threshold {config.vote_threshold})"
    )
    return config
