"""Board extraction from a rendered page.

The extractor waits for the page to be ready, takes a DOM snapshot, and walks
it column by column, message by message, in page order. Messages whose vote
count is below the configured threshold, missing, or not a number are left
out; that is filtering, not an error. Anything else that goes wrong aborts
the whole extraction.
"""

from __future__ import annotations

import logging
import re

from retro_export.common.exceptions import MissingBoardTitleError
from retro_export.common.page_element import PageElement
from retro_export.config import SelectorConfig
from retro_export.data_types import Board, Column, Message
from retro_export.driver.base import BoardPage

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_vote_count(raw: str) -> int | None:
    """Parse the leading integer of a vote badge.

    Badges read like "3" or "3 votes"; anything without a leading integer
    yields None.

    Examples:
        >>> parse_vote_count(" 3 ")
        3
        >>> parse_vote_count("12 votes")
        12
        >>> parse_vote_count("") is None
        True
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _read_votes(message: PageElement, config: SelectorConfig) -> int | None:
    badges = message.query(
        config.message_votes, "message votes", min_count=0
    )
    if not badges:
        return None
    return parse_vote_count(badges[0].trimmed_text())


def _extract_column(
    column: PageElement, config: SelectorConfig
) -> tuple[Column, int]:
    """Build one Column, returning it with the number of dropped messages."""
    title = column.query_first(
        config.column_header, "column header"
    ).trimmed_text()

    kept: list[Message] = []
    dropped = 0
    for element in column.query(
        config.message_container, "messages", min_count=0
    ):
        votes = _read_votes(element, config)
        if votes is None or votes < config.vote_threshold:
            dropped += 1
            logger.debug(
                f"Dropping message in column {title!r}: votes={votes}, "
                f"threshold={config.vote_threshold}"
            )
            continue

        text = element.query_first(
            config.message_text, "message text"
        ).trimmed_text()
        kept.append(Message(text=text, vote_count=votes))

    return Column(title=title, messages=tuple(kept)), dropped


def extract_from_snapshot(root: PageElement, config: SelectorConfig) -> Board:
    """Build a Board from a static DOM snapshot.

    Args:
        root: The document root.
        config: Selector settings and vote threshold.

    Returns:
        The extracted Board.

    Raises:
        HTMLStructuralAssumptionException: If the title element, a column
            header, or a kept message's text element is missing.
        MissingBoardTitleError: If the title is blank.
    """
    title = root.query_first(config.board_title, "board title").trimmed_text()
    if not title:
        raise MissingBoardTitleError(config.board_title, root.url)

    columns: list[Column] = []
    dropped = 0
    for element in root.query(config.message_column, "columns", min_count=0):
        column, column_dropped = _extract_column(element, config)
        columns.append(column)
        dropped += column_dropped

    board = Board(title=title, columns=tuple(columns))
    logger.info(
        f"Extracted board {title!r}: {len(board.columns)} columns, "
        f"{board.message_count} messages kept, {dropped} below threshold"
    )
    return board


async def extract_board(page: BoardPage, config: SelectorConfig) -> Board:
    """Extract a Board from a page provider.

    Waits (bounded by config.wait_timeout_ms) for a message container to be
    present, then extracts from a snapshot of the page.

    Args:
        page: The page provider.
        config: Selector settings and vote threshold.

    Returns:
        The extracted Board.

    Raises:
        ReadinessTimeoutError: If no message container appears in time.
        ExtractionError: For any other extraction failure.
    """
    logger.info(f"Extracting board from {page.url}")
    await page.wait_for_selector(
        config.message_container, config.wait_timeout_ms
    )
    root = await page.snapshot()
    return extract_from_snapshot(root, config)
