"""Export orchestration: extract a board, serialize it, name the output.

Errors from extraction and serialization propagate unchanged; nothing is
retried and no partial output is produced.
"""

from __future__ import annotations

import logging

from retro_export.common.exceptions import MissingBoardTitleError
from retro_export.config import SelectorConfig
from retro_export.data_types import ExportFormat, ExportResult
from retro_export.driver.base import BoardPage
from retro_export.extractor import extract_board
from retro_export.serializers import SERIALIZERS

logger = logging.getLogger(__name__)


async def export_board(
    page: BoardPage,
    config: SelectorConfig,
    export_format: str | ExportFormat,
) -> ExportResult:
    """Extract the board on a page and serialize it.

    The format is resolved before the page is touched, so an unsupported
    format fails without any extraction work.

    Args:
        page: Page provider for the board.
        config: Selector settings and vote threshold.
        export_format: "txt"/"text", "csv", or an ExportFormat.

    Returns:
        The serialized content paired with the board title.

    Raises:
        UnsupportedFormatError: If the format is not recognized.
        ExtractionError: If the board could not be extracted.
    """
    fmt = ExportFormat.parse(export_format)
    board = await extract_board(page, config)
    content = SERIALIZERS[fmt](board)
    logger.debug(f"Serialized {board.title!r} as {fmt.value}")
    return ExportResult(
        content=content, board_title=board.title, export_format=fmt
    )


def output_filename(
    board_title: str, export_format: str | ExportFormat
) -> str:
    """Name an export file after its board.

    All whitespace is removed from the title and the format's extension is
    appended.

    Examples:
        >>> output_filename("Sprint 12 Retro", "csv")
        'Sprint12Retro.csv'

    Raises:
        UnsupportedFormatError: If the format is not recognized.
        MissingBoardTitleError: If nothing is left of the title.
    """
    fmt = ExportFormat.parse(export_format)
    stem = "".join(board_title.split())
    if not stem:
        raise MissingBoardTitleError("<board title>")
    return f"{stem}.{fmt.extension}"
