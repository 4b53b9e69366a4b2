"""Serializers from a Board to a flat-file string.

Both serializers are pure functions of the Board and total over any valid
Board, including one with no columns or with empty columns.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Callable
from itertools import zip_longest

from retro_export.data_types import Board, ExportFormat, Message


def format_message(message: Message) -> str:
    return f"{message.text} ({message.vote_count})"


def to_text(board: Board) -> str:
    """Render a board as plain text.

    Example output::

        Sprint 1

        Went well
        - Shipped X (3)

    Every header and message line carries a trailing space before the
    newline. Columns without messages are left out entirely.
    """
    parts = [f"{board.title} \n\n"]
    for column in board.columns:
        if not column.messages:
            continue
        parts.append(f"{column.title} \n")
        parts.extend(
            f"- {format_message(message)} \n" for message in column.messages
        )
        parts.append("\n")
    return "".join(parts)


def to_csv(board: Board) -> str:
    """Render a board as CSV, one board column per CSV column.

    The first row holds the column titles. Row ``r`` after it holds each
    column's ``r``-th message, or an empty cell when the column is shorter.
    Every row ends with a trailing separator and CRLF::

        Went well,Needs work,
        Shipped X (3),,

    Cells containing separators, quotes or line breaks are quoted so each row
    keeps one cell per board column.
    """
    if not board.columns:
        return "\r\n"

    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, lineterminator="\r\n")

    # The trailing empty field yields the trailing separator
    writer.writerow([column.title for column in board.columns] + [""])
    ranks = zip_longest(
        *(column.messages for column in board.columns), fillvalue=None
    )
    for rank in ranks:
        cells = [
            "" if message is None else format_message(message)
            for message in rank
        ]
        writer.writerow(cells + [""])
    return buffer.getvalue()


SERIALIZERS: dict[ExportFormat, Callable[[Board], str]] = {
    ExportFormat.TEXT: to_text,
    ExportFormat.CSV: to_csv,
}
