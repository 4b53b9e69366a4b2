"""Board model and export value types.

A Board is built fresh for each export run by the extractor, read once by a
serializer, then discarded. All types here are frozen.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from retro_export.common.exceptions import UnsupportedFormatError


@dataclass(frozen=True)
class Message:
    """A single retrospective note.

    Attributes:
        text: The note text, trimmed.
        vote_count: Number of votes; never below the configured threshold.
    """

    text: str
    vote_count: int


@dataclass(frozen=True)
class Column:
    """A named group of messages, in on-screen order.

    A column with no messages is valid: everything may have been filtered
    out by the vote threshold.
    """

    title: str
    messages: tuple[Message, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Board:
    """A retrospective board: a title plus its columns in page order."""

    title: str
    columns: tuple[Column, ...] = field(default_factory=tuple)

    @property
    def message_count(self) -> int:
        return sum(len(column.messages) for column in self.columns)


class ExportFormat(str, Enum):
    """Supported export formats; the value is also the file extension."""

    TEXT = "txt"
    CSV = "csv"

    @classmethod
    def parse(cls, value: str | ExportFormat) -> ExportFormat:
        """Resolve a user-supplied format name.

        Accepts "txt", "text" and "csv", case-insensitively.

        Raises:
            UnsupportedFormatError: For any other value.
        """
        if isinstance(value, ExportFormat):
            return value
        normalized = str(value).strip().lower()
        if normalized == "text":
            return cls.TEXT
        for member in cls:
            if member.value == normalized:
                return member
        raise UnsupportedFormatError(
            str(value), [member.value for member in cls]
        )

    @property
    def extension(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExportResult:
    """Serialized board content paired with the board title.

    The title is what the file writer names the output after. Unpacks as
    ``content, board_title = result``.
    """

    content: str
    board_title: str
    export_format: ExportFormat

    def __iter__(self) -> Iterator[str]:
        yield self.content
        yield self.board_title
