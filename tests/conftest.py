"""Shared fixtures: board pages, selector settings, and sample boards."""

import json
from collections.abc import Callable
from html import escape
from pathlib import Path

import pytest

from retro_export.config import SelectorConfig
from retro_export.data_types import Board, Column, Message

ColumnSpec = tuple[str, list[tuple[str, str]]]

SETTINGS = {
    "selectors": {
        "boardTitleIdentifier": "#board-name",
        "messageColumn": ".column",
        "columnHeader": ".column-header",
        "messageContainer": ".message",
        "messageText": ".text",
        "messageVotes": ".votes",
    },
    "voteCount": 2,
    "waitTimeout": 500,
}


def render_board(title: str, columns: list[ColumnSpec]) -> str:
    """Render a board page in the shape the test settings expect.

    Args:
        title: Board title text, inserted verbatim (may be whitespace).
        columns: (header, [(message text, vote badge text), ...]) per column.

    Returns:
        HTML document string.
    """
    column_html = []
    for header, messages in columns:
        message_html = "".join(
            f"""
            <div class="message">
                <div class="text">{escape(text)}</div>
                <div class="votes">{escape(votes)}</div>
            </div>"""
            for text, votes in messages
        )
        column_html.append(
            f"""
        <section class="column">
            <h2 class="column-header">{escape(header)}</h2>
            {message_html}
        </section>"""
        )

    columns_markup = "".join(column_html)
    return f"""
    <html>
    <head><meta charset="utf-8"><title>Retro</title></head>
    <body>
        <h1 id="board-name">{escape(title)}</h1>
        <main>{columns_markup}</main>
    </body>
    </html>
    """


@pytest.fixture
def make_board_html() -> Callable[[str, list[ColumnSpec]], str]:
    """Factory for board page HTML.

    Returns:
        render_board, so tests can build pages inline.
    """
    return render_board


@pytest.fixture
def settings_dict() -> dict:
    """A settings document in the persisted JSON shape."""
    return json.loads(json.dumps(SETTINGS))


@pytest.fixture
def settings_file(tmp_path: Path, settings_dict: dict) -> Path:
    """Write the settings document to a temporary file."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(settings_dict), encoding="utf-8")
    return path


@pytest.fixture
def selector_config(settings_dict: dict) -> SelectorConfig:
    """Selector settings matching render_board, with a threshold of 2."""
    return SelectorConfig.from_settings(settings_dict)


@pytest.fixture
def retro_html() -> str:
    """A realistic three-column board page.

    "Went well" has three messages (one below threshold), "Needs work" has
    only a below-threshold message, and "Ideas" has one message with a
    badge that is not a number.
    """
    return render_board(
        "  Sprint 1  ",
        [
            (
                " Went well ",
                [
                    ("Shipped X", "3"),
                    ("Fixed CI", " 2 "),
                    ("Cake", "1"),
                ],
            ),
            ("Needs work", [("Too many meetings", "1")]),
            ("Ideas", [("Pair more", "n/a"), ("Demo day", "5 votes")]),
        ],
    )


@pytest.fixture
def sprint_board() -> Board:
    """The board from the documented text and CSV examples."""
    return Board(
        title="Sprint 1",
        columns=(
            Column(
                title="Went well",
                messages=(Message(text="Shipped X", vote_count=3),),
            ),
            Column(title="Needs work", messages=()),
        ),
    )


@pytest.fixture
def ragged_board() -> Board:
    """A board whose columns hold different numbers of messages."""
    return Board(
        title="Q3 Retro",
        columns=(
            Column(
                title="Start",
                messages=(
                    Message(text="Code reviews", vote_count=4),
                    Message(text="Retro notes", vote_count=2),
                    Message(text="Demos", vote_count=2),
                ),
            ),
            Column(title="Stop", messages=()),
            Column(
                title="Continue",
                messages=(Message(text="Standups", vote_count=5),),
            ),
        ),
    )
