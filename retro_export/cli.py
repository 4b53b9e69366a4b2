"""retro-export CLI: export a retrospective board to a text or CSV file.

Usage:
    retro-export URL                        # Write <Title>.txt to ./
    retro-export URL -t csv -f exports/     # Write exports/<Title>.csv
    retro-export URL --html saved.html      # Use a saved page, no browser
    retro-export URL -s my-settings.json    # Use other selectors
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import click

from retro_export.common.exceptions import RetroExportError
from retro_export.config import (
    DEFAULT_SETTINGS_PATH,
    SelectorConfig,
    load_settings,
)
from retro_export.data_types import ExportFormat, ExportResult
from retro_export.driver.static_page import StaticBoardPage
from retro_export.exporter import export_board, output_filename

logger = logging.getLogger(__name__)


async def _export_live(
    url: str, config: SelectorConfig, fmt: ExportFormat, headless: bool
) -> ExportResult:
    try:
        from retro_export.driver.playwright_page import PlaywrightBoardPage
    except ImportError as e:
        raise click.ClickException(
            f"Missing dependency: {e}. "
            "Install Playwright and its browsers: "
            "pip install playwright && playwright install chromium"
        ) from e

    async with PlaywrightBoardPage.open(url, headless=headless) as page:
        return await export_board(page, config, fmt)


async def _export_saved(
    url: str, html_path: Path, config: SelectorConfig, fmt: ExportFormat
) -> ExportResult:
    page = StaticBoardPage.from_file(html_path, url)
    return await export_board(page, config, fmt)


def write_export(result: ExportResult, directory: Path) -> Path:
    """Write an export next to its siblings, named after the board.

    Args:
        result: The export to write.
        directory: Target directory; created if missing.

    Returns:
        The absolute path of the written file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = (
        directory / output_filename(result.board_title, result.export_format)
    ).resolve()
    # newline="" keeps the CSV row terminators as written
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(result.content)
    return path


@click.command()
@click.version_option(package_name="retro-export")
@click.argument("url")
@click.option(
    "-f",
    "--file-path",
    "file_path",
    type=click.Path(file_okay=False, path_type=Path),
    default="./",
    show_default=True,
    help="The directory to save the file in.",
)
@click.option(
    "-t",
    "--file-type",
    "file_type",
    default="txt",
    show_default=True,
    help="The type of file to export the board data to (txt or csv).",
)
@click.option(
    "-s",
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=str(DEFAULT_SETTINGS_PATH),
    show_default=True,
    help="Selector settings JSON file.",
)
@click.option(
    "--timeout",
    type=click.IntRange(min=1),
    default=None,
    help="Milliseconds to wait for the board to render "
    "(overrides the settings file).",
)
@click.option(
    "--html",
    "html_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Extract from a saved HTML page instead of launching a browser.",
)
@click.option(
    "--headed", is_flag=True, help="Show the browser window while exporting."
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def cli(
    url: str,
    file_path: Path,
    file_type: str,
    settings_path: Path,
    timeout: int | None,
    html_path: Path | None,
    headed: bool,
    verbose: bool,
) -> None:
    """Export the retrospective board at URL to a file.

    \b
    Examples:
        retro-export https://easyretro.io/publicboard/abc123
        retro-export https://easyretro.io/publicboard/abc123 -t csv -f out/
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        # Reject unknown formats before starting a browser
        fmt = ExportFormat.parse(file_type)
        config = load_settings(settings_path)
        if timeout is not None:
            config = config.model_copy(update={"wait_timeout_ms": timeout})

        if html_path is not None:
            result = asyncio.run(_export_saved(url, html_path, config, fmt))
        else:
            result = asyncio.run(
                _export_live(url, config, fmt, headless=not headed)
            )

        written = write_export(result, file_path)
    except RetroExportError as e:
        logger.debug("Export failed", exc_info=True)
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Successfully written to file at: {written}")


def main() -> None:
    """Entry point for the ``retro-export`` console script."""
    cli()
