"""Main CLI interface for par_cc_statusline."""

import logging
import sys
import time
from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .config import load_config
from .statusline_manager import StatusLineManager
from .xdg_dirs import get_log_file_path

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="par-cc-statusline",
    help="Render a Claude Code status line from the JSON session payload on stdin.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _setup_logging(debug: bool) -> None:
    """Configure logging without ever touching stdout."""
    if debug:
        log_file = get_log_file_path()
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers: list[logging.Handler] = [logging.FileHandler(log_file, encoding="utf-8")]
        except OSError:
            handlers = [logging.StreamHandler(sys.stderr)]
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=handlers,
        )
    else:
        logging.basicConfig(level=logging.ERROR, format="%(message)s")


def _read_stdin() -> bytes:
    """Read the whole request from stdin, returning nothing if it cannot be read."""
    try:
        return sys.stdin.buffer.read()
    except (OSError, ValueError, AttributeError):
        logger.debug("Could not read stdin", exc_info=True)
        return b""


@app.command()
def statusline(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Configuration file path"),
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable truecolor output")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Write debug logs to the cache directory")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """Print the status line for the session JSON read from stdin."""
    started_ns = time.perf_counter_ns()
    _setup_logging(debug)

    config = load_config(config_file)
    if no_color:
        config.color_enabled = False
    manager = StatusLineManager(config)

    raw = _read_stdin()
    try:
        output = manager.get_status_line_for_request(raw, started_ns)
    except Exception:
        # The status line must never crash Claude Code; fall back to defaults
        logger.exception("Failed to render status line")
        output = manager.get_status_line_for_request(b"", started_ns)

    typer.echo(output, color=True)


if __name__ == "__main__":
    app()
