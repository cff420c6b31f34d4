import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from toolz import pipe

from .adapters.file_adapter import FilePlaylistStore, load_playlist
from .config import Settings, load_settings
from .domain.errors import AppError, ValidationError
from .domain.models import ParseResult
from .grammar import BY_TYPE
from .i18n import get_default_lang, get_message, set_lang
from .logger_config import setup_logger
from .serializer import render_playlist
from .validator import validate

# Initialization
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
logger = logging.getLogger(__name__)
store = FilePlaylistStore()

# Create the Typer app object
app = typer.Typer(
    name="hls-playlist",
    help="A CLI tool to inspect, validate and format HLS playlists.",
    add_completion=False,
)

# --- State and Callbacks ---

state = {"lang": get_default_lang(), "settings": Settings()}
set_lang(state["lang"])


@app.callback()
def main_callback(
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        help=get_message("help_lang"),
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help=get_message("help_config"), show_default=False
    ),
):
    """Work with HLS (M3U8) playlists from the command line."""
    settings_result = load_settings(config)
    if settings_result.is_left():
        error = settings_result.monoid[0]
        _handle_error(AppError(get_message("config_error", error=error.message)))

    settings = settings_result.value
    state["settings"] = settings
    setup_logger(settings.log_level, stream=sys.stderr)

    chosen_lang = lang or settings.lang
    if chosen_lang:
        set_lang(chosen_lang)
        state["lang"] = chosen_lang
        logger.info(f"Language explicitly set to: {chosen_lang}")


# --- Helper Functions ---


def _handle_error(error: AppError) -> None:
    """Displays a formatted error message and exits the application."""
    console.print(f"[bold red]Error:[/bold red] {escape(error.message)}")
    raise typer.Exit(code=1)


def _unwrap(result):
    if result.is_left():
        _handle_error(result.monoid[0])
    return result.value


def _log_summary(parsed: ParseResult) -> ParseResult:
    logger.info(
        f"{len(parsed.playlist)} tags, {len(parsed.diagnostics)} diagnostics."
    )
    return parsed


def _load(file_path: Path) -> ParseResult:
    """Reads and parses a playlist, exiting on fatal I/O or decoding errors."""
    return pipe(
        load_playlist(str(file_path), store),
        lambda e: e.map(_log_summary),
        _unwrap,
    )


def describe_violation(violation: ValidationError) -> str:
    return get_message(violation.message_key, **asdict(violation))


def _describe_fields(tag) -> str:
    return ", ".join(
        f"{name}={value!r}" for name, value in asdict(tag).items() if value is not None
    )


def _print_diagnostics(parsed: ParseResult, out: Console = console) -> None:
    if not parsed.diagnostics:
        return
    out.print(f"[bold yellow]{get_message('diagnostics_title')}[/bold yellow]")
    for diagnostic in parsed.diagnostics:
        out.print(f"  [yellow]![/yellow] {escape(diagnostic.message)}")


# --- CLI Commands ---


@app.command(name="inspect")
def inspect_playlist(
    file_path: Path = typer.Argument(..., help=get_message("help_file")),
):
    """Lists the tags of a playlist."""
    logger.info(f"Command 'inspect' initiated for: {file_path}")
    console.print(f"📄 {escape(get_message('reading_playlist', path=file_path))}")
    parsed = _load(file_path)

    table = Table(title=escape(get_message("tags_title", path=file_path)))
    table.add_column(get_message("column_index"), justify="right")
    table.add_column(get_message("column_tag"), no_wrap=True)
    table.add_column(get_message("column_fields"))
    for index, tag in enumerate(parsed.playlist, start=1):
        table.add_row(
            str(index), BY_TYPE[type(tag)].keyword, escape(_describe_fields(tag))
        )
    console.print(table)

    _print_diagnostics(parsed)
    console.print(
        get_message(
            "parse_summary",
            tags=len(parsed.playlist),
            diagnostics=len(parsed.diagnostics),
        )
    )


@app.command(name="validate")
def validate_playlist(
    file_path: Path = typer.Argument(..., help=get_message("help_file")),
    strict: bool = typer.Option(False, "--strict", help=get_message("help_strict")),
):
    """Checks a playlist against the HLS rules."""
    logger.info(f"Command 'validate' initiated for: {file_path}")
    console.print(f"📄 {escape(get_message('reading_playlist', path=file_path))}")
    parsed = _load(file_path)
    violations = validate(parsed.playlist)
    strict = strict or state["settings"].strict

    _print_diagnostics(parsed)
    for violation in violations:
        console.print(f"  [bold red]✗[/bold red] {escape(describe_violation(violation))}")

    if violations:
        console.print(
            f"[bold red]{escape(get_message('playlist_invalid', path=file_path, count=len(violations)))}[/bold red]"
        )
        raise typer.Exit(code=1)
    if strict and parsed.diagnostics:
        console.print(
            f"[bold red]{escape(get_message('strict_failure', count=len(parsed.diagnostics)))}[/bold red]"
        )
        raise typer.Exit(code=1)
    console.print(
        f"[bold green]✓ {escape(get_message('playlist_valid', path=file_path))}[/bold green]"
    )


@app.command(name="format")
def format_playlist(
    file_path: Path = typer.Argument(..., help=get_message("help_file")),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=get_message("help_output")
    ),
):
    """Re-emits a playlist in canonical form."""
    logger.info(f"Command 'format' initiated for: {file_path}")
    parsed = _load(file_path)
    _print_diagnostics(parsed, err_console)
    text = render_playlist(parsed.playlist)

    if output is None:
        # Raw text: rich would interpret brackets and wrap long lines.
        typer.echo(text, nl=False)
        return

    written = _unwrap(store.write(str(output), text))
    console.print(
        f"[bold green]✓ {escape(get_message('playlist_written', path=written))}[/bold green]"
    )


if __name__ == "__main__":
    app()
