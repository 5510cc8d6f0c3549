"""CLI (Typer).

`ask` commands read one validated value and print it on the last line of
stdout, so they can be used from shell scripts. `demo` walks through every
read operation.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.console_io import ConsoleIO
from cli.logging_setup import configure_logging
from cli.ui_components import build_results_table, format_value, print_banner
from core.config import AppSettings
from core.domain.models import BooleanLiterals, DateFormat
from core.errors import InputClosedError
from core.services import prompt_reader

app = typer.Typer(no_args_is_help=True, help="Prompt for validated values on the console.")
ask_app = typer.Typer(no_args_is_help=True, help="Ask for a single value and print it.")
app.add_typer(ask_app, name="ask")

_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log rejected attempts (DEBUG)."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def _ask(read: Callable[[ConsoleIO], object]) -> None:
    """Run one read against a fresh console session and print the value."""

    io = ConsoleIO.from_settings()
    try:
        value = read(io)
    except InputClosedError as exc:
        _err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc
    io.console.print(format_value(value), markup=False, highlight=False)


@ask_app.command("char")
def ask_char(
    prompt: str = typer.Option("Enter a character", "--prompt", "-p"),
    allowed: Optional[str] = typer.Option(None, "--allowed", help="Accepted characters (case-sensitive)."),
) -> None:
    """Read a single character."""

    _ask(lambda io: prompt_reader.read_character(io, prompt, allowed))


@ask_app.command("string")
def ask_string(
    prompt: str = typer.Option("Enter text", "--prompt", "-p"),
    required: bool = typer.Option(False, "--required", help="Re-prompt on blank input."),
    label: Optional[str] = typer.Option(None, "--label", help="What is being asked for (used in the diagnostic)."),
) -> None:
    """Read a line of text."""

    if required:
        _ask(lambda io: prompt_reader.read_string_required(io, prompt, label))
    else:
        _ask(lambda io: prompt_reader.read_string(io, prompt))


@ask_app.command("int")
def ask_int(
    prompt: str = typer.Option("Enter a number", "--prompt", "-p"),
    minimum: Optional[int] = typer.Option(None, "--min", help="Smallest accepted value."),
    maximum: Optional[int] = typer.Option(None, "--max", help="Largest accepted value."),
) -> None:
    """Read an integer, optionally within [--min, --max]."""

    if (minimum is None) != (maximum is None):
        raise typer.BadParameter("--min and --max must be given together")
    if minimum is not None and maximum is not None and minimum > maximum:
        raise typer.BadParameter("--min must not exceed --max")
    _ask(lambda io: prompt_reader.read_int(io, prompt, minimum=minimum, maximum=maximum))


@ask_app.command("bool")
def ask_bool(
    prompt: str = typer.Option("Enter true or false", "--prompt", "-p"),
    true_literal: Optional[str] = typer.Option(None, "--true-literal", help="Word meaning yes."),
    false_literal: Optional[str] = typer.Option(None, "--false-literal", help="Word meaning no."),
) -> None:
    """Read a boolean answer."""

    if (true_literal is None) != (false_literal is None):
        raise typer.BadParameter("--true-literal and --false-literal must be given together")
    literals = None
    if true_literal is not None and false_literal is not None:
        try:
            literals = BooleanLiterals(true_literal=true_literal, false_literal=false_literal)
        except ValidationError as exc:
            raise typer.BadParameter(
                "literals must be non-empty and differ ignoring case",
                param_hint="--true-literal/--false-literal",
            ) from exc
    _ask(lambda io: prompt_reader.read_boolean(io, prompt, literals))


@ask_app.command("date")
def ask_date(
    prompt: str = typer.Option("Enter a date", "--prompt", "-p"),
    pattern: Optional[str] = typer.Option(None, "--pattern", help="Parse pattern (yyyy-MM-dd or %Y-%m-%d)."),
    display: Optional[str] = typer.Option(None, "--display", help="Format hint shown to the user."),
) -> None:
    """Read a calendar date (strict: 2021-02-30 is rejected)."""

    settings = AppSettings()
    try:
        date_format = DateFormat(
            parse_pattern=pattern or settings.date_pattern,
            display_pattern=display or settings.date_display,
        )
    except ValidationError as exc:
        raise typer.BadParameter(exc.errors()[0]["msg"], param_hint="--pattern") from exc
    _ask(lambda io: prompt_reader.read_date(io, prompt, date_format=date_format))


@app.command()
def demo() -> None:
    """Walk through every read operation and show what was read."""

    settings = AppSettings()
    io = ConsoleIO.from_settings(settings)
    print_banner(io.console)

    steps: list[tuple[str, Callable[[], object]]] = [
        ("read_character", lambda: prompt_reader.read_character(io, "Any character")),
        ("read_character (abc)", lambda: prompt_reader.read_character(io, "One of a, b, c", "abc")),
        ("read_string", lambda: prompt_reader.read_string(io, "Anything, blank is fine")),
        ("read_string_required", lambda: prompt_reader.read_string_required(io, "Your name", "name")),
        ("read_int (1..10)", lambda: prompt_reader.read_int(io, "A number from 1 to 10", minimum=1, maximum=10)),
        ("read_int", lambda: prompt_reader.read_int(io, "Any whole number")),
        ("read_boolean", lambda: prompt_reader.read_boolean(io, "true or false")),
        ("read_boolean (y/n)", lambda: prompt_reader.read_boolean(io, "Continue?", true_literal="y", false_literal="n")),
        (
            "read_date",
            lambda: prompt_reader.read_date(io, "A date", date_format=settings.date_format),
        ),
    ]

    rows: list[tuple[str, object]] = []
    try:
        for name, step in steps:
            rows.append((name, step()))
    except InputClosedError as exc:
        logger.info("Demo stopped after %d step(s)", len(rows))
        _err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc

    io.console.print(build_results_table(rows))


def run() -> None:
    app()
