"""Validated console reads.

Every public function here follows the same loop: show the prompt, read one
line, parse it, and on failure print the diagnostic and start over. The loop
is unbounded; the only ways out are valid input or a closed input stream
(`InputClosedError`).

The console session is passed explicitly as the first argument so a single
reader is shared by the whole process without hidden module state.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, TypeVar

from core import parsing
from core.domain import messages
from core.domain.models import BooleanLiterals, DateFormat, IntRange, ParseResult
from core.interfaces.console import ConsoleHandle

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _read_until_valid(
    io: ConsoleHandle,
    prompt: str,
    parse: Callable[[str], ParseResult[T]],
) -> T:
    attempt = 0
    while True:
        attempt += 1
        io.show_prompt(prompt)
        result = parse(io.read_line())
        if result.is_ok:
            return result.value  # type: ignore[return-value]
        logger.debug(
            "Rejected input for %r (attempt %d): %s",
            prompt,
            attempt,
            result.kind.value if result.kind else "unknown",
        )
        io.warn(result.error or "")


def read_character(io: ConsoleHandle, prompt: str, allowed_chars: str | None = None) -> str:
    """Read one non-empty line and return its first character.

    With `allowed_chars`, the first character must be one of them
    (case-sensitive). Characters after the first are discarded.
    """

    return _read_until_valid(io, prompt, lambda line: parsing.parse_character(line, allowed_chars))


def read_string(io: ConsoleHandle, prompt: str) -> str:
    """Read one line verbatim. Blank lines are returned as `""`."""

    io.show_prompt(prompt)
    return io.read_line()


def read_string_required(io: ConsoleHandle, prompt: str, label: str | None = None) -> str:
    """Read a non-empty line.

    `label` names what is being asked for in the diagnostic
    ("No name inputted. Please input a(n) name."); None gives a generic one.
    """

    return _read_until_valid(io, prompt, lambda line: parsing.parse_required(line, label))


def read_int(
    io: ConsoleHandle,
    prompt: str,
    bounds: IntRange | None = None,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Read a base-10 integer, optionally within an inclusive range.

    The range may be given as an `IntRange` or as `minimum`/`maximum`
    keywords (both or neither). Without a range any integer is accepted.
    """

    if minimum is not None or maximum is not None:
        if bounds is not None:
            raise TypeError("pass either bounds or minimum/maximum, not both")
        if minimum is None or maximum is None:
            raise TypeError("minimum and maximum must be given together")
        bounds = IntRange(minimum=minimum, maximum=maximum)

    return _read_until_valid(io, prompt, lambda line: parsing.parse_int(line, bounds))


def read_boolean(
    io: ConsoleHandle,
    prompt: str,
    literals: BooleanLiterals | None = None,
    *,
    true_literal: str | None = None,
    false_literal: str | None = None,
) -> bool:
    """Read a yes/no answer, matched case-insensitively.

    Defaults to the literals "true" and "false".
    """

    if true_literal is not None or false_literal is not None:
        if literals is not None:
            raise TypeError("pass either literals or true_literal/false_literal, not both")
        if true_literal is None or false_literal is None:
            raise TypeError("true_literal and false_literal must be given together")
        literals = BooleanLiterals(true_literal=true_literal, false_literal=false_literal)

    return _read_until_valid(io, prompt, lambda line: parsing.parse_boolean(line, literals))


def read_date(
    io: ConsoleHandle,
    prompt: str,
    parse_pattern: str | None = None,
    display_pattern: str | None = None,
    *,
    date_format: DateFormat | None = None,
) -> date:
    """Read a calendar date.

    The format is given either as `parse_pattern`/`display_pattern` or as a
    `DateFormat` (not both). The prompt is shown as
    "{prompt} ({display_pattern})". Each attempt is a full
    `read_string_required` cycle followed by a strict parse, so blank lines
    get the "No date inputted" diagnostic while `2021-2-8` and `2021-02-30`
    get the format diagnostic.
    """

    if parse_pattern is not None or display_pattern is not None:
        if date_format is not None:
            raise TypeError("pass either date_format or parse_pattern/display_pattern, not both")
        if parse_pattern is None or display_pattern is None:
            raise TypeError("parse_pattern and display_pattern must be given together")
        # A bad pattern fails here, before the user is asked anything.
        date_format = DateFormat(parse_pattern=parse_pattern, display_pattern=display_pattern)
    if date_format is None:
        raise TypeError("a date format is required")

    full_prompt = f"{prompt} ({date_format.display_pattern})"

    while True:
        text = read_string_required(io, full_prompt, messages.DATE_LABEL)
        result = parsing.parse_date(text, date_format)
        if result.is_ok:
            return result.value  # type: ignore[return-value]
        logger.debug("Rejected date for %r: pattern %r", prompt, date_format.parse_pattern)
        io.warn(result.error or "")
