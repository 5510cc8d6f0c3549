"""Pure parsers: one raw line in, one `ParseResult` out.

Nothing here touches the console. Each function encodes the acceptance rule
of one read operation so the retry loops in `core.services.prompt_reader`
stay identical in shape.
"""

from __future__ import annotations

import re
from datetime import date

from core.domain import messages
from core.domain.models import BooleanLiterals, DateFormat, InputErrorKind, IntRange, ParseResult

# Sign plus digits, nothing else: no surrounding whitespace, no underscores.
_INTEGER_RE = re.compile(r"[+-]?\d+")

DEFAULT_LITERALS = BooleanLiterals()


def parse_character(line: str, allowed_chars: str | None = None) -> ParseResult[str]:
    """First character of `line`; the rest of the line is dropped."""

    if not line:
        return ParseResult.failure(messages.NO_CHARACTER, InputErrorKind.EMPTY)
    first = line[0]
    if allowed_chars is not None and first not in allowed_chars:
        return ParseResult.failure(messages.CHARACTER_OUT_OF_RANGE, InputErrorKind.NOT_ALLOWED)
    return ParseResult.success(first)


def parse_required(line: str, label: str | None = None) -> ParseResult[str]:
    if not line:
        return ParseResult.failure(messages.missing_text(label), InputErrorKind.EMPTY)
    return ParseResult.success(line)


def parse_int(line: str, bounds: IntRange | None = None) -> ParseResult[int]:
    """Base-10 integer, optionally restricted to an inclusive range."""

    error = messages.NOT_A_NUMBER if bounds is not None else messages.NOT_A_WHOLE_NUMBER
    if _INTEGER_RE.fullmatch(line) is None:
        return ParseResult.failure(error, InputErrorKind.NOT_A_NUMBER)
    try:
        number = int(line)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit.
        return ParseResult.failure(error, InputErrorKind.NOT_A_NUMBER)
    if bounds is not None and not bounds.contains(number):
        return ParseResult.failure(messages.NUMBER_OUT_OF_RANGE, InputErrorKind.OUT_OF_RANGE)
    return ParseResult.success(number)


def parse_boolean(line: str, literals: BooleanLiterals | None = None) -> ParseResult[bool]:
    literals = literals or DEFAULT_LITERALS
    if not line:
        return ParseResult.failure(
            messages.boolean_empty(literals.true_literal, literals.false_literal),
            InputErrorKind.EMPTY,
        )
    answer = literals.match(line)
    if answer is None:
        return ParseResult.failure(
            messages.boolean_invalid(literals.true_literal, literals.false_literal),
            InputErrorKind.NOT_ALLOWED,
        )
    return ParseResult.success(answer)


def parse_date(line: str, date_format: DateFormat) -> ParseResult[date]:
    """Strict calendar date. Wrong field widths and impossible days both fail."""

    try:
        return ParseResult.success(date_format.parse(line))
    except ValueError:
        return ParseResult.failure(
            messages.date_invalid(date_format.display_pattern), InputErrorKind.INVALID_DATE
        )
