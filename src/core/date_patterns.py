"""Date pattern translation.

Callers often write date formats in the `yyyy-MM-dd` letter style. Python's
parser speaks `strftime` directives, so letter patterns are translated once
before parsing. Patterns that already contain `%` are used as they are.

`strptime` alone is lenient about field widths (`%m` takes `2` as well as
`02`), so letter patterns also get a regular expression that pins each
field to the width its letter count asks for: `MM` is exactly two digits,
`M` one or two.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from functools import lru_cache
from typing import Iterator, NamedTuple

_DIGITS_2 = r"\d{2}"
_DIGITS_1_2 = r"\d{1,2}"
_DIGITS_4 = r"\d{4}"
_WORD = r"[^\W\d_]+"

# letter -> {run length: (directive, field regex)}. Longer runs fall back to
# the longest entry.
_DIRECTIVES: dict[str, dict[int, tuple[str, str]]] = {
    "y": {1: ("%Y", _DIGITS_4), 2: ("%y", _DIGITS_2), 4: ("%Y", _DIGITS_4)},
    "u": {1: ("%Y", _DIGITS_4), 2: ("%y", _DIGITS_2), 4: ("%Y", _DIGITS_4)},
    "M": {1: ("%m", _DIGITS_1_2), 2: ("%m", _DIGITS_2), 3: ("%b", _WORD), 4: ("%B", _WORD)},
    "L": {1: ("%m", _DIGITS_1_2), 2: ("%m", _DIGITS_2), 3: ("%b", _WORD), 4: ("%B", _WORD)},
    "d": {1: ("%d", _DIGITS_1_2), 2: ("%d", _DIGITS_2)},
    "D": {1: ("%j", r"\d{1,3}"), 2: ("%j", r"\d{2,3}"), 3: ("%j", r"\d{3}")},
    "E": {1: ("%a", _WORD), 2: ("%a", _WORD), 3: ("%a", _WORD), 4: ("%A", _WORD)},
}


class _Token(NamedTuple):
    directive: str
    regex: str


def _tokens(pattern: str) -> Iterator[_Token]:
    """Split a letter pattern into directive/regex pairs.

    Rules:
    - Text inside single quotes is literal; `''` is a literal quote, both
      inside and outside a quoted run.
    - Non-letter characters are literal.
    - Any other letter is rejected with `ValueError`.
    """

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                yield _Token("'", "'")
                i += 2
                continue
            literal: list[str] = []
            j = i + 1
            while True:
                if j >= n:
                    raise ValueError(f"Unterminated quote in date pattern {pattern!r}")
                if pattern[j] == "'":
                    if j + 1 < n and pattern[j + 1] == "'":
                        literal.append("'")
                        j += 2
                        continue
                    break
                literal.append(pattern[j])
                j += 1
            text = "".join(literal)
            yield _Token(text, re.escape(text))
            i = j + 1
            continue
        if ch.isalpha():
            run = 1
            while i + run < n and pattern[i + run] == ch:
                run += 1
            widths = _DIRECTIVES.get(ch)
            if widths is None:
                raise ValueError(f"Unsupported letter {ch!r} in date pattern {pattern!r}")
            yield _Token(*(widths.get(run) or widths[max(widths)]))
            i += run
            continue
        yield _Token(ch, re.escape(ch))
        i += 1


@lru_cache(maxsize=64)
def to_strptime(pattern: str) -> str:
    """Translate a letter pattern (`yyyy-MM-dd`) into a strptime pattern."""

    if "%" in pattern:
        return pattern
    return "".join(token.directive for token in _tokens(pattern))


@lru_cache(maxsize=64)
def _shape(pattern: str) -> re.Pattern[str] | None:
    if "%" in pattern:
        return None
    return re.compile("".join(token.regex for token in _tokens(pattern)))


def parse_date(text: str, pattern: str) -> date:
    """Parse `text` strictly against `pattern`.

    Field widths are checked first for letter patterns; then
    `datetime.strptime` rejects impossible days instead of rolling them over,
    so both `2021-2-8` and `2021-02-30` raise `ValueError` for `yyyy-MM-dd`.
    """

    shape = _shape(pattern)
    if shape is not None and shape.fullmatch(text) is None:
        raise ValueError(f"{text!r} does not match date pattern {pattern!r}")
    return datetime.strptime(text, to_strptime(pattern)).date()
