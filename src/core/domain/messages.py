"""Diagnostic texts shown to the user.

The wording is reproduced verbatim from the console tool these helpers
replace; callers and tests rely on it. Texts that start with a newline are
printed after a blank line.
"""

from __future__ import annotations

NO_CHARACTER = "No character inputted. Please input a character."
CHARACTER_OUT_OF_RANGE = "\nCharacter out of range. Please re-enter."

NO_TEXT = "No text inputted. Please input text."
NO_LABELLED_TEXT = "No {label} inputted. Please input a(n) {label}."

NOT_A_NUMBER = "\nNot a valid number. Please re-enter."
NUMBER_OUT_OF_RANGE = "\nNumber is out of range. Please re-enter."
NOT_A_WHOLE_NUMBER = "\nNot a valid whole number. Please re-enter."

BOOLEAN_EMPTY = "Cannot be empty. Please re-enter either {true} or {false}."
BOOLEAN_INVALID = "\nNot a valid input. Please re-enter either {true} or {false}."

DATE_LABEL = "date"
DATE_INVALID = "\nNot a valid date. Please re-enter to the format of {display}"


def missing_text(label: str | None) -> str:
    """Diagnostic for an empty required string, generic when `label` is None."""

    if label is None:
        return NO_TEXT
    return NO_LABELLED_TEXT.format(label=label)


def boolean_empty(true_literal: str, false_literal: str) -> str:
    return BOOLEAN_EMPTY.format(true=true_literal, false=false_literal)


def boolean_invalid(true_literal: str, false_literal: str) -> str:
    return BOOLEAN_INVALID.format(true=true_literal, false=false_literal)


def date_invalid(display_pattern: str) -> str:
    return DATE_INVALID.format(display=display_pattern)
