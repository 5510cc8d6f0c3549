from __future__ import annotations

from datetime import date

import pytest

from core import parsing
from core.domain import messages
from core.domain.models import BooleanLiterals, DateFormat, InputErrorKind, IntRange


def test_parse_character_kinds():
    assert parsing.parse_character("").kind is InputErrorKind.EMPTY
    assert parsing.parse_character("q", "ab").kind is InputErrorKind.NOT_ALLOWED
    assert parsing.parse_character("abc", "ab").value == "a"


@pytest.mark.parametrize("text,expected", [("7", 7), ("+7", 7), ("-0", 0), ("0010", 10)])
def test_parse_int_accepts_signed_decimal(text, expected):
    result = parsing.parse_int(text)
    assert result.is_ok
    assert result.value == expected


@pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "0x10", "1e3", "--1"])
def test_parse_int_rejects_non_decimal_text(text):
    result = parsing.parse_int(text)
    assert not result.is_ok
    assert result.kind is InputErrorKind.NOT_A_NUMBER
    assert result.error == messages.NOT_A_WHOLE_NUMBER


def test_parse_int_range_messages():
    bounds = IntRange(minimum=-5, maximum=5)
    assert parsing.parse_int("x", bounds).error == messages.NOT_A_NUMBER
    assert parsing.parse_int("6", bounds).error == messages.NUMBER_OUT_OF_RANGE
    assert parsing.parse_int("-5", bounds).value == -5


def test_parse_int_unbounded_has_no_size_limit():
    assert parsing.parse_int("99999999999999999999").value == 99999999999999999999


def test_parse_boolean_literals():
    literals = BooleanLiterals(true_literal="Oui", false_literal="Non")
    assert parsing.parse_boolean("oUI", literals).value is True
    assert parsing.parse_boolean("NON", literals).value is False
    assert parsing.parse_boolean("", literals).kind is InputErrorKind.EMPTY
    assert parsing.parse_boolean("peut-être", literals).error == messages.boolean_invalid("Oui", "Non")


def test_parse_required_label():
    assert parsing.parse_required("", "city").error == "No city inputted. Please input a(n) city."
    assert parsing.parse_required(" ").value == " "


ISO = DateFormat(parse_pattern="yyyy-MM-dd", display_pattern="YYYY-MM-DD")


def test_parse_date_strict():
    assert parsing.parse_date("2020-02-29", ISO).value == date(2020, 2, 29)
    failed = parsing.parse_date("2021-04-31", ISO)
    assert failed.kind is InputErrorKind.INVALID_DATE
    assert failed.error == messages.date_invalid("YYYY-MM-DD")


@pytest.mark.parametrize("text", ["2021-2-8", "2021-02-8", "2021- 2-08", "21-02-08"])
def test_parse_date_requires_two_digit_fields(text):
    result = parsing.parse_date(text, ISO)
    assert result.kind is InputErrorKind.INVALID_DATE


def test_parse_int_beyond_conversion_limit_is_rejected():
    huge = "9" * 5000
    assert parsing.parse_int(huge).error == messages.NOT_A_WHOLE_NUMBER
    ranged = parsing.parse_int(huge, IntRange(minimum=1, maximum=10))
    assert ranged.kind is InputErrorKind.NOT_A_NUMBER
    assert ranged.error == messages.NOT_A_NUMBER
