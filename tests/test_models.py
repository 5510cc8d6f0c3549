from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from core.domain.models import BooleanLiterals, DateFormat, IntRange, ParseResult


def test_int_range_requires_order():
    with pytest.raises(ValidationError):
        IntRange(minimum=5, maximum=1)
    single = IntRange(minimum=3, maximum=3)
    assert single.contains(3)
    assert not single.contains(4)


def test_boolean_literals_defaults_and_validation():
    assert BooleanLiterals().match("TRUE") is True
    assert BooleanLiterals().match("yes") is None
    with pytest.raises(ValidationError):
        BooleanLiterals(true_literal="Y", false_literal="y")
    with pytest.raises(ValidationError):
        BooleanLiterals(true_literal="", false_literal="n")


def test_date_format_requires_parse_pattern():
    with pytest.raises(ValidationError):
        DateFormat(parse_pattern="", display_pattern="x")


def test_date_format_rejects_unsupported_pattern():
    with pytest.raises(ValidationError):
        DateFormat(parse_pattern="yyyy-QQ", display_pattern="?")


def test_date_format_parse():
    fmt = DateFormat(parse_pattern="MM/dd/yyyy", display_pattern="MM/DD/YYYY")
    assert fmt.parse("02/29/2024") == date(2024, 2, 29)
    with pytest.raises(ValueError):
        fmt.parse("2/29/2024")


def test_parse_result_is_immutable():
    result = ParseResult.success(1)
    assert result.is_ok
    with pytest.raises(ValidationError):
        result.value = 2
