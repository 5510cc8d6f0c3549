"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Las restricciones que el llamador pasa a cada lectura (rango, literales,
  formato de fecha) se validan una sola vez, en el borde, y no dentro del
  bucle de reintento.
- `ParseResult` reemplaza las excepciones de parseo: el bucle consume un
  resultado tipado en lugar de capturar errores.

Nota:
- Estos modelos describen *qué* se acepta, no *cómo* se lee.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from core import date_patterns

T = TypeVar("T")


class InputErrorKind(str, Enum):
    """Kinds of rejected input. All of them are recovered by re-prompting."""

    EMPTY = "empty"
    OUT_OF_RANGE = "out_of_range"
    NOT_A_NUMBER = "not_a_number"
    NOT_ALLOWED = "not_allowed"
    INVALID_DATE = "invalid_date"


class IntRange(BaseModel):
    """Inclusive integer range `[minimum, maximum]`."""

    model_config = ConfigDict(frozen=True)

    minimum: int = Field(
        ...,
        description="Smallest accepted value (inclusive).",
    )
    maximum: int = Field(
        ...,
        description="Largest accepted value (inclusive).",
    )

    @model_validator(mode="after")
    def check_order(self) -> "IntRange":
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must not exceed maximum ({self.maximum})"
            )
        return self

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


class BooleanLiterals(BaseModel):
    """The pair of words a user types to answer yes/no questions.

    Matching is case-insensitive, so the two literals must differ once
    case is ignored.
    """

    model_config = ConfigDict(frozen=True)

    true_literal: str = Field(
        default="true",
        min_length=1,
        description="Text that maps to True.",
    )
    false_literal: str = Field(
        default="false",
        min_length=1,
        description="Text that maps to False.",
    )

    @model_validator(mode="after")
    def check_distinct(self) -> "BooleanLiterals":
        if self.true_literal.casefold() == self.false_literal.casefold():
            raise ValueError("true_literal and false_literal must differ (case-insensitive)")
        return self

    def match(self, text: str) -> bool | None:
        """Return the boolean for `text`, or None when it matches neither literal."""

        folded = text.casefold()
        if folded == self.true_literal.casefold():
            return True
        if folded == self.false_literal.casefold():
            return False
        return None


class DateFormat(BaseModel):
    """Pattern used to parse a date plus the hint shown to the user.

    The two are independent: `display_pattern` is never checked against
    `parse_pattern`.
    """

    model_config = ConfigDict(frozen=True)

    parse_pattern: str = Field(
        ...,
        min_length=1,
        description="strftime pattern (%Y-%m-%d) or letter pattern (yyyy-MM-dd).",
    )
    display_pattern: str = Field(
        ...,
        description="Human readable format appended to the prompt, e.g. YYYY-MM-DD.",
    )

    @field_validator("parse_pattern")
    @classmethod
    def check_pattern(cls, value: str) -> str:
        date_patterns.to_strptime(value)
        return value

    def parse(self, text: str) -> date:
        """Strict parse of `text`; raises `ValueError` on any mismatch."""

        return date_patterns.parse_date(text, self.parse_pattern)


class ParseResult(BaseModel, Generic[T]):
    """Outcome of parsing one raw line: either a value or a diagnostic."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T | None = None
    error: str | None = None
    kind: InputErrorKind | None = None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str, kind: InputErrorKind) -> "ParseResult[T]":
        return cls(error=error, kind=kind)

    @property
    def is_ok(self) -> bool:
        return self.error is None
