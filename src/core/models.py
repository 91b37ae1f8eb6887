"""Core domain models.

Field values cross the form boundary as plain strings. Inside the core they are
parsed into small tagged dataclasses so comparisons and formatting never have
to guess at the type of a string.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Union

from core.month_year import parse_loose_date


class FieldKind(str, Enum):
    """Kinds of rich field; the kind picks the scrub rule and display format."""

    PERCENT = "percent"
    MONEY = "money"
    INT = "int"
    DATE = "date"
    MONTH_YEAR = "monthyear"
    TEXT = "text"


@dataclass(frozen=True)
class PercentValue:
    number: Decimal


@dataclass(frozen=True)
class MoneyValue:
    amount: Decimal


@dataclass(frozen=True)
class IntValue:
    number: int


@dataclass(frozen=True)
class DateValue:
    day: date


@dataclass(frozen=True)
class MonthYearValue:
    """A month of a year; the day is always the first."""

    month: int
    year: int


@dataclass(frozen=True)
class TextValue:
    text: str


CanonicalValue = Union[PercentValue, MoneyValue, IntValue, DateValue, MonthYearValue, TextValue]


def serialize(value: Optional[CanonicalValue]) -> str:
    """Return the canonical wire string for a typed value ("" for null)."""

    if value is None:
        return ""
    if isinstance(value, PercentValue):
        return str(value.number)
    if isinstance(value, MoneyValue):
        return str(value.amount)
    if isinstance(value, IntValue):
        return str(value.number)
    if isinstance(value, DateValue):
        return format_short_date(value.day)
    if isinstance(value, MonthYearValue):
        return f"{value.month}/1/{value.year}"
    if isinstance(value, TextValue):
        return value.text
    raise TypeError(f"Unsupported canonical value: {type(value).__name__}")


def parse_canonical(kind: FieldKind, text: str) -> Optional[CanonicalValue]:
    """Parse a canonical (scrubbed) string back into a typed value.

    Returns None for blank strings and for anything the kind cannot read,
    such as a malformed number that the scrubber passed through.
    """

    kind = FieldKind(kind)
    if not text or not text.strip():
        return None

    if kind in (FieldKind.PERCENT, FieldKind.MONEY):
        number = _parse_decimal(text)
        if number is None:
            return None
        return PercentValue(number) if kind is FieldKind.PERCENT else MoneyValue(number)

    if kind is FieldKind.INT:
        try:
            return IntValue(int(text.strip()))
        except ValueError:
            return None

    if kind in (FieldKind.DATE, FieldKind.MONTH_YEAR):
        parsed = parse_loose_date(text)
        if parsed is None:
            return None
        if kind is FieldKind.DATE:
            return DateValue(parsed)
        return MonthYearValue(parsed.month, parsed.year)

    return TextValue(text)


def from_server_value(kind: FieldKind, value: Any) -> Optional[CanonicalValue]:
    """Wrap a typed server-side value (Decimal, int, date, str, None)."""

    kind = FieldKind(kind)
    if value is None:
        return None
    if isinstance(value, str):
        if kind is FieldKind.TEXT:
            return TextValue(value)
        return parse_canonical(kind, value)

    if kind in (FieldKind.PERCENT, FieldKind.MONEY) and _is_number(value):
        number = value if isinstance(value, Decimal) else Decimal(str(value))
        return PercentValue(number) if kind is FieldKind.PERCENT else MoneyValue(number)

    if kind is FieldKind.INT and isinstance(value, int) and not isinstance(value, bool):
        return IntValue(value)

    if kind in (FieldKind.DATE, FieldKind.MONTH_YEAR) and isinstance(value, date):
        day = value.date() if isinstance(value, datetime) else value
        if kind is FieldKind.DATE:
            return DateValue(day)
        return MonthYearValue(day.month, day.year)

    raise TypeError(f"Unsupported value for {kind.value} field: {type(value).__name__}")


def to_canonical(kind: FieldKind, value: Any) -> str:
    """Return the literal string a server value is submitted as.

    Strings are taken as already canonical and returned untouched so that a
    value read back from a form post compares equal to itself.
    """

    if isinstance(value, str):
        return value
    return serialize(from_server_value(kind, value))


def format_short_date(day: date) -> str:
    """Format as M/d/yy without zero padding."""

    return f"{day.month}/{day.day}/{day:%y}"


def _parse_decimal(text: str) -> Optional[Decimal]:
    try:
        number = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
