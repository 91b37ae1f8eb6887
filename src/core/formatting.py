"""Initial display text for each field kind."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from core.models import (
    CanonicalValue,
    DateValue,
    IntValue,
    MonthYearValue,
    MoneyValue,
    PercentValue,
    TextValue,
    serialize,
)
from core.month_year import MONTH_NAMES


def display_text(value: Optional[CanonicalValue], money_decimals: int = 2) -> str:
    """Return the text shown in the visible input for a loaded value.

    - Money: grouped, fixed decimals, negatives in parentheses: "(1,234.50)"
    - Int: grouped, negatives in parentheses, zero as "0"
    - Percent, Date and Text: the canonical string
    - MonthYear: "Jun 2023"
    """

    if value is None:
        return ""
    if isinstance(value, MoneyValue):
        return format_money(value.amount, money_decimals)
    if isinstance(value, IntValue):
        return _accounting(format(abs(value.number), ",d"), value.number < 0)
    if isinstance(value, MonthYearValue):
        return month_year_display(str(value.month), str(value.year))
    if isinstance(value, (PercentValue, DateValue, TextValue)):
        return serialize(value)
    raise TypeError(f"Unsupported canonical value: {type(value).__name__}")


def format_money(amount: Decimal, decimals: int = 2) -> str:
    quantum = Decimal(1).scaleb(-decimals)
    rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)
    return _accounting(format(abs(rounded), f",.{decimals}f"), rounded < 0)


def month_year_display(month: str, year: str) -> str:
    """Human label for the month/year pair, skipping blank halves."""

    parts = [MONTH_NAMES.get(month.strip(), ""), year.strip()]
    return " ".join(part for part in parts if part)


def _accounting(text: str, negative: bool) -> str:
    return f"({text})" if negative else text
