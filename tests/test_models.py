from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from core.formatting import display_text, format_money, month_year_display
from core.models import (
    DateValue,
    FieldKind,
    IntValue,
    MonthYearValue,
    MoneyValue,
    PercentValue,
    TextValue,
    from_server_value,
    parse_canonical,
    serialize,
    to_canonical,
)


def test_serialize_each_kind() -> None:
    assert serialize(None) == ""
    assert serialize(PercentValue(Decimal("15"))) == "15"
    assert serialize(MoneyValue(Decimal("1500.00"))) == "1500.00"
    assert serialize(IntValue(-3)) == "-3"
    assert serialize(DateValue(date(2023, 6, 5))) == "6/5/23"
    assert serialize(MonthYearValue(6, 2023)) == "6/1/2023"
    assert serialize(TextValue("hi")) == "hi"


def test_parse_canonical_reads_scrubbed_strings() -> None:
    assert parse_canonical(FieldKind.MONEY, "-250") == MoneyValue(Decimal("-250"))
    assert parse_canonical(FieldKind.INT, "1200") == IntValue(1200)
    assert parse_canonical(FieldKind.DATE, "6/5/23") == DateValue(date(2023, 6, 5))
    assert parse_canonical(FieldKind.MONTH_YEAR, "6/1/2024") == MonthYearValue(6, 2024)
    assert parse_canonical(FieldKind.TEXT, "x") == TextValue("x")


def test_parse_canonical_blank_or_malformed_is_none() -> None:
    assert parse_canonical(FieldKind.MONEY, "") is None
    assert parse_canonical(FieldKind.MONEY, "1.2.3") is None
    assert parse_canonical(FieldKind.INT, "1.5") is None
    assert parse_canonical(FieldKind.DATE, "someday") is None


def test_to_canonical_from_server_values() -> None:
    assert to_canonical(FieldKind.MONEY, Decimal("1500.00")) == "1500.00"
    assert to_canonical(FieldKind.PERCENT, 15) == "15"
    assert to_canonical(FieldKind.INT, 0) == "0"
    assert to_canonical(FieldKind.DATE, datetime(2023, 6, 15, 9, 30)) == "6/15/23"
    assert to_canonical(FieldKind.MONTH_YEAR, date(2023, 6, 20)) == "6/1/2023"
    assert to_canonical(FieldKind.TEXT, None) == ""
    # Strings are already canonical and must compare equal to themselves.
    assert to_canonical(FieldKind.MONTH_YEAR, "6/1/2023 12:00:00 AM") == "6/1/2023 12:00:00 AM"


def test_from_server_value_rejects_wrong_types() -> None:
    with pytest.raises(TypeError):
        from_server_value(FieldKind.INT, 1.5)
    with pytest.raises(TypeError):
        from_server_value(FieldKind.MONEY, True)
    with pytest.raises(TypeError):
        from_server_value(FieldKind.DATE, 20230601)


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        parse_canonical("currency", "1")


def test_money_display() -> None:
    assert format_money(Decimal("1500")) == "1,500.00"
    assert format_money(Decimal("-12.5")) == "(12.50)"
    assert format_money(Decimal("0.125")) == "0.13"
    assert format_money(Decimal("1234.56789"), decimals=4) == "1,234.5679"


def test_display_text_per_kind() -> None:
    assert display_text(None) == ""
    assert display_text(IntValue(1234567)) == "1,234,567"
    assert display_text(IntValue(-45)) == "(45)"
    assert display_text(IntValue(0)) == "0"
    assert display_text(PercentValue(Decimal("7.5"))) == "7.5"
    assert display_text(DateValue(date(2024, 12, 31))) == "12/31/24"
    assert display_text(MonthYearValue(6, 2023)) == "Jun 2023"
    assert display_text(TextValue("as is")) == "as is"


def test_month_year_display_skips_blank_halves() -> None:
    assert month_year_display(" ", "2023") == "2023"
    assert month_year_display("12", "") == "Dec"
    assert month_year_display(" ", "") == ""
