"""Scrubbing: turn what the user typed into the canonical submitted string."""

from __future__ import annotations

import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from core.models import FieldKind
from core.month_year import apply_month, apply_year

LOGGER = logging.getLogger(__name__)

NUMBER = "number"
MONTH_YEAR_MONTH = "monthyear-month"
MONTH_YEAR_YEAR = "monthyear-year"
IDENTITY = ""

SCRUB_TAGS = (NUMBER, MONTH_YEAR_MONTH, MONTH_YEAR_YEAR, IDENTITY)

_KIND_TAGS = {
    FieldKind.PERCENT: NUMBER,
    FieldKind.MONEY: NUMBER,
    FieldKind.INT: NUMBER,
    FieldKind.DATE: IDENTITY,
    FieldKind.TEXT: IDENTITY,
}

_KIND_VALUES = {kind.value for kind in FieldKind}

_NOT_NUMBER_CHARS = re.compile(r"[^0-9.\-]")


def kind_to_tag(kind: FieldKind) -> str:
    """Return the scrub tag for a single-input kind.

    MonthYear has two inputs with their own tags, so it has no single tag.
    """

    kind = FieldKind(kind)
    if kind is FieldKind.MONTH_YEAR:
        raise ValueError("monthyear fields scrub per control: use monthyear-month or monthyear-year")
    return _KIND_TAGS[kind]


def scrub(
    kind_or_tag: Union[FieldKind, str, None],
    raw_value: str,
    previous_scrubbed: str = "",
    today: Optional[date] = None,
) -> str:
    """Scrub raw_value according to a field kind or a scrub tag.

    previous_scrubbed is only read by the month/year tags, which need it to
    keep the half of the date that is not being edited. Unknown tags leave
    the value as typed.
    """

    tag = _resolve_tag(kind_or_tag)

    if tag == NUMBER:
        return scrub_number(raw_value)
    if tag == MONTH_YEAR_MONTH:
        return apply_month(raw_value, previous_scrubbed, today)
    if tag == MONTH_YEAR_YEAR:
        return apply_year(raw_value, previous_scrubbed, today)
    if tag != IDENTITY:
        LOGGER.debug("Unknown scrub tag %r, value left as typed", tag)
    return raw_value


def scrub_number(value: str) -> str:
    """Keep digits, decimal points and hyphens.

    Accounting style negatives such as "(12.34)" become "-12.34". Repeated
    points or hyphens are left alone, so "1.2.3" stays "1.2.3".
    """

    negative = "(" in value
    digits = _NOT_NUMBER_CHARS.sub("", value)
    if negative and _is_positive(digits):
        return f"-{digits}"
    return digits


def _resolve_tag(kind_or_tag: Union[FieldKind, str, None]) -> str:
    if not kind_or_tag:
        return IDENTITY
    if kind_or_tag in _KIND_VALUES:
        kind = FieldKind(kind_or_tag)
        # A whole month/year value has no single control to scrub it by.
        return IDENTITY if kind is FieldKind.MONTH_YEAR else kind_to_tag(kind)
    return kind_or_tag


def _is_positive(text: str) -> bool:
    try:
        return Decimal(text) > 0
    except InvalidOperation:
        return False
