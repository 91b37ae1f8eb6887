"""Month/year merging for the MonthYear rich field.

The month and the year are edited with separate controls that fire separate
events. Each merge keeps the half it does not own from the previously scrubbed
value, so picking a month never wipes out a year typed earlier (and the other
way around).
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Optional

LOGGER = logging.getLogger(__name__)

MONTH_NAMES = {
    "1": "Jan",
    "2": "Feb",
    "3": "Mar",
    "4": "Apr",
    "5": "May",
    "6": "Jun",
    "7": "Jul",
    "8": "Aug",
    "9": "Sep",
    "10": "Oct",
    "11": "Nov",
    "12": "Dec",
}

# M/d/y with a 1-4 digit year, optionally followed by a time such as "12:00:00 AM".
# Short years show up while a year is still being typed ("6/1/202").
_SLASH_DATE = re.compile(
    r"^\s*(\d{1,2})/(\d{1,2})/(\d{1,4})"
    r"(?:\s+\d{1,2}:\d{2}(?::\d{2})?(?:\s*[AaPp][Mm])?)?\s*$"
)
_ISO_DATE = re.compile(
    r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})"
    r"(?:[T ]\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?)?\s*$"
)


def parse_loose_date(text: str) -> Optional[date]:
    """Parse the date formats a scrubbed date field can hold.

    Two-digit years below 50 are read as 20xx, the rest as 19xx; other
    lengths are taken literally.
    Returns None instead of raising for anything unreadable.
    """

    if not text:
        return None

    match = _SLASH_DATE.match(text)
    if match:
        month, day, year = (int(part) for part in match.groups())
        if len(match.group(3)) == 2:
            year += 2000 if year < 50 else 1900
    else:
        match = _ISO_DATE.match(text)
        if not match:
            return None
        year, month, day = (int(part) for part in match.groups())

    try:
        return date(year, month, day)
    except ValueError:
        return None


def apply_month(new_month: str, previous_scrubbed: str, today: Optional[date] = None) -> str:
    """Merge a newly selected month with the year kept in previous_scrubbed."""

    if _is_blank(new_month):
        return ""
    year = _sibling_date(previous_scrubbed, today).year
    return f"{new_month.strip()}/1/{year}"


def apply_year(new_year: str, previous_scrubbed: str, today: Optional[date] = None) -> str:
    """Merge a newly entered year with the month kept in previous_scrubbed."""

    if _is_blank(new_year):
        return ""
    month = _sibling_date(previous_scrubbed, today).month
    return f"{month}/1/{new_year.strip()}"


def month_year_parts(scrubbed: str) -> tuple[str, str]:
    """Split a scrubbed month/year value into (month, year) control values.

    The month is " " (the blank option) when nothing parses.
    """

    parsed = parse_loose_date(scrubbed)
    if parsed is None:
        return " ", ""
    return str(parsed.month), str(parsed.year)


def _sibling_date(previous_scrubbed: str, today: Optional[date]) -> date:
    parsed = parse_loose_date(previous_scrubbed) if previous_scrubbed else None
    if parsed is not None:
        return parsed
    if previous_scrubbed:
        LOGGER.debug("Unreadable month/year value %r, using today's date", previous_scrubbed)
    return today or date.today()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
