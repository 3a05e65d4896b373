"""Date utilities for datepick.

Pure functions for date validation, comparison, formatting, parsing and
input masking. Comparisons work at day granularity: a datetime is reduced to
its calendar day before it is compared.

Months are 1-based throughout (1 = January).
"""

import calendar
import logging
import re
from datetime import date, datetime

from datepick.domain.models import DateFormat

logger = logging.getLogger(__name__)

MIN_YEAR = 1900
MAX_YEAR = 2100
MASK_DIGITS = 8

_NON_DIGITS = re.compile(r"[^0-9]")
_DIGITS = re.compile(r"[0-9]+")


def is_valid_date(value: object) -> bool:
    """Check if a value is a usable date.

    Args:
        value: Anything.

    Returns:
        True for date and datetime instances, False otherwise (including None).
    """
    return isinstance(value, date)


def to_day(value: date) -> date:
    """Drop any time-of-day component from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_same_day(first: date, second: date) -> bool:
    """Check if two values fall on the same calendar day."""
    return to_day(first) == to_day(second)


def is_today(value: date, today: date | None = None) -> bool:
    """Check if a value falls on the current day.

    Args:
        value: Date or datetime to check.
        today: Current day. Defaults to date.today().

    Returns:
        True if value is on the same calendar day as today.
    """
    if today is None:
        today = date.today()
    return is_same_day(value, today)


def is_date_before(value: date, compare_to: date) -> bool:
    """Check if value is on an earlier calendar day than compare_to."""
    return to_day(value) < to_day(compare_to)


def is_date_after(value: date, compare_to: date) -> bool:
    """Check if value is on a later calendar day than compare_to."""
    return to_day(value) > to_day(compare_to)


def roll_month(year: int, month: int) -> tuple[int, int]:
    """Bring an out-of-range month back into 1-12, carrying into the year.

    Month 13 becomes January of the next year, month 0 December of the
    previous one.
    """
    carry, index = divmod(month - 1, 12)
    return year + carry, index + 1


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    return roll_month(year, month - 1)


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    return roll_month(year, month + 1)


def get_days_in_month(year: int, month: int) -> int:
    """Get the number of days in a month.

    This is the day before the first of the following month ("day 0 of next
    month"), taken from calendar.monthrange so that December 9999 works too.

    Args:
        year: Year.
        month: Month number; out-of-range values roll over.

    Returns:
        Day count between 28 and 31.
    """
    return calendar.monthrange(*roll_month(year, month))[1]


def get_first_day_of_month(year: int, month: int) -> int:
    """Get the weekday of the first day of a month.

    Returns:
        0 for Sunday through 6 for Saturday.
    """
    first = date(*roll_month(year, month), 1)
    return (first.weekday() + 1) % 7


def format_date(value: date | None, date_format: DateFormat) -> str:
    """Format a date in one of the two supported layouts.

    Args:
        value: Date to format. None or a non-date yields an empty string.
        date_format: "dd.mm.yyyy" or "yyyy-mm-dd".

    Returns:
        Formatted date, e.g. "05.03.2024" or "2024-03-05".
    """
    if not is_valid_date(value):
        return ""

    day = f"{value.day:02d}"
    month = f"{value.month:02d}"
    year = f"{value.year:04d}"

    if date_format == "dd.mm.yyyy":
        return f"{day}.{month}.{year}"
    return f"{year}-{month}-{day}"


def parse_date(text: str | None, date_format: DateFormat) -> date | None:
    """Parse text written in one of the two supported layouts.

    Parsing is strict: the text must have exactly three numeric parts split
    by the format's separator, each within range, and together naming a day
    that exists (31.02.2024 is rejected rather than rolled into March).

    Args:
        text: Text to parse.
        date_format: "dd.mm.yyyy" or "yyyy-mm-dd".

    Returns:
        Parsed date, or None if the text is not a valid date.
    """
    if not text:
        return None

    if date_format == "dd.mm.yyyy":
        parts = text.split(".")
    else:
        parts = text.split("-")

    if len(parts) != 3 or not all(_DIGITS.fullmatch(part) for part in parts):
        logger.debug(f"Rejected '{text}': expected three numeric parts for {date_format}")
        return None

    if date_format == "dd.mm.yyyy":
        day, month, year = (int(part) for part in parts)
    else:
        year, month, day = (int(part) for part in parts)

    if not (1 <= day <= 31 and 1 <= month <= 12 and MIN_YEAR <= year <= MAX_YEAR):
        logger.debug(f"Rejected '{text}': day, month or year out of range")
        return None

    try:
        return date(year, month, day)
    except ValueError:
        logger.debug(f"Rejected '{text}': no such day in {year}-{month:02d}")
        return None


def apply_date_mask(text: str, date_format: DateFormat) -> str:
    """Mask raw typed input into the shape of a date format.

    Non-digits are dropped, at most eight digits are kept, and separators
    are inserted at the positions the format expects. Values are not
    range-checked.

    Args:
        text: Raw input, possibly partial.
        date_format: "dd.mm.yyyy" or "yyyy-mm-dd".

    Returns:
        Masked text, e.g. "0102202" -> "01.02.202".
    """
    digits = _NON_DIGITS.sub("", text)[:MASK_DIGITS]

    if date_format == "dd.mm.yyyy":
        separator, breaks = ".", (2, 4)
    else:
        separator, breaks = "-", (4, 6)

    result = ""
    for i, digit in enumerate(digits):
        if i in breaks:
            result += separator
        result += digit
    return result


def _clamp_part(part: str, upper: int) -> str:
    value = min(max(int(part), 1), upper)
    return f"{value:02d}"


def normalize_date_string(text: str) -> str:
    """Clamp a typed dd.mm.yyyy value into a real date.

    A complete two-digit day is clamped to 1-31 and a complete two-digit
    month to 1-12. Once the year has all four digits the day is clamped again
    to the length of that month, so "31.02.2024" becomes "29.02.2024".
    Partially typed values pass through with only the complete parts fixed.

    Only the dotted layout is handled.

    Args:
        text: Possibly partial dotted date.

    Returns:
        Normalized dotted date.
    """
    parts = text.split(".")

    if len(parts[0]) == 2 and _DIGITS.fullmatch(parts[0]):
        parts[0] = _clamp_part(parts[0], 31)

    if len(parts) > 1 and len(parts[1]) == 2 and _DIGITS.fullmatch(parts[1]):
        parts[1] = _clamp_part(parts[1], 12)

    if len(parts) == 3 and len(parts[2]) == 4 and all(_DIGITS.fullmatch(part) for part in parts):
        day, month, year = (int(part) for part in parts)
        if 1 <= month <= 12:
            last_day = get_days_in_month(year, month)
            if day > last_day:
                parts[0] = f"{last_day:02d}"

    return ".".join(parts)
