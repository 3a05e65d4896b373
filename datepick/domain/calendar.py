"""Pure functions for building month views.

This module contains the functional core for the calendar grid:
- No I/O operations (no console, no files)
- No side effects
- Pure data transformations
- Easy to test

A month view is always 6 weeks of 7 days. Cells before and after the
displayed month are filled from the neighbouring months.
"""

from dataclasses import dataclass
from datetime import date

from datepick.dates import (
    get_days_in_month,
    get_first_day_of_month,
    is_date_after,
    is_date_before,
    is_same_day,
    is_today,
    next_month,
    prev_month,
    roll_month,
)

DAYS_PER_WEEK = 7
GRID_WEEKS = 6
GRID_SIZE = DAYS_PER_WEEK * GRID_WEEKS


@dataclass(frozen=True)
class CalendarDay:
    """Immutable calendar cell."""

    date: date
    day: int
    is_current_month: bool
    is_today: bool
    is_selected: bool
    is_disabled: bool


def create_calendar_day(
    cell_date: date,
    is_current_month: bool,
    selected_date: date | None = None,
    min_date: date | None = None,
    max_date: date | None = None,
    today: date | None = None,
) -> CalendarDay:
    """Create one calendar cell with its display flags.

    Args:
        cell_date: Day the cell shows.
        is_current_month: Whether the day belongs to the displayed month.
        selected_date: Currently selected day, if any.
        min_date: Earliest selectable day, if any.
        max_date: Latest selectable day, if any.
        today: Current day. Defaults to date.today().

    Returns:
        CalendarDay. Bounds are inclusive: a day equal to min_date or
        max_date stays enabled.
    """
    too_early = min_date is not None and is_date_before(cell_date, min_date)
    too_late = max_date is not None and is_date_after(cell_date, max_date)

    return CalendarDay(
        date=cell_date,
        day=cell_date.day,
        is_current_month=is_current_month,
        is_today=is_today(cell_date, today),
        is_selected=selected_date is not None and is_same_day(cell_date, selected_date),
        is_disabled=too_early or too_late,
    )


def week_offset(first_weekday: int, start_week_on_monday: bool = True) -> int:
    """Convert a Sunday-first weekday index into a grid column.

    Args:
        first_weekday: 0 for Sunday through 6 for Saturday.
        start_week_on_monday: Whether column 0 is Monday.

    Returns:
        Column index 0-6.
    """
    if start_week_on_monday:
        return (first_weekday + 6) % 7
    return first_weekday


def get_calendar_days(
    year: int,
    month: int,
    selected_date: date | None = None,
    min_date: date | None = None,
    max_date: date | None = None,
    start_week_on_monday: bool = True,
    today: date | None = None,
) -> list[CalendarDay]:
    """Build the 42 cells of a month view.

    Args:
        year: Year to display.
        month: Month to display (1-12); out-of-range values roll over.
        selected_date: Currently selected day, if any.
        min_date: Earliest selectable day, if any.
        max_date: Latest selectable day, if any.
        start_week_on_monday: Whether weeks start on Monday rather than Sunday.
        today: Current day. Defaults to date.today().

    Returns:
        Exactly GRID_SIZE days: the tail of the previous month, every day of
        this month, then the head of the next month.
    """
    year, month = roll_month(year, month)
    if today is None:
        today = date.today()

    def cell(cell_date: date, is_current_month: bool) -> CalendarDay:
        return create_calendar_day(cell_date, is_current_month, selected_date, min_date, max_date, today)

    days: list[CalendarDay] = []
    offset = week_offset(get_first_day_of_month(year, month), start_week_on_monday)

    prev_year, prev_month_num = prev_month(year, month)
    days_in_prev = get_days_in_month(prev_year, prev_month_num)
    for day in range(days_in_prev - offset + 1, days_in_prev + 1):
        days.append(cell(date(prev_year, prev_month_num, day), False))

    for day in range(1, get_days_in_month(year, month) + 1):
        days.append(cell(date(year, month, day), True))

    next_year, next_month_num = next_month(year, month)
    for day in range(1, GRID_SIZE - len(days) + 1):
        days.append(cell(date(next_year, next_month_num, day), False))

    return days


def split_weeks(days: list[CalendarDay]) -> list[list[CalendarDay]]:
    """Split a month view into rows of seven days."""
    return [days[i : i + DAYS_PER_WEEK] for i in range(0, len(days), DAYS_PER_WEEK)]
