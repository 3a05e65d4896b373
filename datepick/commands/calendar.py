"""Calendar and locale commands for viewing month grids."""

import sys
from datetime import date, datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from datepick.commands.admin import load_preferences_or_exit
from datepick.dates import format_date, parse_date
from datepick.domain.calendar import CalendarDay, get_calendar_days, split_weeks
from datepick.domain.locales import (
    format_month_title,
    get_locale,
    get_placeholder,
    get_weekday_labels,
    is_supported_locale,
)
from datepick.domain.models import DATE_FORMATS, SUPPORTED_LOCALES, DateFormat

console = Console()


def parse_month_option(month: str | None, today: date) -> tuple[int, int]:
    """Parse a --month option (YYYY-MM), defaulting to the current month.

    Raises:
        ValueError: If the month is not in YYYY-MM format.
    """
    if not month:
        return today.year, today.month
    month_dt = datetime.strptime(month, "%Y-%m")
    return month_dt.year, month_dt.month


def parse_date_option(name: str, value: str | None, date_format: DateFormat) -> date | None:
    """Parse an optional date argument, exiting with a message if invalid."""
    if value is None:
        return None
    parsed = parse_date(value, date_format)
    if parsed is None:
        console.print(f"[red]Invalid {name} date '{escape(value)}' (expected {date_format})[/red]", style="bold")
        sys.exit(1)
    return parsed


def format_day_cell(day: CalendarDay) -> str:
    """Format a single grid cell with rich markup.

    Args:
        day: Calendar cell.

    Returns:
        Day number wrapped in markup for its flags.
    """
    text = f"{day.day:>2}"
    if day.is_disabled:
        return f"[dim strike]{text}[/dim strike]"
    if day.is_selected:
        return f"[reverse]{text}[/reverse]"
    if day.is_today:
        return f"[bold cyan underline]{text}[/bold cyan underline]"
    if not day.is_current_month:
        return f"[grey50]{text}[/grey50]"
    return text


def calendar_command(
    month: str | None = None,
    locale: str | None = None,
    select: str | None = None,
    min_date: str | None = None,
    max_date: str | None = None,
    sunday_first: bool = False,
) -> None:
    """Render a month view."""
    preferences = load_preferences_or_exit()
    bundle = get_locale(locale or preferences.locale)
    date_format = preferences.date_format
    start_week_on_monday = preferences.start_week_on_monday and not sunday_first

    if locale and not is_supported_locale(locale):
        console.print(f"[yellow]Unknown locale '{escape(locale)}', using '{bundle.code}'[/yellow]")

    today = date.today()
    try:
        year, month_num = parse_month_option(month, today)
    except ValueError:
        console.print(f"[red]Invalid month '{escape(month)}' (expected YYYY-MM)[/red]", style="bold")
        sys.exit(1)

    selected = parse_date_option("selected", select, date_format)
    lower = parse_date_option("min", min_date, date_format)
    upper = parse_date_option("max", max_date, date_format)

    try:
        days = get_calendar_days(
            year,
            month_num,
            selected_date=selected,
            min_date=lower,
            max_date=upper,
            start_week_on_monday=start_week_on_monday,
            today=today,
        )
    except (ValueError, OverflowError):
        message = f"Cannot show {year:04d}-{month_num:02d}: the grid runs past the supported years"
        console.print(f"[red]{message}[/red]", style="bold")
        sys.exit(1)

    table = Table(title=format_month_title(bundle, year, month_num))
    for label in get_weekday_labels(bundle, start_week_on_monday):
        table.add_column(label, justify="right")

    for week in split_weeks(days):
        table.add_row(*(format_day_cell(day) for day in week))

    console.print(table)
    console.print(f"[dim]{bundle.today}: {format_date(today, date_format)}[/dim]")
    if selected:
        console.print(f"[bold]Selected:[/bold] {format_date(selected, date_format)}")


def locales_command() -> None:
    """List supported locales."""
    table = Table(title="Locales")
    table.add_column("Code", style="cyan")
    table.add_column("January", style="white")
    table.add_column("Today", style="magenta")
    for date_format in DATE_FORMATS:
        table.add_column(date_format, style="dim")

    for code in SUPPORTED_LOCALES:
        bundle = get_locale(code)
        placeholders = [get_placeholder(bundle, date_format) for date_format in DATE_FORMATS]
        table.add_row(code, bundle.months[0], bundle.today, *placeholders)

    console.print(table)
