"""Date text commands: format, parse, mask and normalize."""

import sys
from datetime import date

from rich.console import Console
from rich.markup import escape

from datepick.commands.admin import load_preferences_or_exit
from datepick.dates import apply_date_mask, format_date, normalize_date_string, parse_date
from datepick.domain.models import DATE_FORMATS, DateFormat

console = Console()


def resolve_format(date_format: str | None) -> DateFormat:
    """Pick the requested date format, or the configured one."""
    if date_format is None:
        return load_preferences_or_exit().date_format
    if date_format not in DATE_FORMATS:
        choices = ", ".join(DATE_FORMATS)
        console.print(f"[red]Unknown date format '{escape(date_format)}' (choose from {choices})[/red]", style="bold")
        sys.exit(1)
    return date_format


def format_command(value: str, date_format: str | None = None) -> None:
    """Print an ISO date in the chosen layout."""
    target = resolve_format(date_format)
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        console.print(f"[red]Invalid ISO date '{escape(value)}'[/red]", style="bold")
        sys.exit(1)
    console.print(format_date(parsed, target), highlight=False, markup=False)


def parse_command(value: str, date_format: str | None = None) -> None:
    """Validate text as a date and print it in ISO form."""
    source = resolve_format(date_format)
    parsed = parse_date(value, source)
    if parsed is None:
        console.print(f"[red]Not a valid {source} date: '{escape(value)}'[/red]", style="bold")
        sys.exit(1)
    console.print(parsed.isoformat(), highlight=False, markup=False)


def mask_command(value: str, date_format: str | None = None) -> None:
    """Print typed input with the date mask applied."""
    console.print(apply_date_mask(value, resolve_format(date_format)), highlight=False, markup=False)


def normalize_command(value: str) -> None:
    """Print a dotted date with out-of-range parts clamped."""
    console.print(normalize_date_string(value), highlight=False, markup=False)
