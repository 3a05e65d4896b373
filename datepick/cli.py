"""CLI entry point for datepick."""

import logging

import typer

from datepick.commands.admin import config_command, init_command
from datepick.commands.calendar import calendar_command, locales_command
from datepick.commands.dates import format_command, mask_command, normalize_command, parse_command

app = typer.Typer(
    name="datepick",
    help="datepick - calendar grids and date input handling for date pickers",
    add_completion=False,
)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the CLI process."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """datepick - calendar grids and date input handling for date pickers."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the datepick configuration file."""
    init_command(force)


@app.command(name="config")
def config(
    locale: str = typer.Option(None, "--locale", "-l", help="Default locale (ru, en, kk)"),
    date_format: str = typer.Option(None, "--format", "-f", help="dd.mm.yyyy or yyyy-mm-dd"),
    week_start: str = typer.Option(None, "--week-start", help="monday or sunday"),
) -> None:
    """Change your stored display preferences."""
    config_command(locale, date_format, week_start)


@app.command(name="calendar")
def calendar(
    month: str = typer.Option(None, "--month", "-m", help="Month to show (YYYY-MM, default: current)"),
    locale: str = typer.Option(None, "--locale", "-l", help="Locale code (ru, en, kk)"),
    select: str = typer.Option(None, "--select", help="Selected date, in the configured format"),
    min_date: str = typer.Option(None, "--min", help="Earliest selectable date"),
    max_date: str = typer.Option(None, "--max", help="Latest selectable date"),
    sunday_first: bool = typer.Option(False, "--sunday-first", help="Start weeks on Sunday"),
) -> None:
    """Show a six-week month view."""
    calendar_command(month, locale, select, min_date, max_date, sunday_first)


@app.command(name="locales")
def locales() -> None:
    """List the supported locales."""
    locales_command()


@app.command(name="format")
def format_(
    value: str,
    date_format: str = typer.Option(None, "--format", "-f", help="dd.mm.yyyy or yyyy-mm-dd"),
) -> None:
    """Format an ISO date (YYYY-MM-DD) in a date picker layout."""
    format_command(value, date_format)


@app.command(name="parse")
def parse(
    value: str,
    date_format: str = typer.Option(None, "--format", "-f", help="dd.mm.yyyy or yyyy-mm-dd"),
) -> None:
    """Validate a typed date and print it as YYYY-MM-DD."""
    parse_command(value, date_format)


@app.command(name="mask")
def mask(
    value: str,
    date_format: str = typer.Option(None, "--format", "-f", help="dd.mm.yyyy or yyyy-mm-dd"),
) -> None:
    """Apply the live-typing mask to raw input."""
    mask_command(value, date_format)


@app.command(name="normalize")
def normalize(value: str) -> None:
    """Clamp the day and month of a dd.mm.yyyy value."""
    normalize_command(value)


if __name__ == "__main__":
    app()
