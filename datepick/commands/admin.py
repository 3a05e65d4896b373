"""Admin commands for creating and changing the configuration."""

import sys
import tomllib
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from datepick.config import Preferences, create_default_config, get_config_path, load_preferences, update_config
from datepick.domain.locales import is_supported_locale
from datepick.domain.models import DATE_FORMATS, SUPPORTED_LOCALES

console = Console()


def init_command(force: bool = False, config_path: Path | None = None) -> None:
    """Create the datepick configuration file."""
    if config_path is None:
        config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'datepick init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def config_command(
    locale: str | None = None,
    date_format: str | None = None,
    week_start: str | None = None,
    config_path: Path | None = None,
) -> None:
    """Change stored display preferences."""
    changes: dict[str, Any] = {}

    if locale is not None:
        if not is_supported_locale(locale):
            choices = ", ".join(SUPPORTED_LOCALES)
            console.print(f"[red]Unknown locale '{escape(locale)}' (choose from {choices})[/red]", style="bold")
            sys.exit(1)
        changes["locale"] = locale

    if date_format is not None:
        if date_format not in DATE_FORMATS:
            choices = ", ".join(DATE_FORMATS)
            console.print(
                f"[red]Unknown date format '{escape(date_format)}' (choose from {choices})[/red]", style="bold"
            )
            sys.exit(1)
        changes["date_format"] = date_format

    if week_start is not None:
        if week_start not in ("monday", "sunday"):
            message = f"Week start must be 'monday' or 'sunday', not '{escape(week_start)}'"
            console.print(f"[red]{message}[/red]", style="bold")
            sys.exit(1)
        changes["start_week_on_monday"] = week_start == "monday"

    if not changes:
        console.print("[yellow]Nothing to change. Use --locale, --format or --week-start[/yellow]")
        return

    try:
        config = update_config(changes, config_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    for key in changes:
        console.print(f"[green]✓[/green] {key} = {config[key]}")


def load_preferences_or_exit(config_path: Path | None = None) -> Preferences:
    """Load preferences, exiting with a message if the config is unreadable."""
    try:
        return load_preferences(config_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Cannot read config file: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
