"""Configuration file management for datepick."""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from datepick.domain.locales import get_locale
from datepick.domain.models import DATE_FORMATS, DEFAULT_DATE_FORMAT, DEFAULT_LOCALE, DateFormat

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "locale": DEFAULT_LOCALE,
    "date_format": DEFAULT_DATE_FORMAT,
    "start_week_on_monday": True,
}


@dataclass(frozen=True)
class Preferences:
    """Immutable display preferences."""

    locale: str = DEFAULT_LOCALE
    date_format: DateFormat = DEFAULT_DATE_FORMAT
    start_week_on_monday: bool = True


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "datepick" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with owner-only permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(DEFAULT_CONFIG, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file, keeping it owner-only.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def update_config(changes: dict[str, Any], config_path: Path | None = None) -> dict[str, Any]:
    """Merge changes into the stored configuration and save it.

    A missing config file is treated as the defaults.

    Args:
        changes: Keys to set.
        config_path: Path to config file. If None, uses default location.

    Returns:
        The configuration as saved.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = dict(DEFAULT_CONFIG)

    config.update(changes)
    save_config(config, config_path)
    return config


def load_preferences(config_path: Path | None = None) -> Preferences:
    """Load display preferences, falling back to defaults.

    A missing file yields the defaults. Unknown locales resolve to the
    default locale, and an unknown date format to the default format.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Preferences.

    Raises:
        tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        logger.debug("No config file found, using defaults")
        return Preferences()

    locale = get_locale(config.get("locale")).code

    date_format = config.get("date_format", DEFAULT_DATE_FORMAT)
    if date_format not in DATE_FORMATS:
        logger.warning(f"Unknown date_format '{date_format}' in config, using {DEFAULT_DATE_FORMAT}")
        date_format = DEFAULT_DATE_FORMAT

    start_week_on_monday = config.get("start_week_on_monday", True)
    if not isinstance(start_week_on_monday, bool):
        logger.warning("start_week_on_monday must be true or false, using true")
        start_week_on_monday = True

    return Preferences(
        locale=locale,
        date_format=date_format,
        start_week_on_monday=start_week_on_monday,
    )
