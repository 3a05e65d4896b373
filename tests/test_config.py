"""Tests for datepick.config file handling."""

import stat
import tomllib
from pathlib import Path

import pytest

from datepick.config import (
    DEFAULT_CONFIG,
    Preferences,
    create_default_config,
    get_config_path,
    load_config,
    load_preferences,
    save_config,
    update_config,
)


class TestGetConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "datepick" / "config.toml"

    def test_falls_back_to_dot_config(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Should use ~/.config when XDG_CONFIG_HOME is unset."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_config_path() == tmp_path / ".config" / "datepick" / "config.toml"


class TestConfigFile:
    """Tests for create_default_config, load_config and save_config."""

    def test_create_default_config(self, tmp_path: Path) -> None:
        """Should write the defaults with owner-only permissions."""
        config_path = tmp_path / "nested" / "config.toml"
        create_default_config(config_path)

        assert load_config(config_path) == DEFAULT_CONFIG
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Should persist changed values."""
        config_path = tmp_path / "config.toml"
        save_config({"locale": "en", "date_format": "yyyy-mm-dd", "start_week_on_monday": False}, config_path)

        assert load_config(config_path)["locale"] == "en"
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError for a missing config."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestUpdateConfig:
    """Tests for update_config."""

    def test_merges_into_existing(self, tmp_path: Path) -> None:
        """Should keep keys that are not changed."""
        config_path = tmp_path / "config.toml"
        config_path.write_text('locale = "kk"\ndate_format = "yyyy-mm-dd"\n')

        update_config({"start_week_on_monday": False}, config_path)

        assert load_config(config_path) == {
            "locale": "kk",
            "date_format": "yyyy-mm-dd",
            "start_week_on_monday": False,
        }

    def test_missing_file_starts_from_defaults(self, tmp_path: Path) -> None:
        """Should create the file from the defaults plus the changes."""
        config_path = tmp_path / "new" / "config.toml"

        saved = update_config({"locale": "en"}, config_path)

        assert saved == {**DEFAULT_CONFIG, "locale": "en"}
        assert load_preferences(config_path) == Preferences(locale="en")
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600


class TestLoadPreferences:
    """Tests for load_preferences."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults when there is no config."""
        assert load_preferences(tmp_path / "missing.toml") == Preferences()

    def test_reads_values(self, tmp_path: Path) -> None:
        """Should read every preference from the file."""
        config_path = tmp_path / "config.toml"
        config_path.write_text('locale = "kk"\ndate_format = "yyyy-mm-dd"\nstart_week_on_monday = false\n')

        assert load_preferences(config_path) == Preferences(
            locale="kk",
            date_format="yyyy-mm-dd",
            start_week_on_monday=False,
        )

    def test_missing_keys_use_defaults(self, tmp_path: Path) -> None:
        """Should fill in keys absent from the file."""
        config_path = tmp_path / "config.toml"
        config_path.write_text('locale = "en"\n')

        assert load_preferences(config_path) == Preferences(locale="en")

    def test_unknown_values_fall_back(self, tmp_path: Path) -> None:
        """Should replace unknown locale, format and week start values."""
        config_path = tmp_path / "config.toml"
        config_path.write_text('locale = "xx"\ndate_format = "mm/dd/yyyy"\nstart_week_on_monday = "yes"\n')

        assert load_preferences(config_path) == Preferences()

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should surface TOML syntax errors."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("locale = \n")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_preferences(config_path)
