"""Unit tests for configuration loading and saving.

Tests for AppConfig validation and the TOML round trip through
load_config and save_config.
"""

import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from filemgr.core.config import (
    AppConfig,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_config,
    save_config,
)
from filemgr.core.paths import get_config_path
from filemgr.core.theme import ThemeColors


class TestAppConfig:
    """Tests for the AppConfig model."""

    def test_defaults(self) -> None:
        """AppConfig has conservative defaults."""
        config = AppConfig()
        assert config.recursive is False
        assert config.confirm is True
        assert config.log_level == "WARNING"
        assert config.colors == ThemeColors()

    def test_log_level_normalized(self) -> None:
        """Log level names are trimmed and upper-cased."""
        assert AppConfig(log_level=" debug ").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError, match="log_level must be one of"):
            AppConfig(log_level="chatty")

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValueError):
            AppConfig(unknown=True)  # type: ignore[call-arg]


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_default_file_returns_defaults(self) -> None:
        """No config file at the default location is not an error."""
        assert not get_config_path().exists()

        assert load_config() == AppConfig()

    def test_missing_explicit_file_raises(self, tmp_path: Path) -> None:
        """An explicitly requested file must exist."""
        with pytest.raises(ConfigNotFoundError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values and color overrides are read from TOML."""
        path = tmp_path / "config.toml"
        path.write_text(
            'recursive = true\nconfirm = false\nlog_level = "info"\n'
            '[colors]\ndirectory = "#123456"\n'
        )

        config = load_config(path)

        assert config.recursive is True
        assert config.confirm is False
        assert config.log_level == "INFO"
        assert config.colors.directory == "#123456"
        assert config.colors.text == ThemeColors().text

    def test_loads_default_location(self) -> None:
        """The default path under XDG_CONFIG_HOME is used when none is given."""
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text("recursive = true\n")

        assert load_config().recursive is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("recursive = [ broken")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigValidationError."""
        path = tmp_path / "config.toml"
        path.write_text('[colors]\ntext = "white"\n')

        with pytest.raises(ConfigValidationError, match="Invalid config content"):
            load_config(path)

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Unknown top-level keys are schema violations."""
        path = tmp_path / "config.toml"
        path.write_text("follow_symlinks = true\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_errors_share_base_class(self) -> None:
        """All config errors can be caught as ConfigError."""
        assert issubclass(ConfigNotFoundError, ConfigError)
        assert issubclass(ConfigParseError, ConfigError)
        assert issubclass(ConfigValidationError, ConfigError)


class TestSaveConfig:
    """Tests for save_config function."""

    def test_save_and_reload(self, tmp_path: Path) -> None:
        """A saved config loads back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        config = AppConfig(recursive=True, log_level="ERROR")

        result = save_config(config, path)

        assert result == path
        assert load_config(path) == config

    def test_writes_toml(self, tmp_path: Path) -> None:
        """The file is plain TOML with a colors table."""
        path = tmp_path / "config.toml"

        save_config(AppConfig(), path)

        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["confirm"] is True
        assert data["colors"]["header"] == "#69B9A1"

    def test_defaults_to_config_path(self) -> None:
        """Without a path the default location is used."""
        result = save_config(AppConfig())

        assert result == get_config_path()
        assert result.exists()

    def test_no_temp_file_left_behind(self, tmp_path: Path) -> None:
        """Only the target file remains after a successful write."""
        path = tmp_path / "config.toml"

        save_config(AppConfig(), path)

        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]

    def test_write_failure_cleans_up(self, tmp_path: Path) -> None:
        """A failed replace raises ConfigError and removes the temp file."""
        path = tmp_path / "config.toml"

        with (
            patch("filemgr.core.config.os.replace", side_effect=OSError("disk full")),
            pytest.raises(ConfigError, match="Failed to write config"),
        ):
            save_config(AppConfig(), path)

        assert list(tmp_path.iterdir()) == []
