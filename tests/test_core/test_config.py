"""
Tests for reader configuration.
"""

from pathlib import Path

import pytest

from my_text_reader.config import ReaderConfig
from my_text_reader.core.exceptions import ConfigurationError


def test_defaults():
    """Test default configuration values."""
    config = ReaderConfig()
    assert config.say_command == "say"
    assert config.engine_driver is None
    assert config.log_level == "INFO"
    assert config.preferences_path.name == "preferences.json"


def test_invalid_log_level_falls_back():
    """Test an unknown log level is replaced by INFO."""
    assert ReaderConfig(log_level="chatty").log_level == "INFO"
    assert ReaderConfig(log_level="debug").log_level == "DEBUG"


def test_from_env(monkeypatch, tmp_path):
    """Test configuration is read from environment variables."""
    monkeypatch.setenv("MY_TEXT_READER_PREFS", str(tmp_path / "p.json"))
    monkeypatch.setenv("MY_TEXT_READER_SAY_COMMAND", "espeak")
    monkeypatch.setenv("MY_TEXT_READER_ENGINE_DRIVER", "dummy")
    monkeypatch.setenv("MY_TEXT_READER_LOG_LEVEL", "warning")

    config = ReaderConfig.from_env()
    assert config.preferences_path == tmp_path / "p.json"
    assert config.say_command == "espeak"
    assert config.engine_driver == "dummy"
    assert config.log_level == "WARNING"


def test_from_dict_ignores_unknown_keys(tmp_path):
    """Test unknown keys are filtered out."""
    config = ReaderConfig.from_dict(
        {"say_command": "espeak", "preferences_path": str(tmp_path), "bogus": 1}
    )
    assert config.say_command == "espeak"
    assert isinstance(config.preferences_path, Path)


def test_to_dict_is_json_friendly(reader_config):
    """Test paths are rendered as strings."""
    data = reader_config.to_dict()
    assert isinstance(data["preferences_path"], str)
    assert data["share_url"].startswith("https://")


def test_from_file_missing_uses_defaults(tmp_path):
    """Test a missing config file gives the defaults."""
    assert ReaderConfig.from_file(tmp_path / "missing.json").say_command == "say"


def test_validate_rejects_directory_path(tmp_path):
    """Test a directory cannot be used as the preference file."""
    config = ReaderConfig(preferences_path=tmp_path)
    with pytest.raises(ConfigurationError):
        config.validate()
