"""
Configuration management for My Text Reader.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from my_text_reader.core.exceptions import ConfigurationError

VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def get_default_data_dir() -> Path:
    """Get default directory for preferences and logs"""
    home_dir = Path.home()

    # Try to use appropriate directory for the platform
    if os.name == "nt":  # Windows
        app_data = os.environ.get("APPDATA", home_dir)
        return Path(app_data) / "my-text-reader"
    return home_dir / ".my-text-reader"


@dataclass
class ReaderConfig:
    """Configuration for the text reader"""

    # Storage
    preferences_path: Path = field(
        default_factory=lambda: get_default_data_dir() / "preferences.json"
    )

    # Speech back ends
    say_command: str = "say"
    engine_driver: str | None = None  # pyttsx3 driver, None = platform default

    # Logging
    log_level: str = "INFO"
    log_file: Path = field(
        default_factory=lambda: get_default_data_dir() / "my-text-reader.log"
    )

    # Links shown in the footer
    share_url: str = "https://github.com/muratdincmd/my-text-reader"
    author_url: str = "https://divwizard.com/"

    def __post_init__(self):
        """Post-initialization validation"""
        self.preferences_path = Path(self.preferences_path).expanduser()
        self.log_file = Path(self.log_file).expanduser()

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            logger.warning(f"Invalid log level: {self.log_level}, using INFO")
            self.log_level = "INFO"
        self.log_level = self.log_level.upper()

        if not self.say_command.strip():
            logger.warning("Empty say command, using 'say'")
            self.say_command = "say"

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ReaderConfig":
        """Create config from dictionary"""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary"""
        result = {}
        for field_name in self.__dataclass_fields__:
            value = getattr(self, field_name)
            result[field_name] = str(value) if isinstance(value, Path) else value
        return result

    @classmethod
    def from_file(cls, config_path: str | Path) -> "ReaderConfig":
        """Load config from JSON file"""
        try:
            with open(config_path) as f:
                config_dict = json.load(f)
            return cls.from_dict(config_dict)
        except FileNotFoundError:
            logger.warning(f"Config file not found: {config_path}, using defaults")
            return cls()
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in config file: {config_path} - {e}")
            return cls()

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        """Create configuration from environment variables"""
        config = cls()

        if env_value := os.environ.get("MY_TEXT_READER_PREFS"):
            config.preferences_path = Path(env_value).expanduser()
        if env_value := os.environ.get("MY_TEXT_READER_SAY_COMMAND"):
            config.say_command = env_value
        if env_value := os.environ.get("MY_TEXT_READER_ENGINE_DRIVER"):
            config.engine_driver = env_value
        if env_value := os.environ.get("MY_TEXT_READER_LOG_LEVEL"):
            if env_value.upper() in VALID_LOG_LEVELS:
                config.log_level = env_value.upper()
            else:
                logger.warning(f"Invalid MY_TEXT_READER_LOG_LEVEL={env_value}")
        if env_value := os.environ.get("MY_TEXT_READER_LOG_FILE"):
            config.log_file = Path(env_value).expanduser()

        return config

    def validate(self) -> bool:
        """Validate configuration settings"""
        if self.preferences_path.exists() and self.preferences_path.is_dir():
            raise ConfigurationError(
                f"Preferences path is a directory: {self.preferences_path}"
            )
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}")
        return True
