"""
Configuration management for vk-audio
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class ApiConfig:
    """Configuration for remote API calls."""

    # Revision sent with methods that are not pinned to one (None = caller decides)
    default_version: Optional[str] = None


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/vk-audio/vk-audio.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep
    console_output: bool = False  # Also output to console (for debugging)

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level!r}. "
                f"Valid levels are: {sorted(VALID_LOG_LEVELS)}"
            )
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count must not be negative")


@dataclass
class Config:
    """Main configuration object."""

    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "vk-audio"
    return Path.home() / ".config" / "vk-audio"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/vk-audio (or ~/.config/vk-audio)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "vk-audio"
    return Path.home() / ".local" / "share" / "vk-audio"


def get_log_file_path(logging_config: LoggingConfig) -> Path:
    """Get the log file path, honouring a custom [logging] log_file."""
    if logging_config.log_file:
        return Path(logging_config.log_file).expanduser()
    return get_data_dir() / "vk-audio.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# vk-audio Configuration

[api]
# API revision sent with methods that are not pinned to a specific one.
# Leave unset to let the transport decide.
# default_version = "5.40"

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/vk-audio/vk-audio.log)
# log_file = "/path/to/custom/vk-audio.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5

# Also output logs to console (useful for debugging)
console_output = false
""".strip()


def write_default_config(path: Optional[Path] = None) -> Path:
    """Write the default configuration file unless one already exists.

    Returns:
        Path of the configuration file
    """
    config_path = path or get_config_dir() / "config.toml"
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(create_default_config() + "\n", encoding="utf-8")
    return config_path


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - VK_AUDIO_API_VERSION
    - VK_AUDIO_LOG_LEVEL

    Raises:
        ValueError: If the resulting logging configuration is invalid
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = path or get_config_path()
    config = Config()

    if config_path.exists():
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        if "api" in toml_data:
            api_data = toml_data["api"]
            config.api = ApiConfig(
                default_version=str(api_data["default_version"])
                if api_data.get("default_version")
                else None,
            )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            config.logging = LoggingConfig(
                level=logging_data.get("level", config.logging.level).upper(),
                log_file=logging_data.get("log_file"),
                max_file_size_mb=logging_data.get(
                    "max_file_size_mb", config.logging.max_file_size_mb
                ),
                backup_count=logging_data.get(
                    "backup_count", config.logging.backup_count
                ),
                console_output=logging_data.get(
                    "console_output", config.logging.console_output
                ),
            )

    # Environment overrides
    env_version = os.environ.get("VK_AUDIO_API_VERSION")
    if env_version:
        config.api.default_version = env_version

    env_level = os.environ.get("VK_AUDIO_LOG_LEVEL")
    if env_level:
        config.logging.level = env_level.upper()

    config.logging.validate()
    return config
