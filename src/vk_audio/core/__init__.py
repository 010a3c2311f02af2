"""Core infrastructure layer - no domain dependencies.

This module provides foundation-level services:
- Configuration management (TOML + .env)
- Logging setup (Loguru)
"""

from .config import (
    ApiConfig,
    Config,
    LoggingConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
    write_default_config,
)
from .output import setup_logging

__all__ = [
    "ApiConfig",
    "Config",
    "LoggingConfig",
    "create_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    "write_default_config",
    "setup_logging",
]
