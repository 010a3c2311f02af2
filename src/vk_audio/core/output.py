"""
Logging setup using Loguru.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LoggingConfig, get_log_file_path


def setup_logging(
    logging_config: LoggingConfig, log_file: Optional[Path] = None
) -> Path:
    """
    Configure loguru sinks from a LoggingConfig.

    Args:
        logging_config: [logging] section of the loaded config
        log_file: Log file path (default: derived from logging_config)

    Returns:
        Path of the log file in use
    """
    log_file = log_file or get_log_file_path(logging_config)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    logger.add(
        log_file,
        rotation=f"{logging_config.max_file_size_mb} MB",
        retention=logging_config.backup_count,
        level=logging_config.level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        encoding="utf-8",
        enqueue=False,  # Synchronous writes
    )

    # Optional console handler (for development/debugging)
    if logging_config.console_output:
        logger.add(sys.stderr, level=logging_config.level, format="{level}: {message}")

    logger.info(
        f"Logging initialized: {log_file} (level={logging_config.level}, "
        f"max_size={logging_config.max_file_size_mb}MB, backups={logging_config.backup_count})"
    )
    return log_file
