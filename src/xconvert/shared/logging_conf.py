# src/xconvert/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for the application.
It sets up consistent formatting, log levels, and output handlers (stdout
and an optional rotating log file).

Files that USE this module:
- xconvert.app (setup_logging function for logging initialization)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stdout: Optional[bool] = None,
) -> None:
    """
    Configure application-wide logging settings.

    Can output to stdout, file, or both. Supports log rotation for file logging.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files (file is named xconvert.log)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
        log_to_stdout: Force the stdout handler on or off; when None the
            XCONVERT_LOG_STDOUT environment variable decides
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers = []
    log_file_path: Optional[Path] = None

    if log_to_stdout is None:
        log_to_stdout = os.environ.get("XCONVERT_LOG_STDOUT", "true").lower() == "true"

    if log_to_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(stdout_handler)

    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "xconvert.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

    if not handlers:
        handlers = [logging.StreamHandler(sys.stdout)]

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path is not None:
        logger.info("Logging configured: file=%s, level=%s", log_file_path, logging.getLevelName(level))
    else:
        logger.info("Logging configured: stdout, level=%s", logging.getLevelName(level))
