"""Logging configuration for WistiaDL."""

from __future__ import annotations

import logging
import logging.handlers
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("urllib3", "requests", "charset_normalizer")


def _rotating_handler(
    path: Path,
    level: int,
    formatter: logging.Formatter,
    backup_count: int,
) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    logs_dir: Path | None = None,
    log_level: str = "INFO",
    enable_file_logging: bool = True,
    enable_console_logging: bool = True,
    log_format: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration.

    Console output goes to stderr through Rich so it never mixes with
    exported data written to stdout.

    Args:
        logs_dir: Directory for log files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_file_logging: Whether to log to files
        enable_console_logging: Whether to log to console
        log_format: Custom log format string for files

    Returns:
        Configured root logger
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    handlers: list[logging.Handler] = []

    if enable_console_logging:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
        )
        console_handler.setLevel(level)
        handlers.append(console_handler)

    if enable_file_logging and logs_dir:
        logs_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(log_format or DEFAULT_LOG_FORMAT)

        handlers.append(_rotating_handler(logs_dir / "wistiadl.log", level, formatter, 5))
        handlers.append(_rotating_handler(logs_dir / "errors.log", logging.ERROR, formatter, 3))

        # One file per run, always at DEBUG
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        session_handler = logging.FileHandler(
            logs_dir / f"session_{timestamp}.log",
            encoding="utf-8",
        )
        session_handler.setLevel(logging.DEBUG)
        session_handler.setFormatter(formatter)
        handlers.append(session_handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
