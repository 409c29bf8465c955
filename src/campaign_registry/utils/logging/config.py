# ABOUTME: Logging configuration using loguru
# ABOUTME: Dual-mode operation: interactive file logging vs production JSON logging

import logging
import os
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from campaign_registry.config import get_config

QUIET_LOGGERS = ["sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncio"]


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("CAMPAIGN_REGISTRY_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Keep database driver chatter out of the application logs."""
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def configure_logging(mode: str | None = None, log_level: str | None = None, log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Omitted arguments fall back to the application config.

    Args:
        mode: Logging mode (interactive/production), configured or auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR), configured level if None
        log_file: Custom log file path, configured path or default if None
    """
    config = get_config()
    mode = mode or config.log_mode or detect_logging_mode()
    log_level = log_level or config.log_level
    if log_file is None and config.log_file is not None:
        log_file = str(config.log_file)

    setup_third_party_logging()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    # Remove default loguru handler
    logger.remove()

    if mode == LoggingMode.INTERACTIVE:
        log_dir = Path("logs")
        try:
            log_dir.mkdir(exist_ok=True)
        except OSError:
            # Read-only working directory: fall back to stdout
            mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        logger.add(sys.stdout, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)
        return

    log_file_path = log_file or str(log_dir / "campaign-registry.log")

    # Human-readable logs
    logger.add(
        log_file_path,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="7 days",
    )

    # Errors only
    logger.add(
        log_dir / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = detect_logging_mode()
    log_dir = Path("logs")
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(log_dir.absolute()) if log_dir.exists() else None,
        "log_files": {
            "main": str(log_dir / "campaign-registry.log") if interactive else None,
            "errors": str(log_dir / "errors.log") if interactive else None,
        },
        "third_party_suppressed": QUIET_LOGGERS + ["py.warnings"],
    }
