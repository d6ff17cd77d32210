"""Centralized logging configuration for the Mailgun client.

Provides a logger factory with file rotation, multiple handlers,
and consistent formatting across all client components.

Features:
    - Dual output: Console (stdout) + File handlers
    - Automatic log file rotation (size and backup count configurable)
    - Configurable log levels per module
    - Structured context strings for request logging

The library never configures logging on import; applications call
``setup_logging()`` once at startup.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mailgun_client.config.settings import MailgunConfig

# Global configuration
_ROOT_LOGGER: logging.Logger | None = None
_LOG_DIR = Path.cwd() / "logs"
_LOG_FORMAT_DETAILED = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)
_LOG_FORMAT_SIMPLE = "%(asctime)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level logger configuration
_MODULE_LEVELS = {
    "mailgun_client.clients": logging.DEBUG,
    "mailgun_client.models": logging.INFO,
    "mailgun_client.config": logging.INFO,
}


def setup_logging(
    log_dir: Path | None = None,
    log_level: str = "INFO",
    file_level: str = "DEBUG",
    console_level: str = "INFO",
    enable_file: bool = True,
    settings: Optional["MailgunConfig"] = None,
) -> None:
    """Configure root logger with file and console handlers.

    Should be called once at application startup. When ``settings`` is
    given, its LOG_* values override the keyword defaults.

    Args:
        log_dir: Directory for log files. Defaults to ./logs.
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file_level: File handler level (usually DEBUG for comprehensive logging).
        console_level: Console handler level (usually INFO to reduce noise).
        enable_file: Whether to write logs to files.
        settings: Optional MailgunConfig supplying the logging settings.

    Example:
        setup_logging(
            log_level="INFO",
            console_level="WARNING",  # Only show warnings and errors on console
        )
    """
    global _ROOT_LOGGER, _LOG_DIR

    max_bytes = 10 * 1024 * 1024
    backup_count = 5

    if settings:
        log_dir = Path(settings.LOG_DIR)
        log_level = settings.LOG_LEVEL
        console_level = settings.LOG_LEVEL
        enable_file = settings.LOG_TO_FILE
        max_bytes = settings.LOG_MAX_SIZE_MB * 1024 * 1024
        backup_count = settings.LOG_BACKUP_COUNT

    _LOG_DIR = Path(log_dir) if log_dir else Path.cwd() / "logs"

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    console_handler.setFormatter(
        logging.Formatter(_LOG_FORMAT_SIMPLE, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    if enable_file:
        _LOG_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            _LOG_DIR / "mailgun_client.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, file_level.upper(), logging.DEBUG))
        file_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

        # Errors are duplicated into their own file
        error_handler = logging.handlers.RotatingFileHandler(
            _LOG_DIR / "mailgun_client.error.log",
            maxBytes=max_bytes // 2,
            backupCount=3,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(error_handler)

    for module_name, level in _MODULE_LEVELS.items():
        logging.getLogger(module_name).setLevel(level)

    _ROOT_LOGGER = root_logger


def get_logger(name: str, log_level: str | None = None) -> logging.Logger:
    """Get a configured logger instance for a module.

    Args:
        name: Logger name (typically __name__ of calling module).
        log_level: Optional override for logger level (DEBUG, INFO, WARNING, ERROR).

    Returns:
        Logger instance ready for use.

    Example:
        from mailgun_client.core.logger import get_logger

        logger = get_logger(__name__)
        logger.info("Sending message to 3 recipients")
    """
    logger = logging.getLogger(name)

    if log_level:
        logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    return logger


def get_logs_directory() -> Path:
    """Get the logs directory path.

    Returns:
        Path object pointing to the configured logs directory.
    """
    return _LOG_DIR


def log_context(
    operation: str,
    domain: str | None = None,
    target: str | None = None,
    **kwargs,
) -> str:
    """Format a log context string with request metadata.

    Args:
        operation: Operation name (e.g., "send_message", "add_bounce").
        domain: Mailgun sending domain if applicable.
        target: Address, list or resource the request acts on.
        **kwargs: Additional context key-value pairs.

    Returns:
        Formatted context string for logging.

    Example:
        msg = log_context("add_bounce", domain="mg.example.com", target="bob@example.com")
        logger.info(f"Request: {msg}")
        # Output: Request: [mg.example.com] add_bounce | →bob@example.com
    """
    context_parts = [operation]

    if target:
        context_parts.append(f"→{target}")

    context = " | ".join(context_parts)

    if domain:
        context = f"[{domain}] {context}"

    if kwargs:
        extra = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        context = f"{context} ({extra})"

    return context
