"""Core module for the Mailgun client.

Provides foundational utilities: exceptions, logging configuration,
primitive wire encoders and the injectable time source.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from mailgun_client.core.clock import Clock, FixedClock, SystemClock
from mailgun_client.core.encoders import is_blank, to_yes_no
from mailgun_client.core.exceptions import (
    InvalidOperationError,
    MailgunClientError,
    MailgunConfigError,
    MailgunError,
    MailgunValidationError,
    MalformedInputError,
    MissingRequiredFieldError,
    OutOfRangeError,
)
from mailgun_client.core.logger import (
    get_logger,
    get_logs_directory,
    log_context,
    setup_logging,
)

__all__ = [
    # Exceptions
    "MailgunError",
    "MailgunValidationError",
    "MissingRequiredFieldError",
    "OutOfRangeError",
    "MalformedInputError",
    "InvalidOperationError",
    "MailgunConfigError",
    "MailgunClientError",
    # Logging
    "get_logger",
    "setup_logging",
    "get_logs_directory",
    "log_context",
    # Encoders
    "is_blank",
    "to_yes_no",
    # Time
    "Clock",
    "SystemClock",
    "FixedClock",
]
