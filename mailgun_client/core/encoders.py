"""Primitive encoders shared by every request type.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any

from mailgun_client.core.exceptions import MissingRequiredFieldError


def to_yes_no(flag: bool) -> str:
    """Render a boolean the way the Mailgun API expects ("yes"/"no")."""
    return "yes" if flag else "no"


def to_true_false(flag: bool) -> str:
    """Render a boolean as lowercase "true"/"false"."""
    return "true" if flag else "false"


def is_blank(value: Any) -> bool:
    """Check whether a value is None, empty or whitespace-only.

    Non-string values other than None are never blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_text(value: Any, field: str, label: str | None = None) -> str:
    """Return ``value`` unchanged or raise if it is blank.

    Args:
        value: Candidate string.
        field: Argument name reported on the error.
        label: Human readable name used in the message.

    Raises:
        MissingRequiredFieldError: If value is None, empty or whitespace.
    """
    if is_blank(value):
        raise MissingRequiredFieldError(
            f"{label or field} cannot be null or empty!", field=field
        )
    return value


def as_utc(moment: datetime) -> datetime:
    """Normalize a datetime to UTC, treating naive values as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def to_unix_seconds(moment: datetime) -> int:
    """Convert a datetime to whole Unix seconds."""
    return int(as_utc(moment).timestamp())


def to_rfc2822(moment: datetime) -> str:
    """Format a datetime as an RFC 2822 date in GMT."""
    return format_datetime(as_utc(moment), usegmt=True)
