"""Enumerated API values and their wire strings.

Every enum carries its wire string as its value, so each member maps to
exactly one token. The ``get_*_name`` lookups also accept raw values and
return an empty string for anything that is not a member.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

from mailgun_client.core.logger import get_logger

logger = get_logger(__name__)


class AccessLevel(str, Enum):
    """Mailing list access levels.

    Attributes:
        READ_ONLY: Only authenticated users can post (default).
        MEMBERS: Subscribed members can communicate with each other.
        EVERYONE: Anyone can post to the list.
    """

    READ_ONLY = "readonly"
    MEMBERS = "members"
    EVERYONE = "everyone"


class SpamAction(str, Enum):
    """Spam filter behaviour of a domain.

    Attributes:
        DISABLED: No spam filtering for inbound messages (default).
        BLOCKED: Inbound spam is not delivered.
        TAG: Inbound spam is tagged with a spam header.
    """

    DISABLED = "disabled"
    BLOCKED = "blocked"
    TAG = "tag"


class EventType(str, Enum):
    """Mailgun event types.

    Attributes:
        ACCEPTED: Request accepted and message queued.
        DELIVERED: Message delivered to the recipient server.
        FAILED: Recipient server could not take the message.
        OPENED: Recipient opened the message.
        CLICKED: Recipient clicked a link.
        UNSUBSCRIBED: Recipient clicked the unsubscribe link.
        COMPLAINED: Recipient marked the message as spam.
        STORED: An incoming message was stored.
    """

    ACCEPTED = "accepted"
    DELIVERED = "delivered"
    FAILED = "failed"
    OPENED = "opened"
    CLICKED = "clicked"
    UNSUBSCRIBED = "unsubscribed"
    COMPLAINED = "complained"
    STORED = "stored"


class Severity(str, Enum):
    """Severity of a ``failed`` event."""

    TEMPORARY = "temporary"
    PERMANENT = "permanent"


class ClickTrackingMode(str, Enum):
    """Click tracking settings for a domain.

    Attributes:
        YES: Rewrite every link for tracking.
        NO: Never rewrite links.
        HTML_ONLY: Rewrite links in the HTML part only.
    """

    YES = "yes"
    NO = "no"
    HTML_ONLY = "htmlonly"


class TimeResolution(str, Enum):
    """Stats bucket size, rendered as the duration suffix."""

    HOUR = "h"
    DAY = "d"
    MONTH = "m"


class WebhookType(str, Enum):
    """Webhook identifiers."""

    CLICKED = "clicked"
    COMPLAINED = "complained"
    DELIVERED = "delivered"
    OPENED = "opened"
    PERMANENT_FAIL = "permanent_fail"
    TEMPORARY_FAIL = "temporary_fail"
    UNSUBSCRIBED = "unsubscribed"


class SmtpErrorCode(IntEnum):
    """SMTP reply codes accepted when recording bounces."""

    SERVICE_IS_NOT_AVAILABLE = 421
    MAILBOX_UNAVAILABLE = 450
    INTERNAL_SERVER_ERROR = 451
    SERVER_INSUFFICIENT_STORAGE = 452
    CLIENT_NOT_PERMITTED = 454
    SERVER_UNABLE_TO_EXECUTE_COMMAND = 455
    COMMAND_NOT_RECOGNIZED = 500
    SYNTAX_ERROR_COMMAND_ARGUMENTS = 501
    COMMAND_NOT_IMPLEMENTED = 502
    BAD_SEQUENCE_OF_COMMANDS = 503
    COMMAND_PARAMETERS_NOT_IMPLEMENTED = 504
    DUMMY_SERVER_HOST_WONT_ACCEPT = 521
    MUST_ISSUE_STARTTLS_FIRST = 530
    MESSAGE_UNDELIVERABLE_POLICY = 541
    USER_MAILBOX_UNAVAILABLE = 550
    USER_NOT_ON_SERVER = 551
    EXCEEDS_STORAGE_ALLOCATION = 552
    MAILBOX_NAME_INVALID = 553
    TRANSACTION_FAILED = 554
    ADDRESS_FORMAT_NOT_RECOGNIZED = 555
    RECEIVING_SERVER_REJECTION_MESSAGE = 556


def _wire_name(enum_cls: type[Enum], value: Any) -> str:
    try:
        return str(enum_cls(value).value)
    except ValueError:
        logger.warning(f"No {enum_cls.__name__} wire string for {value!r}")
        return ""


def get_access_level_name(access_level: AccessLevel | str) -> str:
    return _wire_name(AccessLevel, access_level)


def get_spam_action_name(spam_action: SpamAction | str) -> str:
    return _wire_name(SpamAction, spam_action)


def get_event_type_name(event_type: EventType | str) -> str:
    return _wire_name(EventType, event_type)


def get_severity_name(severity: Severity | str) -> str:
    return _wire_name(Severity, severity)


def get_click_tracking_name(mode: ClickTrackingMode | str) -> str:
    return _wire_name(ClickTrackingMode, mode)


def get_time_resolution_name(resolution: TimeResolution | str) -> str:
    return _wire_name(TimeResolution, resolution)


def get_webhook_type_name(webhook_type: WebhookType | str) -> str:
    return _wire_name(WebhookType, webhook_type)


def get_smtp_error_code(code: SmtpErrorCode | int) -> str:
    """Return the numeric code as a string, or "" for unknown codes."""
    return _wire_name(SmtpErrorCode, code)
