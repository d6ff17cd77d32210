"""Mailgun Client - Typed request builders for the Mailgun REST API.

Provides validated request construction for Mailgun:
- Messages with recipients, variables, attachments and delivery options
- Event and stats queries
- Domains, credentials, IPs and suppression lists
- Mailing lists, routes and webhooks
- A thin httpx transport returning raw responses

Architecture:
    - Fluent builders validate every mutation immediately
    - Value objects render to form content, JSON or query strings
    - MailgunClient posts the rendered payloads

Modules:
    - core: Exceptions, logger, encoders, clock
    - config: Pydantic v2 settings
    - models: Request value objects and builders
    - clients: HTTP transport (httpx)

Usage:
    from mailgun_client import MailgunClient, MessageBuilder, Recipient

    message = (
        MessageBuilder()
        .set_from("Bookings <bookings@mg.example.com>")
        .add_recipient(Recipient(address="customer@example.com", variables={"id": 123}))
        .set_subject("Booking Confirmed")
        .set_html_body("<h1>Your booking %recipient.id% is confirmed!</h1>")
        .build()
    )

    with MailgunClient() as client:
        response = client.send_message(message)

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

__version__ = "1.0.0"

# Clients
from mailgun_client.clients import MailgunClient

# Configuration
from mailgun_client.config import MailgunConfig

# Core utilities
from mailgun_client.core import (
    Clock,
    FixedClock,
    InvalidOperationError,
    MailgunClientError,
    MailgunConfigError,
    MailgunError,
    MailgunValidationError,
    MalformedInputError,
    MissingRequiredFieldError,
    OutOfRangeError,
    SystemClock,
    get_logger,
    setup_logging,
)

# Models
from mailgun_client.models import (
    AccessLevel,
    BounceRequest,
    ClickTrackingMode,
    ComplaintRequest,
    DomainCredentialRequest,
    DomainRequest,
    EmailAddress,
    EventRequest,
    EventRequestBuilder,
    EventType,
    FileAttachment,
    FileReference,
    MailingList,
    Member,
    Message,
    MessageBuilder,
    QueryStringBuilder,
    Recipient,
    Route,
    Severity,
    SmtpErrorCode,
    SpamAction,
    StatsRequest,
    StatsRequestBuilder,
    TimeResolution,
    UnsubscriberRequest,
    Webhook,
    WebhookType,
)

__all__ = [
    # Version
    "__version__",
    # Core exceptions
    "MailgunError",
    "MailgunValidationError",
    "MissingRequiredFieldError",
    "OutOfRangeError",
    "MalformedInputError",
    "InvalidOperationError",
    "MailgunConfigError",
    "MailgunClientError",
    "get_logger",
    "setup_logging",
    # Time
    "Clock",
    "SystemClock",
    "FixedClock",
    # Configuration
    "MailgunConfig",
    # Models - Enums
    "AccessLevel",
    "ClickTrackingMode",
    "EventType",
    "Severity",
    "SmtpErrorCode",
    "SpamAction",
    "TimeResolution",
    "WebhookType",
    # Models - Requests
    "EmailAddress",
    "QueryStringBuilder",
    "Message",
    "MessageBuilder",
    "Recipient",
    "FileAttachment",
    "FileReference",
    "EventRequest",
    "EventRequestBuilder",
    "StatsRequest",
    "StatsRequestBuilder",
    "DomainRequest",
    "DomainCredentialRequest",
    "BounceRequest",
    "ComplaintRequest",
    "UnsubscriberRequest",
    "MailingList",
    "Member",
    "Route",
    "Webhook",
    # Clients
    "MailgunClient",
]
