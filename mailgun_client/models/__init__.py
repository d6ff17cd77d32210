"""Models module for the Mailgun client.

Defines the request value objects and builders, their wire enums, and the
form, JSON and query string encoders they render through.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from mailgun_client.models.address import EmailAddress, parse_hostname, validate_ipv4
from mailgun_client.models.domains import (
    DomainCredentialRequest,
    DomainRequest,
    validate_credential_password,
)
from mailgun_client.models.enums import (
    AccessLevel,
    ClickTrackingMode,
    EventType,
    Severity,
    SmtpErrorCode,
    SpamAction,
    TimeResolution,
    WebhookType,
)
from mailgun_client.models.events import EventRequest, EventRequestBuilder
from mailgun_client.models.mailing_lists import MailingList, Member
from mailgun_client.models.messages import (
    FileAttachment,
    FileReference,
    Message,
    MessageBuilder,
    Recipient,
)
from mailgun_client.models.payload import RequestModel, form_to_json
from mailgun_client.models.query_string import QueryStringBuilder
from mailgun_client.models.routes import Route
from mailgun_client.models.stats import StatsRequest, StatsRequestBuilder
from mailgun_client.models.suppressions import (
    BounceRequest,
    ComplaintRequest,
    UnsubscriberRequest,
)
from mailgun_client.models.webhooks import Webhook

__all__ = [
    # Enums
    "AccessLevel",
    "ClickTrackingMode",
    "EventType",
    "Severity",
    "SmtpErrorCode",
    "SpamAction",
    "TimeResolution",
    "WebhookType",
    # Addresses
    "EmailAddress",
    "parse_hostname",
    "validate_ipv4",
    # Payload
    "RequestModel",
    "QueryStringBuilder",
    "form_to_json",
    # Messages
    "Message",
    "MessageBuilder",
    "Recipient",
    "FileAttachment",
    "FileReference",
    # Queries
    "EventRequest",
    "EventRequestBuilder",
    "StatsRequest",
    "StatsRequestBuilder",
    # Domains
    "DomainRequest",
    "DomainCredentialRequest",
    "validate_credential_password",
    # Suppressions
    "BounceRequest",
    "ComplaintRequest",
    "UnsubscriberRequest",
    # Lists
    "MailingList",
    "Member",
    # Routing
    "Route",
    "Webhook",
]
