"""Event log query request and builder.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from mailgun_client.core.encoders import as_utc, require_text, to_unix_seconds, to_yes_no
from mailgun_client.core.exceptions import MissingRequiredFieldError, OutOfRangeError
from mailgun_client.core.logger import get_logger
from mailgun_client.models.address import EmailAddress, coerce_address
from mailgun_client.models.enums import (
    EventType,
    Severity,
    get_event_type_name,
    get_severity_name,
)
from mailgun_client.models.query_string import QueryStringBuilder

logger = get_logger(__name__)

MAX_EVENT_RESULT_LIMIT = 300

# Kept literal so disjunctions read as event=(clicked or opened)
QUERY_SAFE_CHARS = "() @"


def _disjunction(values: list[str]) -> str:
    if len(values) == 1:
        return values[0]
    return "(" + " or ".join(values) + ")"


class EventRequest(BaseModel):
    """Filter criteria for the events endpoint.

    Every field except ``limit`` is optional; unset fields are left out
    of the query string.
    """

    limit: int = MAX_EVENT_RESULT_LIMIT
    begin: datetime | None = None
    end: datetime | None = None
    ascending: bool | None = None
    pretty: bool | None = None
    size: int | None = None
    message_id: str | None = None
    recipient: EmailAddress | None = None
    to: EmailAddress | None = None
    attachment: str | None = None
    from_address: EmailAddress | None = None
    subject: str | None = None
    event_types: list[EventType] = Field(default_factory=list)
    severity: Severity | None = None
    tags: list[str] = Field(default_factory=list)

    def to_query_string(self) -> str:
        """Render the filters as ``?limit=...&...``.

        Layout: limit; begin/end as Unix seconds; ascending/pretty as
        yes/no; size, message-id, recipient, to, attachment, from, subject;
        event; severity; tags. Several event types or tags render as
        ``(a or b)``.
        """
        query = QueryStringBuilder(safe=QUERY_SAFE_CHARS)
        query.append("limit", self.limit)

        if self.begin is not None:
            query.append("begin", to_unix_seconds(self.begin))
        if self.end is not None:
            query.append("end", to_unix_seconds(self.end))

        if self.ascending is not None:
            query.append("ascending", to_yes_no(self.ascending))
        if self.pretty is not None:
            query.append("pretty", to_yes_no(self.pretty))

        if self.size is not None:
            query.append("size", self.size)
        if self.message_id is not None:
            query.append("message-id", self.message_id)
        if self.recipient is not None:
            query.append("recipient", self.recipient.address)
        if self.to is not None:
            query.append("to", self.to.address)
        if self.attachment is not None:
            query.append("attachment", self.attachment)
        if self.from_address is not None:
            query.append("from", self.from_address.address)
        if self.subject is not None:
            query.append("subject", self.subject)

        if self.event_types:
            query.append(
                "event", _disjunction([get_event_type_name(e) for e in self.event_types])
            )

        if self.severity is not None:
            if EventType.FAILED not in self.event_types:
                logger.warning("Severity filter only applies to failed events")
            query.append("severity", get_severity_name(self.severity))

        if self.tags:
            query.append("tags", _disjunction(self.tags))

        return query.build()


class EventRequestBuilder:
    """Fluent builder for ``EventRequest``.

    Each setter validates only its own argument. Builders are single-owner
    objects with no internal locking.
    """

    def __init__(self) -> None:
        self._request = EventRequest()

    def set_result_limit(self, limit: int) -> EventRequestBuilder:
        """Set how many events to return.

        Raises:
            OutOfRangeError: If limit is below 1 or above 300.
        """
        if limit < 1 or limit > MAX_EVENT_RESULT_LIMIT:
            raise OutOfRangeError(
                f"Limit of resulting events must be between 1 and {MAX_EVENT_RESULT_LIMIT}!",
                field="limit",
            )
        self._request.limit = limit
        return self

    def set_start_time(self, moment: datetime) -> EventRequestBuilder:
        self._request.begin = as_utc(_required(moment, "begin"))
        return self

    def set_end_time(self, moment: datetime) -> EventRequestBuilder:
        self._request.end = as_utc(_required(moment, "end"))
        return self

    def set_ascending(self, ascending: bool) -> EventRequestBuilder:
        self._request.ascending = ascending
        return self

    def set_pretty(self, pretty: bool) -> EventRequestBuilder:
        self._request.pretty = pretty
        return self

    def set_message_size(self, size: int) -> EventRequestBuilder:
        """Filter by message size in bytes.

        Raises:
            OutOfRangeError: If size is not positive.
        """
        if size < 1:
            raise OutOfRangeError("Message size cannot be less than 1 byte!", field="size")
        self._request.size = size
        return self

    def set_message_id(self, message_id: str) -> EventRequestBuilder:
        self._request.message_id = require_text(message_id, "message_id", "Message Id")
        return self

    def set_subject(self, subject: str) -> EventRequestBuilder:
        self._request.subject = require_text(subject, "subject", "Subject")
        return self

    def set_attachment_filename(self, filename: str) -> EventRequestBuilder:
        self._request.attachment = require_text(filename, "attachment", "Attachment Filename")
        return self

    def set_recipient(self, address: EmailAddress | str) -> EventRequestBuilder:
        self._request.recipient = coerce_address(address, field="recipient")
        return self

    def set_to(self, address: EmailAddress | str) -> EventRequestBuilder:
        self._request.to = coerce_address(address, field="to")
        return self

    def set_from(self, address: EmailAddress | str) -> EventRequestBuilder:
        self._request.from_address = coerce_address(address, field="from")
        return self

    def set_severity(self, severity: Severity) -> EventRequestBuilder:
        """Filter failures by severity; only meaningful with the failed event type."""
        self._request.severity = Severity(_required(severity, "severity"))
        return self

    def add_event_type(self, event_type: EventType) -> EventRequestBuilder:
        event_type = EventType(_required(event_type, "event_type"))
        if event_type not in self._request.event_types:
            self._request.event_types.append(event_type)
        return self

    def add_tag(self, tag: str) -> EventRequestBuilder:
        require_text(tag, "tag", "Tag")
        if tag not in self._request.tags:
            self._request.tags.append(tag)
        return self

    def build(self) -> EventRequest:
        return self._request


def _required(value: Any, field: str) -> Any:
    if value is None:
        raise MissingRequiredFieldError(f"{field} cannot be null!", field=field)
    return value
