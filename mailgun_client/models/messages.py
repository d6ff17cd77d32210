"""Outgoing message models and the message builder.

The builder enforces the message invariants as each part is added:

- at most 1000 recipients;
- once any recipient carries template variables, every recipient must,
  so the variable map and the recipient list always have equal size;
- body text, html, subject and attachment/inline content share one
  25,000,000 byte budget. Text parts are charged at two bytes per UTF-16
  code unit.

A failed addition leaves every earlier addition committed.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from mailgun_client.core.clock import DEFAULT_CLOCK, Clock
from mailgun_client.core.encoders import (
    as_utc,
    is_blank,
    require_text,
    to_unix_seconds,
    to_yes_no,
)
from mailgun_client.core.exceptions import (
    InvalidOperationError,
    MalformedInputError,
    MissingRequiredFieldError,
    OutOfRangeError,
)
from mailgun_client.core.logger import get_logger
from mailgun_client.models.address import EmailAddress, coerce_address
from mailgun_client.models.payload import FormContent, JsonObject, form_to_json

logger = get_logger(__name__)

MAX_TOTAL_MESSAGE_SIZE = 25_000_000
MAX_RECIPIENT_COUNT = 1000
MAX_DELIVERY_DELAY = timedelta(days=3)


def text_size(text: str) -> int:
    """Budget charge for a text part: two bytes per UTF-16 code unit."""
    return len(text.encode("utf-16-le"))


# ============================================================================
# Parts
# ============================================================================
class Recipient(BaseModel):
    """A message recipient with optional template variables.

    Attributes:
        address: Recipient address.
        variables: Values for ``%recipient.<name>%`` placeholders.
    """

    address: EmailAddress = Field(..., description="Recipient address")
    variables: dict[str, Any] | None = Field(default=None, description="Template variables")

    model_config = {"frozen": True}

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, v: Any) -> EmailAddress:
        return coerce_address(v, field="address")


class FileAttachment(BaseModel):
    """An attachment held in memory."""

    filename: str = Field(..., description="File name shown to the recipient")
    data: bytes = Field(..., description="File content", repr=False)

    model_config = {"frozen": True}

    @field_validator("filename", mode="before")
    @classmethod
    def validate_filename(cls, v: Any) -> Any:
        return require_text(v, "filename", "File name")

    @property
    def size(self) -> int:
        return len(self.data)

    def read(self) -> bytes:
        return self.data


class FileReference(BaseModel):
    """An attachment read from disk when the request body is built.

    The size is taken from the file system when the reference is added to
    a message; the content is read later by ``read()``.
    """

    path: Path = Field(..., description="Path of the file to attach")

    model_config = {"frozen": True}

    @field_validator("path", mode="before")
    @classmethod
    def validate_path(cls, v: Any) -> Any:
        if is_blank(v):
            raise MissingRequiredFieldError("Attachment path cannot be null or empty!", field="path")
        if not Path(v).is_file():
            raise MalformedInputError(f"Attachment file not found: {v}", field="path")
        return v

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    def read(self) -> bytes:
        return self.path.read_bytes()


Attachment = Union[FileAttachment, FileReference]


def _as_attachment(value: Any, field: str) -> Attachment:
    if isinstance(value, (FileAttachment, FileReference)):
        return value
    if isinstance(value, (str, Path)):
        return FileReference(path=value)
    if value is None:
        raise MissingRequiredFieldError(f"{field} cannot be null!", field=field)
    raise MalformedInputError(f"Cannot attach {type(value).__name__}", field=field)


# ============================================================================
# Message
# ============================================================================
class Message(BaseModel):
    """An outgoing message as accumulated by ``MessageBuilder``.

    Fields are public and mutable. Rendering re-checks the sender,
    recipient cap and recipient-variable parity so changes made after
    ``build()`` cannot produce an invalid request.
    """

    sender: EmailAddress | None = None
    to: list[Recipient] = Field(default_factory=list)
    cc: list[EmailAddress] = Field(default_factory=list)
    bcc: list[EmailAddress] = Field(default_factory=list)
    subject: str | None = None
    text: str | None = None
    html: str | None = None
    attachments: list[Attachment] = Field(default_factory=list)
    inline: list[Attachment] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    campaign_id: str | None = None
    dkim: bool = False
    test_mode: bool = False
    tracking: bool = False
    tracking_clicks: bool = False
    tracking_opens: bool = False
    require_tls: bool = False
    skip_verification: bool = False
    delivery_time: datetime | None = None
    recipient_variables: dict[str, dict[str, Any]] = Field(default_factory=dict)
    custom_headers: dict[str, str] = Field(default_factory=dict)
    custom_data: dict[str, Any] = Field(default_factory=dict)

    def _check_invariants(self) -> None:
        if self.sender is None:
            raise MissingRequiredFieldError("Sender cannot be null!", field="sender")

        if not self.to:
            raise MissingRequiredFieldError("Recipients cannot be empty!", field="to")

        if len(self.to) > MAX_RECIPIENT_COUNT:
            raise OutOfRangeError(
                f"Maximum number of {MAX_RECIPIENT_COUNT:,} recipients cannot be exceeded!",
                field="to",
            )

        if self.recipient_variables and len(self.recipient_variables) != len(self.to):
            raise OutOfRangeError(
                "Did not have matching amount of recipient variables and recipients!",
                field="recipient_variables",
            )

    def as_key_value_collection(self) -> FormContent:
        """Render the message fields as ordered form pairs.

        Attachments and inline images are not included; see ``iter_files``.

        Raises:
            MissingRequiredFieldError: If sender or recipients are missing.
            OutOfRangeError: If the recipient cap or variable parity is violated.
        """
        self._check_invariants()

        content: FormContent = [
            ("from", str(self.sender)),
            ("o:testmode", to_yes_no(self.test_mode)),
            ("o:tracking", to_yes_no(self.tracking)),
            ("o:tracking-clicks", to_yes_no(self.tracking_clicks)),
            ("o:tracking-opens", to_yes_no(self.tracking_opens)),
            ("o:require-tls", to_yes_no(self.require_tls)),
            ("o:skip-verification", to_yes_no(self.skip_verification)),
            ("o:dkim", to_yes_no(self.dkim)),
            ("to", ",".join(str(r.address) for r in self.to)),
        ]

        if self.cc:
            content.append(("cc", ",".join(str(a) for a in self.cc)))

        if self.bcc:
            content.append(("bcc", ",".join(str(a) for a in self.bcc)))

        if not is_blank(self.subject):
            content.append(("subject", self.subject))

        if not is_blank(self.html):
            content.append(("html", self.html))

        if not is_blank(self.text):
            content.append(("text", self.text))

        if not is_blank(self.campaign_id):
            content.append(("o:campaign", self.campaign_id))

        if self.recipient_variables:
            content.append(
                ("recipient-variables", json.dumps(self.recipient_variables, separators=(",", ":")))
            )

        content.extend(("o:tag", tag) for tag in self.tags)
        content.extend((f"h:{name}", value) for name, value in self.custom_headers.items())
        content.extend(
            (f"v:{name}", json.dumps(value, separators=(",", ":")))
            for name, value in self.custom_data.items()
        )

        if self.delivery_time is not None:
            content.append(("o:deliverytime", str(to_unix_seconds(self.delivery_time))))

        return content

    def to_form_content(self) -> FormContent:
        return self.as_key_value_collection()

    def to_json(self) -> JsonObject:
        return form_to_json(self.as_key_value_collection())

    def iter_files(self) -> Iterator[tuple[str, tuple[str, bytes]]]:
        """Yield multipart file entries, attachments first then inline images.

        File references are read here, one at a time.
        """
        for attachment in self.attachments:
            yield "attachment", (attachment.filename, attachment.read())
        for image in self.inline:
            yield "inline", (image.filename, image.read())


# ============================================================================
# Builder
# ============================================================================
class MessageBuilder:
    """Fluent, validating builder for ``Message``.

    Every mutation validates immediately. Builders are single-owner objects
    with no internal locking.

    Args:
        clock: Time source for the delivery-time window (system clock if None).

    Example:
        message = (
            MessageBuilder()
            .set_from("Support <support@mg.example.com>")
            .add_recipient(Recipient(address="bob@example.com"))
            .set_subject("Hello")
            .set_text_body("Hi Bob")
            .build()
        )
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or DEFAULT_CLOCK
        self._message = Message()
        self._message_size = 0
        self._text_charges: dict[str, int] = {}

    @property
    def message_size(self) -> int:
        """Bytes charged against the message budget so far."""
        return self._message_size

    @property
    def recipient_count(self) -> int:
        return len(self._message.to)

    # ------------------------------------------------------------------
    # Budget
    # ------------------------------------------------------------------
    def _charge(self, size: int, what: str) -> None:
        if self._message_size + size > MAX_TOTAL_MESSAGE_SIZE:
            raise OutOfRangeError(
                f"Cannot exceed total message size of 25MB! Adding {what} "
                f"({size} bytes) to {self._message_size} bytes",
                field=what,
            )
        self._message_size += size
        logger.debug(f"Charged {size} bytes for {what}, total {self._message_size}")

    def _set_text(self, part: str, value: str, label: str) -> None:
        require_text(value, part, label)
        previous = self._text_charges.get(part, 0)
        size = text_size(value)

        # Replacing a part refunds its earlier charge
        self._message_size -= previous
        try:
            self._charge(size, part)
        except OutOfRangeError:
            self._message_size += previous
            raise

        self._text_charges[part] = size
        setattr(self._message, part, value)

    # ------------------------------------------------------------------
    # Addresses
    # ------------------------------------------------------------------
    def set_from(self, sender: EmailAddress | str) -> MessageBuilder:
        """Set the sender.

        Raises:
            MissingRequiredFieldError: If sender is missing.
            MalformedInputError: If sender is not a valid address.
        """
        self._message.sender = coerce_address(sender, field="sender")
        return self

    def _check_parity(self, recipients: list[Recipient]) -> None:
        # Variables are keyed by address, so a repeated address does not add an entry
        keyed = set(self._message.recipient_variables)
        count = self.recipient_count

        for recipient in recipients:
            count += 1
            if recipient.variables is not None:
                keyed.add(recipient.address.address)
            variables = len(keyed)
            if variables > 0 and variables != count:
                raise OutOfRangeError(
                    "Did not have matching amount of recipient variables and recipients! "
                    f"({variables} variable sets for {count} recipients)",
                    field="recipient_variables",
                )

    def _commit(self, recipient: Recipient) -> None:
        self._message.to.append(recipient)
        if recipient.variables is not None:
            self._message.recipient_variables[recipient.address.address] = recipient.variables

    def add_recipient(self, recipient: Recipient | EmailAddress | str) -> MessageBuilder:
        """Add one recipient.

        Raises:
            MissingRequiredFieldError: If recipient is missing.
            OutOfRangeError: If the cap of 1000 recipients would be exceeded,
                or the variable map would no longer match the recipient list.
        """
        if recipient is None:
            raise MissingRequiredFieldError("Recipient cannot be null!", field="recipient")
        if not isinstance(recipient, Recipient):
            recipient = Recipient(address=recipient)

        if self.recipient_count + 1 > MAX_RECIPIENT_COUNT:
            raise OutOfRangeError(
                f"Maximum number of {MAX_RECIPIENT_COUNT:,} recipients cannot be exceeded!",
                field="recipient",
            )

        self._check_parity([recipient])
        self._commit(recipient)
        return self

    def add_recipients(self, recipients: Iterable[Recipient]) -> MessageBuilder:
        """Add a batch of recipients, all or nothing.

        Raises:
            MissingRequiredFieldError: If recipients or any member is missing.
            OutOfRangeError: If the batch would exceed 1000 recipients, or
                break recipient/variable parity at any point.
        """
        if recipients is None:
            raise MissingRequiredFieldError("Recipients cannot be null!", field="recipients")

        batch = list(recipients)
        if any(r is None for r in batch):
            raise MissingRequiredFieldError("Recipients cannot contain null!", field="recipients")
        batch = [r if isinstance(r, Recipient) else Recipient(address=r) for r in batch]

        if self.recipient_count + len(batch) > MAX_RECIPIENT_COUNT:
            raise OutOfRangeError(
                f"Maximum number of {MAX_RECIPIENT_COUNT:,} recipients cannot be exceeded!",
                field="recipients",
            )

        self._check_parity(batch)
        for recipient in batch:
            self._commit(recipient)
        return self

    def add_cc(self, cc: EmailAddress | str) -> MessageBuilder:
        address = coerce_address(cc, field="cc")
        if address not in self._message.cc:
            self._message.cc.append(address)
        return self

    def add_bcc(self, bcc: EmailAddress | str) -> MessageBuilder:
        address = coerce_address(bcc, field="bcc")
        if address not in self._message.bcc:
            self._message.bcc.append(address)
        return self

    def set_reply_to(self, reply_to: EmailAddress | str) -> MessageBuilder:
        """Set the Reply-To header."""
        address = coerce_address(reply_to, field="reply_to")
        return self.add_custom_header("Reply-To", str(address))

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def set_subject(self, subject: str) -> MessageBuilder:
        """Set the subject, charging it against the size budget.

        Raises:
            MissingRequiredFieldError: If subject is blank.
            OutOfRangeError: If the budget would be exceeded.
        """
        self._set_text("subject", subject, "Subject")
        return self

    def set_text_body(self, text: str) -> MessageBuilder:
        """Set the plain-text body, charging it against the size budget."""
        self._set_text("text", text, "Text Body")
        return self

    def set_html_body(self, html: str) -> MessageBuilder:
        """Set the HTML body, charging it against the size budget."""
        self._set_text("html", html, "HTML Body")
        return self

    def add_attachment(self, attachment: FileAttachment | FileReference | str | Path) -> MessageBuilder:
        """Attach a file, in memory or by path.

        Raises:
            MissingRequiredFieldError: If attachment is missing.
            OutOfRangeError: If the budget would be exceeded.
        """
        attachment = _as_attachment(attachment, "attachment")
        self._charge(attachment.size, "attachment")
        self._message.attachments.append(attachment)
        return self

    def add_inline_image(self, image: FileAttachment | FileReference | str | Path) -> MessageBuilder:
        """Attach an inline image, sharing the attachment budget."""
        image = _as_attachment(image, "inline")
        self._charge(image.size, "inline")
        self._message.inline.append(image)
        return self

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------
    def add_tag(self, tag: str) -> MessageBuilder:
        require_text(tag, "tag", "Tag")
        if tag not in self._message.tags:
            self._message.tags.append(tag)
        return self

    def set_campaign_id(self, campaign_id: str) -> MessageBuilder:
        self._message.campaign_id = require_text(campaign_id, "campaign_id", "Campaign id")
        return self

    def add_custom_header(self, name: str, value: str) -> MessageBuilder:
        """Add an ``h:`` header.

        Raises:
            MissingRequiredFieldError: If name or value is blank.
            InvalidOperationError: If the header was already added.
        """
        require_text(name, "name", "Custom header name")
        require_text(value, "value", "Custom header value")

        if name in self._message.custom_headers:
            raise InvalidOperationError(f"Custom header {name!r} is already set!")

        self._message.custom_headers[name] = value
        return self

    def add_custom_data(self, name: str, value: Any) -> MessageBuilder:
        """Attach JSON data as a ``v:`` variable.

        Raises:
            MissingRequiredFieldError: If name is blank or value is None.
            MalformedInputError: If value cannot be encoded as JSON.
        """
        require_text(name, "name", "Name")
        if value is None:
            raise MissingRequiredFieldError("Value cannot be null!", field="value")

        try:
            json.dumps(value)
        except (TypeError, ValueError) as e:
            raise MalformedInputError(f"Custom data {name!r} is not JSON encodable", field="value") from e

        self._message.custom_data[name] = value
        return self

    def set_test_mode(self, test_mode: bool) -> MessageBuilder:
        self._message.test_mode = test_mode
        return self

    def set_tracking(self, enable: bool) -> MessageBuilder:
        self._message.tracking = enable
        return self

    def set_open_tracking(self, enable: bool) -> MessageBuilder:
        self._message.tracking_opens = enable
        return self

    def set_click_tracking(self, enable: bool) -> MessageBuilder:
        self._message.tracking_clicks = enable
        return self

    def set_dkim(self, enable: bool) -> MessageBuilder:
        self._message.dkim = enable
        return self

    def set_require_tls(self, enable: bool) -> MessageBuilder:
        self._message.require_tls = enable
        return self

    def set_skip_verification(self, enable: bool) -> MessageBuilder:
        self._message.skip_verification = enable
        return self

    def set_delivery_time(self, moment: datetime) -> MessageBuilder:
        """Schedule delivery, at most three days ahead of the clock.

        Naive datetimes are taken as UTC.

        Raises:
            MissingRequiredFieldError: If moment is None.
            OutOfRangeError: If moment is more than three days from now.
        """
        if moment is None:
            raise MissingRequiredFieldError("Delivery time cannot be null!", field="delivery_time")

        moment = as_utc(moment)
        if moment - self._clock.now() > MAX_DELIVERY_DELAY:
            raise OutOfRangeError(
                "Delivery DateTime cannot exceed 3 days into the future!",
                field="delivery_time",
            )

        self._message.delivery_time = moment
        return self

    def build(self) -> Message:
        """Return the accumulated message without re-validating it."""
        return self._message
