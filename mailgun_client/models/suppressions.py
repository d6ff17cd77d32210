"""Suppression list request models (bounces, complaints, unsubscribes).

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from mailgun_client.core.clock import DEFAULT_CLOCK
from mailgun_client.core.encoders import as_utc, is_blank, require_text, to_rfc2822
from mailgun_client.models.address import EmailAddress, coerce_address
from mailgun_client.models.enums import SmtpErrorCode, get_smtp_error_code
from mailgun_client.models.payload import FormContent, RequestModel


def _now() -> datetime:
    return DEFAULT_CLOCK.now()


class _SuppressionRequest(RequestModel):
    """Fields common to every suppression entry."""

    address: EmailAddress = Field(..., description="Suppressed address")
    created_at: datetime = Field(default_factory=_now, description="Event timestamp")

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, v: Any) -> EmailAddress:
        """Accept an EmailAddress or a parseable string.

        Raises:
            MissingRequiredFieldError: If address is blank.
            MalformedInputError: If address is not a valid email address.
        """
        return coerce_address(v, field="address")

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, v: datetime) -> datetime:
        return as_utc(v)


class BounceRequest(_SuppressionRequest):
    """A bounce record to add to the bounce list.

    Attributes:
        address: Bounced address.
        code: SMTP reply code of the bounce.
        error: Free-text error description (optional).
        created_at: When the bounce happened, defaults to now.
    """

    code: SmtpErrorCode = Field(default=SmtpErrorCode.MAILBOX_UNAVAILABLE)
    error: str = Field(default="", description="Error description")

    def to_form_content(self) -> FormContent:
        content = [
            ("address", self.address.address),
            ("code", get_smtp_error_code(self.code)),
        ]
        if not is_blank(self.error):
            content.append(("error", self.error))
        content.append(("created_at", to_rfc2822(self.created_at)))
        return content


class ComplaintRequest(_SuppressionRequest):
    """A spam complaint to add to the complaint list."""

    def to_form_content(self) -> FormContent:
        return [
            ("address", self.address.address),
            ("created_at", to_rfc2822(self.created_at)),
        ]


class UnsubscriberRequest(_SuppressionRequest):
    """An address to unsubscribe, from one tag or from everything (``*``)."""

    tag: str = Field(default="*", description="Tag to unsubscribe from")

    @field_validator("tag", mode="before")
    @classmethod
    def validate_tag(cls, v: Any) -> Any:
        return require_text(v, "tag", "Tag")

    def to_form_content(self) -> FormContent:
        return [
            ("address", self.address.address),
            ("tag", self.tag),
            ("created_at", to_rfc2822(self.created_at)),
        ]
