"""Mailing list and list member request models.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field, field_validator

from mailgun_client.core.encoders import is_blank, to_yes_no
from mailgun_client.models.address import EmailAddress, coerce_address
from mailgun_client.models.enums import AccessLevel, get_access_level_name
from mailgun_client.models.payload import FormContent, RequestModel


class MailingList(RequestModel):
    """A mailing list definition.

    Attributes:
        address: The list's own address, e.g. ``devs@mg.example.com``.
        name: Display name (optional).
        description: Free-text description (optional).
        access_level: Who may post to the list.
    """

    address: EmailAddress = Field(..., description="List address")
    name: str = Field(default="", description="List name")
    description: str = Field(default="", description="List description")
    access_level: AccessLevel = Field(default=AccessLevel.READ_ONLY)

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, v: Any) -> EmailAddress:
        return coerce_address(v, field="address")

    def to_form_content(self) -> FormContent:
        content = [("address", str(self.address))]
        if not is_blank(self.name):
            content.append(("name", self.name))
        if not is_blank(self.description):
            content.append(("description", self.description))
        content.append(("access_level", get_access_level_name(self.access_level)))
        return content


class Member(RequestModel):
    """A mailing list member.

    Attributes:
        address: Member address.
        name: Display name (optional).
        vars: Arbitrary JSON data attached to the member (optional).
        subscribed: Whether the member receives list mail.
        upsert: Update the member if it already exists.
    """

    address: EmailAddress = Field(..., description="Member address")
    name: str = Field(default="", description="Member name")
    vars: dict[str, Any] | None = Field(default=None, description="Member variables")
    subscribed: bool = Field(default=False)
    upsert: bool = Field(default=False)

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, v: Any) -> EmailAddress:
        return coerce_address(v, field="address")

    def to_form_content(self) -> FormContent:
        content = [("address", str(self.address))]
        if not is_blank(self.name):
            content.append(("name", self.name))
        if self.vars is not None:
            content.append(("vars", json.dumps(self.vars, separators=(",", ":"))))
        content.append(("subscribed", to_yes_no(self.subscribed)))
        content.append(("upsert", to_yes_no(self.upsert)))
        return content
