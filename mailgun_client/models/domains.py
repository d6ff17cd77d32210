"""Domain and SMTP credential request models.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr, field_validator

from mailgun_client.core.encoders import require_text, to_true_false
from mailgun_client.core.exceptions import MalformedInputError, OutOfRangeError
from mailgun_client.models.address import parse_hostname
from mailgun_client.models.enums import SpamAction, get_spam_action_name
from mailgun_client.models.payload import FormContent, RequestModel

MIN_PASSWORD_LENGTH = 5
MAX_PASSWORD_LENGTH = 32


def validate_credential_password(password: Any, field: str = "password") -> str:
    """Check an SMTP credential password.

    Used for credential creation and for password-only updates.

    Raises:
        MissingRequiredFieldError: If password is blank.
        OutOfRangeError: If password length is outside [5, 32].
    """
    if isinstance(password, SecretStr):
        password = password.get_secret_value()

    require_text(password, field, "Password")

    if not isinstance(password, str):
        raise MalformedInputError("Password must be a string!", field=field)

    if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
        raise OutOfRangeError(
            f"Password must have a minimum length of {MIN_PASSWORD_LENGTH}, "
            f"and maximum length of {MAX_PASSWORD_LENGTH}!",
            field=field,
        )
    return password


class DomainRequest(RequestModel):
    """Request to create a sending domain.

    Attributes:
        name: Bare hostname; URLs are reduced to their host, ``www.`` dropped.
        smtp_password: Password for the default SMTP credential.
        spam_action: Inbound spam handling.
        wildcard: Whether sub-domains accept mail.
        force_dkim_authority: Whether the domain is its own DKIM authority.
    """

    name: str = Field(..., description="Domain hostname")
    smtp_password: SecretStr = Field(..., description="SMTP password")
    spam_action: SpamAction = Field(default=SpamAction.DISABLED)
    wildcard: bool = Field(default=False)
    force_dkim_authority: bool = Field(default=False)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        """Reduce the domain name to its hostname.

        Raises:
            MissingRequiredFieldError: If name is blank.
            MalformedInputError: If name is not a valid hostname.
        """
        return parse_hostname(v, field="name")

    @field_validator("smtp_password", mode="before")
    @classmethod
    def validate_smtp_password(cls, v: Any) -> Any:
        if isinstance(v, SecretStr):
            require_text(v.get_secret_value(), "smtp_password", "Smtp Password")
            return v
        return require_text(v, "smtp_password", "Smtp Password")

    def to_form_content(self) -> FormContent:
        return [
            ("name", self.name),
            ("smtp_password", self.smtp_password.get_secret_value()),
            ("spam_action", get_spam_action_name(self.spam_action)),
            ("wildcard", to_true_false(self.wildcard)),
            ("force_dkim_authority", to_true_false(self.force_dkim_authority)),
        ]


class DomainCredentialRequest(RequestModel):
    """Request to create an SMTP credential on a domain.

    Attributes:
        username: Login, the local part or full address of the credential.
        password: 5 to 32 characters.
    """

    username: str = Field(..., description="Credential login")
    password: str = Field(..., description="Credential password", repr=False)

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: Any) -> Any:
        return require_text(v, "username", "Username")

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v: Any) -> str:
        return validate_credential_password(v)

    def to_form_content(self) -> FormContent:
        return [
            ("login", self.username),
            ("password", self.password),
        ]
