"""Address value types: email addresses, domain hostnames and IPv4 literals.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

import ipaddress
import re
from email.utils import formataddr
from typing import Any

from pydantic import AnyHttpUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator
from pydantic.networks import validate_email

from mailgun_client.core.encoders import is_blank
from mailgun_client.core.exceptions import MalformedInputError, MissingRequiredFieldError

_HTTP_URL = TypeAdapter(AnyHttpUrl)

_HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)(?!-)[a-z0-9-]{1,63}(?<!-)(\.(?!-)[a-z0-9-]{1,63}(?<!-))+$"
)


def _check_syntax(raw: str, field: str) -> tuple[str, str]:
    try:
        return validate_email(raw)
    except ValueError as e:
        raise MalformedInputError(f"Invalid email address {raw!r}: {e}", field=field) from e


class EmailAddress(BaseModel):
    """A syntactically valid email address with an optional display name.

    Attributes:
        address: Bare address part, e.g. ``bob@example.com``.
        display_name: Display name, empty when none was given.

    Example:
        >>> str(EmailAddress.parse("Bob <bob@example.com>"))
        'Bob <bob@example.com>'
    """

    address: str = Field(..., description="Bare address")
    display_name: str = Field(default="", description="Display name")

    model_config = {"frozen": True}

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, v: Any) -> str:
        """Validate address syntax.

        Raises:
            MissingRequiredFieldError: If address is blank.
            MalformedInputError: If address is not a valid email address.
        """
        if is_blank(v):
            raise MissingRequiredFieldError("Address cannot be null or empty!", field="address")
        if not isinstance(v, str):
            raise MalformedInputError(f"Invalid email address {v!r}", field="address")
        _, email = _check_syntax(v.strip(), "address")
        return email

    @classmethod
    def parse(cls, raw: str, field: str = "address") -> EmailAddress:
        """Parse ``addr`` or ``Name <addr>`` into an EmailAddress.

        Raises:
            MissingRequiredFieldError: If raw is blank.
            MalformedInputError: If raw cannot be parsed.
        """
        if is_blank(raw):
            raise MissingRequiredFieldError(f"{field} cannot be null or empty!", field=field)

        raw = raw.strip()
        name, email = _check_syntax(raw, field)

        # validate_email falls back to the local part when no name is given
        if "<" not in raw:
            name = ""

        return cls(address=email, display_name=name.strip().strip('"'))

    def __str__(self) -> str:
        return formataddr((self.display_name, self.address)) if self.display_name else self.address


def coerce_address(value: Any, field: str = "address") -> EmailAddress:
    """Accept an EmailAddress or a parseable string.

    Raises:
        MissingRequiredFieldError: If value is None or blank.
        MalformedInputError: If value is neither an address nor a parseable string.
    """
    if isinstance(value, EmailAddress):
        return value
    if is_blank(value):
        raise MissingRequiredFieldError(f"{field} cannot be null or empty!", field=field)
    if isinstance(value, str):
        return EmailAddress.parse(value, field=field)
    raise MalformedInputError(f"Cannot interpret {value!r} as an email address", field=field)


def parse_hostname(value: Any, field: str = "name") -> str:
    """Reduce a domain name or URL to its bare hostname.

    ``https://www.example.com/path`` and ``example.com`` both yield
    ``example.com``.

    Raises:
        MissingRequiredFieldError: If value is blank.
        MalformedInputError: If no valid hostname can be extracted.
    """
    if is_blank(value):
        raise MissingRequiredFieldError(f"{field} cannot be null or empty!", field=field)

    raw = str(value).strip()
    if "://" not in raw:
        raw = f"https://{raw}"

    try:
        host = _HTTP_URL.validate_python(raw).host or ""
    except ValidationError as e:
        raise MalformedInputError(f"Invalid domain name {value!r}", field=field) from e

    host = host.lower().removeprefix("www.")

    if not _HOSTNAME_RE.match(host):
        raise MalformedInputError(f"Invalid domain name {value!r}", field=field)

    return host


def validate_ipv4(value: Any, field: str = "ip") -> str:
    """Validate a dotted-quad IPv4 literal.

    Raises:
        MissingRequiredFieldError: If value is blank.
        MalformedInputError: If value is not an IPv4 address.
    """
    if is_blank(value):
        raise MissingRequiredFieldError(f"{field} cannot be null or empty!", field=field)
    try:
        return str(ipaddress.IPv4Address(str(value).strip()))
    except ipaddress.AddressValueError as e:
        raise MalformedInputError(f"Invalid IPv4 address {value!r}", field=field) from e
