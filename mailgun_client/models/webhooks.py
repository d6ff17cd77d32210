"""Webhook builder.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from mailgun_client.core.encoders import require_text
from mailgun_client.core.exceptions import InvalidOperationError, MalformedInputError
from mailgun_client.models.enums import WebhookType, get_webhook_type_name
from mailgun_client.models.payload import FormContent, JsonObject, form_to_json

MAX_URL_COUNT = 3


class Webhook:
    """A webhook type with up to three callback URLs.

    Builders are single-owner objects with no internal locking.

    Example:
        webhook = Webhook().set_type(WebhookType.DELIVERED).append_url("https://example.com/hook")
    """

    def __init__(self) -> None:
        self._type: WebhookType | None = None
        self._urls: list[str] = []

    @property
    def type(self) -> WebhookType | None:
        return self._type

    @property
    def id(self) -> str:
        """Wire identifier of the webhook type, empty until a type is set."""
        return get_webhook_type_name(self._type) if self._type is not None else ""

    @property
    def urls(self) -> tuple[str, ...]:
        return tuple(self._urls)

    def set_type(self, webhook_type: WebhookType | str) -> Webhook:
        """Set the webhook type.

        Raises:
            MalformedInputError: If webhook_type is not a known type.
        """
        try:
            self._type = WebhookType(webhook_type)
        except ValueError as e:
            raise MalformedInputError(
                f"Unknown webhook type {webhook_type!r}", field="type"
            ) from e
        return self

    def append_url(self, url: str) -> Webhook:
        """Add a callback URL.

        Raises:
            MissingRequiredFieldError: If url is blank.
            InvalidOperationError: If three URLs are already present.
        """
        require_text(url, "url", "Url")

        if len(self._urls) >= MAX_URL_COUNT:
            raise InvalidOperationError(
                f"The webhook cannot have more than a maximum of {MAX_URL_COUNT} urls!"
            )

        self._urls.append(str(url).strip())
        return self

    def to_form_content(self) -> FormContent:
        """Render ``id`` followed by one ``url`` entry per URL.

        Raises:
            InvalidOperationError: If the type or every URL is missing.
        """
        if self._type is None:
            raise InvalidOperationError("Cannot create a webhook form content without a type!")

        if not self._urls:
            raise InvalidOperationError(
                "Cannot create a webhook form content without at least one url!"
            )

        return [("id", self.id)] + [("url", url) for url in self._urls]

    def to_json(self) -> JsonObject:
        return form_to_json(self.to_form_content())
