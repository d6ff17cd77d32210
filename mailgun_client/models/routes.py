"""Inbound route builder: one filter expression plus ordered actions.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

import re
from typing import Any

from mailgun_client.core.encoders import require_text
from mailgun_client.core.exceptions import InvalidOperationError, OutOfRangeError
from mailgun_client.core.logger import get_logger
from mailgun_client.models.address import EmailAddress, coerce_address
from mailgun_client.models.payload import FormContent, JsonObject, form_to_json

logger = get_logger(__name__)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _pattern_text(pattern: Any, field: str) -> str:
    if isinstance(pattern, re.Pattern):
        pattern = pattern.pattern
    return require_text(pattern, field, "Pattern")


class Route:
    """A Mailgun route.

    The filter expression is set exactly once through ``match_header``,
    ``match_recipient`` or ``catch_all``. Actions accumulate in call order.
    Lower priority values are evaluated first.

    Builders are single-owner objects with no internal locking.

    Example:
        route = (
            Route()
            .set_priority(1)
            .match_recipient(r".*@example.com")
            .forward("https://example.com/inbound")
            .stop()
        )
    """

    def __init__(self) -> None:
        self._expression = ""
        self._actions: list[str] = []
        self._description = ""
        self._priority = 0

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def actions(self) -> tuple[str, ...]:
        return tuple(self._actions)

    @property
    def description(self) -> str:
        return self._description

    @property
    def priority(self) -> int:
        return self._priority

    def set_priority(self, priority: int) -> Route:
        """Set evaluation priority.

        Raises:
            OutOfRangeError: If priority is negative.
        """
        if priority < 0:
            raise OutOfRangeError(
                "Priority cannot have a value less than zero!", field="priority"
            )
        self._priority = priority
        return self

    def set_description(self, description: str) -> Route:
        self._description = require_text(description, "description", "Description")
        return self

    def _set_expression(self, expression: str) -> Route:
        if self._expression:
            raise InvalidOperationError(
                f"Expression can only be set once! Already set to {self._expression}"
            )
        self._expression = expression
        logger.debug(f"Route expression set: {expression}")
        return self

    def match_header(self, name: str, pattern: str | re.Pattern) -> Route:
        """Match messages whose header ``name`` matches ``pattern``.

        Raises:
            MissingRequiredFieldError: If name or pattern is blank.
            InvalidOperationError: If an expression is already set.
        """
        require_text(name, "name", "Header name")
        text = _pattern_text(pattern, "pattern")
        return self._set_expression(f"match_header({_quote(name)}, {_quote(text)})")

    def match_recipient(self, pattern: str | re.Pattern | EmailAddress) -> Route:
        """Match messages whose recipient matches ``pattern``.

        Raises:
            MissingRequiredFieldError: If pattern is blank.
            InvalidOperationError: If an expression is already set.
        """
        if isinstance(pattern, EmailAddress):
            text = pattern.address
        else:
            text = _pattern_text(pattern, "pattern")
        return self._set_expression(f"match_recipient({_quote(text)})")

    def catch_all(self) -> Route:
        """Match every message not matched by a higher priority route.

        Raises:
            InvalidOperationError: If an expression is already set.
        """
        return self._set_expression("catch_all()")

    def forward(self, target: str | EmailAddress) -> Route:
        """Forward to an http(s) URL or an email address.

        Raises:
            MissingRequiredFieldError: If target is blank.
            MalformedInputError: If target is neither a URL nor an address.
        """
        if isinstance(target, str) and target.strip().lower().startswith(("http://", "https://")):
            destination = target.strip()
        else:
            destination = coerce_address(target, field="target").address

        self._actions.append(f"forward({_quote(destination)})")
        return self

    def store(self, notify_url: str | None = None) -> Route:
        """Store the message, optionally notifying ``notify_url``."""
        if notify_url is None:
            self._actions.append("store()")
        else:
            url = require_text(notify_url, "notify_url", "Notify url").strip()
            self._actions.append(f"store(notify={_quote(url)})")
        return self

    def stop(self) -> Route:
        """Stop evaluating lower priority routes."""
        self._actions.append("stop()")
        return self

    def to_form_content(self) -> FormContent:
        """Render description, priority, expression and one action entry each.

        Raises:
            InvalidOperationError: If no expression or no action is set.
        """
        if not self._expression:
            raise InvalidOperationError("Unable to create route without an expression!")

        if not self._actions:
            raise InvalidOperationError("Unable to create route without any actions!")

        content = [
            ("description", self._description),
            ("priority", str(self._priority)),
            ("expression", self._expression),
        ]
        content.extend(("action", action) for action in self._actions)
        return content

    def to_json(self) -> JsonObject:
        return form_to_json(self.to_form_content())
