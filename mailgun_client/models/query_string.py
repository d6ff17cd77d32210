"""Query string accumulation for GET requests.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from mailgun_client.core.encoders import is_blank
from mailgun_client.core.exceptions import InvalidOperationError, MissingRequiredFieldError


class QueryStringBuilder:
    """Accumulates percent-encoded ``key=value`` pairs.

    The first pair is prefixed with ``prefix`` (``?`` by default), later
    pairs with ``&``. Blank keys or values are rejected, never skipped.

    Attributes:
        count: Number of pairs appended so far.
        safe: Characters left unescaped in keys and values.
    """

    def __init__(self, prefix: str = "?", safe: str = "") -> None:
        self._parts: list[str] = []
        self._prefix = prefix
        self.safe = safe

    @property
    def count(self) -> int:
        return len(self._parts)

    def __len__(self) -> int:
        return self.count

    def append(self, key: str, value: Any) -> QueryStringBuilder:
        """Append one pair.

        Non-string values are converted with ``str()``; booleans must be
        encoded by the caller.

        Raises:
            MissingRequiredFieldError: If key or value is blank.
        """
        if is_blank(key):
            raise MissingRequiredFieldError("Variable cannot be null or empty!", field="key")
        if is_blank(value):
            raise MissingRequiredFieldError(
                f"Value for {key!r} cannot be null or empty!", field=key
            )

        separator = self._prefix if not self._parts else "&"
        self._parts.append(
            f"{separator}{quote(key, safe=self.safe)}={quote(str(value), safe=self.safe)}"
        )
        return self

    def build(self) -> str:
        """Render the accumulated query string.

        Raises:
            InvalidOperationError: If nothing was appended.
        """
        if not self._parts:
            raise InvalidOperationError("Cannot build an empty query string!")
        return "".join(self._parts)

    def __str__(self) -> str:
        return "".join(self._parts)
