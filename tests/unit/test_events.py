"""Unit tests for event queries.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import logging
from datetime import timedelta

import pytest

from mailgun_client.core.exceptions import MissingRequiredFieldError, OutOfRangeError
from mailgun_client.models.enums import EventType, Severity
from mailgun_client.models.events import EventRequest, EventRequestBuilder


def _keys(query: str) -> list[str]:
    return [pair.split("=", 1)[0] for pair in query.lstrip("?").split("&")]


class TestEventQueryString:
    """Tests for EventRequest.to_query_string."""

    def test_default_is_limit_only(self):
        """Test an empty request renders only the limit."""
        assert EventRequest().to_query_string() == "?limit=300"

    def test_single_event_type(self):
        """Test one event type renders bare."""
        request = EventRequestBuilder().add_event_type(EventType.DELIVERED).build()

        assert request.to_query_string() == "?limit=300&event=delivered"

    def test_event_type_disjunction(self):
        """Test several event types render as a parenthesised disjunction."""
        request = (
            EventRequestBuilder()
            .add_event_type(EventType.CLICKED)
            .add_event_type(EventType.OPENED)
            .build()
        )

        assert request.to_query_string().endswith("&event=(clicked or opened)")

    def test_tag_disjunction(self):
        """Test tags follow the same single/multiple rule."""
        single = EventRequestBuilder().add_tag("welcome").build()
        multiple = EventRequestBuilder().add_tag("welcome").add_tag("promo").build()

        assert single.to_query_string() == "?limit=300&tags=welcome"
        assert multiple.to_query_string() == "?limit=300&tags=(welcome or promo)"

    def test_full_layout(self, fixed_now):
        """Test the order of every filter."""
        begin = fixed_now - timedelta(days=1)
        request = (
            EventRequestBuilder()
            .add_tag("welcome")
            .set_severity(Severity.PERMANENT)
            .add_event_type(EventType.FAILED)
            .set_subject("Hello World")
            .set_from("support@mg.example.com")
            .set_attachment_filename("report.pdf")
            .set_to("bob@example.com")
            .set_recipient("Bob <bob@example.com>")
            .set_message_id("20260301.1@mg.example.com")
            .set_message_size(1024)
            .set_pretty(False)
            .set_ascending(True)
            .set_end_time(fixed_now)
            .set_start_time(begin)
            .set_result_limit(50)
            .build()
        )

        query = request.to_query_string()

        assert _keys(query) == [
            "limit",
            "begin",
            "end",
            "ascending",
            "pretty",
            "size",
            "message-id",
            "recipient",
            "to",
            "attachment",
            "from",
            "subject",
            "event",
            "severity",
            "tags",
        ]
        assert query.startswith("?limit=50&")
        assert f"begin={int(begin.timestamp())}" in query
        assert f"end={int(fixed_now.timestamp())}" in query
        assert "ascending=yes" in query
        assert "pretty=no" in query
        assert "recipient=bob@example.com" in query
        assert "subject=Hello World" in query
        assert "event=failed" in query
        assert "severity=permanent" in query

    def test_reserved_characters_are_encoded(self):
        """Test separators inside values are percent-encoded."""
        request = EventRequestBuilder().set_subject("a&b=c").build()

        assert request.to_query_string() == "?limit=300&subject=a%26b%3Dc"

    def test_severity_without_failed_warns(self, caplog):
        """Test severity is still rendered but a warning is logged."""
        request = EventRequestBuilder().set_severity(Severity.TEMPORARY).build()

        with caplog.at_level(logging.WARNING, logger="mailgun_client.models.events"):
            query = request.to_query_string()

        assert query == "?limit=300&severity=temporary"
        assert "only applies to failed events" in caplog.text


class TestEventRequestBuilder:
    """Tests for builder validation."""

    @pytest.mark.parametrize("limit", [1, 150, 300])
    def test_valid_limit(self, limit):
        """Test limits between 1 and 300 are accepted."""
        assert EventRequestBuilder().set_result_limit(limit).build().limit == limit

    @pytest.mark.parametrize("limit", [0, -5, 301, 10_000])
    def test_invalid_limit(self, limit):
        """Test limits outside [1, 300] raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            EventRequestBuilder().set_result_limit(limit)

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size(self, size):
        """Test non-positive message sizes raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            EventRequestBuilder().set_message_size(size)

    @pytest.mark.parametrize(
        "setter",
        ["set_message_id", "set_subject", "set_attachment_filename", "set_recipient", "set_to", "set_from", "add_tag"],
    )
    def test_blank_text_filters(self, setter):
        """Test blank text filters raise MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError):
            getattr(EventRequestBuilder(), setter)(" ")

    def test_none_times(self):
        """Test None time bounds raise MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError):
            EventRequestBuilder().set_start_time(None)

    def test_event_types_are_unique(self):
        """Test repeated event types are kept once."""
        request = (
            EventRequestBuilder()
            .add_event_type(EventType.OPENED)
            .add_event_type("opened")
            .build()
        )

        assert request.event_types == [EventType.OPENED]
