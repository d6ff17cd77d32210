"""Unit tests for bounce, complaint and unsubscribe requests.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from mailgun_client.core.exceptions import MalformedInputError, MissingRequiredFieldError
from mailgun_client.models.enums import SmtpErrorCode
from mailgun_client.models.suppressions import (
    BounceRequest,
    ComplaintRequest,
    UnsubscriberRequest,
)

FIXED_DATE = "Sun, 01 Mar 2026 12:00:00 GMT"


class TestBounceRequest:
    """Tests for BounceRequest."""

    def test_default_form_content(self, fixed_now):
        """Test defaults: code 450, no error entry."""
        bounce = BounceRequest(address="bob@example.com", created_at=fixed_now)

        assert bounce.to_form_content() == [
            ("address", "bob@example.com"),
            ("code", "450"),
            ("created_at", FIXED_DATE),
        ]

    def test_form_content_with_error(self, fixed_now):
        """Test the error text follows the code."""
        bounce = BounceRequest(
            address="Bob <bob@example.com>",
            code=SmtpErrorCode.USER_MAILBOX_UNAVAILABLE,
            error="Mailbox does not exist",
            created_at=fixed_now,
        )

        assert bounce.to_form_content() == [
            ("address", "bob@example.com"),
            ("code", "550"),
            ("error", "Mailbox does not exist"),
            ("created_at", FIXED_DATE),
        ]

    def test_json_matches_form_content(self, fixed_now):
        """Test JSON and form content carry the same information."""
        bounce = BounceRequest(address="bob@example.com", error="Full", created_at=fixed_now)

        assert bounce.to_json() == dict(bounce.to_form_content())

    def test_integer_code_is_accepted(self, fixed_now):
        """Test plain integers are coerced to SmtpErrorCode."""
        bounce = BounceRequest(address="bob@example.com", code=554, created_at=fixed_now)

        assert bounce.code is SmtpErrorCode.TRANSACTION_FAILED

    def test_created_at_defaults_to_now(self):
        """Test created_at defaults to the current UTC time."""
        bounce = BounceRequest(address="bob@example.com")

        assert bounce.created_at.tzinfo == timezone.utc
        assert abs(bounce.created_at - datetime.now(timezone.utc)) < timedelta(seconds=5)

    def test_naive_created_at_is_utc(self):
        """Test naive timestamps are taken as UTC."""
        bounce = BounceRequest(address="bob@example.com", created_at=datetime(2026, 3, 1, 12))

        assert bounce.to_form_content()[-1] == ("created_at", FIXED_DATE)

    def test_blank_address(self):
        """Test blank addresses raise MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError):
            BounceRequest(address="  ")

    def test_malformed_address(self):
        """Test invalid addresses raise MalformedInputError."""
        with pytest.raises(MalformedInputError):
            BounceRequest(address="not-an-address")


class TestComplaintRequest:
    """Tests for ComplaintRequest."""

    def test_form_content(self, fixed_now):
        """Test complaint form content."""
        complaint = ComplaintRequest(address="bob@example.com", created_at=fixed_now)

        assert complaint.to_form_content() == [
            ("address", "bob@example.com"),
            ("created_at", FIXED_DATE),
        ]
        assert complaint.to_json() == dict(complaint.to_form_content())


class TestUnsubscriberRequest:
    """Tests for UnsubscriberRequest."""

    def test_default_tag_is_wildcard(self, fixed_now):
        """Test the default tag unsubscribes from everything."""
        unsubscriber = UnsubscriberRequest(address="bob@example.com", created_at=fixed_now)

        assert unsubscriber.to_form_content() == [
            ("address", "bob@example.com"),
            ("tag", "*"),
            ("created_at", FIXED_DATE),
        ]

    def test_specific_tag(self, fixed_now):
        """Test a single tag is rendered."""
        unsubscriber = UnsubscriberRequest(
            address="bob@example.com", tag="newsletter", created_at=fixed_now
        )

        assert unsubscriber.to_json()["tag"] == "newsletter"
        assert unsubscriber.to_json() == dict(unsubscriber.to_form_content())

    @pytest.mark.parametrize("tag", [None, "", "  "])
    def test_blank_tag(self, tag):
        """Test blank tags raise MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError):
            UnsubscriberRequest(address="bob@example.com", tag=tag)
