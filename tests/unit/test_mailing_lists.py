"""Unit tests for mailing lists and members.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import json

import pytest

from mailgun_client.core.exceptions import MalformedInputError, MissingRequiredFieldError
from mailgun_client.models.enums import AccessLevel
from mailgun_client.models.mailing_lists import MailingList, Member


class TestMailingList:
    """Tests for MailingList."""

    def test_minimal_form_content(self):
        """Test optional name and description are left out."""
        mailing_list = MailingList(address="devs@mg.example.com")

        assert mailing_list.to_form_content() == [
            ("address", "devs@mg.example.com"),
            ("access_level", "readonly"),
        ]

    def test_full_form_content(self):
        """Test every field in order."""
        mailing_list = MailingList(
            address="devs@mg.example.com",
            name="Developers",
            description="Engineering announcements",
            access_level=AccessLevel.MEMBERS,
        )

        assert mailing_list.to_form_content() == [
            ("address", "devs@mg.example.com"),
            ("name", "Developers"),
            ("description", "Engineering announcements"),
            ("access_level", "members"),
        ]
        assert mailing_list.to_json() == dict(mailing_list.to_form_content())

    def test_blank_address(self):
        """Test blank addresses raise MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError):
            MailingList(address="")

    def test_malformed_address(self):
        """Test invalid addresses raise MalformedInputError."""
        with pytest.raises(MalformedInputError):
            MailingList(address="devs")


class TestMember:
    """Tests for Member."""

    def test_minimal_form_content(self):
        """Test flags default to no."""
        member = Member(address="bob@example.com")

        assert member.to_form_content() == [
            ("address", "bob@example.com"),
            ("subscribed", "no"),
            ("upsert", "no"),
        ]

    def test_full_form_content(self):
        """Test name, vars and flags."""
        member = Member(
            address="bob@example.com",
            name="Bob",
            vars={"age": 30, "plan": "pro"},
            subscribed=True,
            upsert=True,
        )

        form = member.to_form_content()

        assert [key for key, _ in form] == ["address", "name", "vars", "subscribed", "upsert"]
        assert json.loads(dict(form)["vars"]) == {"age": 30, "plan": "pro"}
        assert dict(form)["subscribed"] == "yes"
        assert member.to_json() == dict(form)

    def test_empty_vars_are_rendered(self):
        """Test an empty vars mapping is still sent."""
        member = Member(address="bob@example.com", vars={})

        assert ("vars", "{}") in member.to_form_content()
