"""Unit tests for domain and credential requests.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from mailgun_client.core.exceptions import (
    MalformedInputError,
    MissingRequiredFieldError,
    OutOfRangeError,
)
from mailgun_client.models.domains import (
    DomainCredentialRequest,
    DomainRequest,
    validate_credential_password,
)
from mailgun_client.models.enums import SpamAction


class TestDomainRequest:
    """Tests for DomainRequest."""

    def test_form_content(self):
        """Test form content field order and encodings."""
        request = DomainRequest(
            name="mg.example.com",
            smtp_password="supersecret",
            spam_action=SpamAction.TAG,
            wildcard=True,
        )

        assert request.to_form_content() == [
            ("name", "mg.example.com"),
            ("smtp_password", "supersecret"),
            ("spam_action", "tag"),
            ("wildcard", "true"),
            ("force_dkim_authority", "false"),
        ]

    def test_json_matches_form_content(self):
        """Test JSON and form content carry the same information."""
        request = DomainRequest(name="mg.example.com", smtp_password="supersecret")

        assert request.to_json() == dict(request.to_form_content())

    def test_name_is_reduced_to_hostname(self):
        """Test URLs are reduced to the bare hostname."""
        request = DomainRequest(name="https://www.example.com/", smtp_password="supersecret")

        assert request.name == "example.com"

    def test_password_is_hidden_in_repr(self):
        """Test the SMTP password does not leak into repr()."""
        request = DomainRequest(name="mg.example.com", smtp_password="supersecret")

        assert "supersecret" not in repr(request)

    @pytest.mark.parametrize("name", [None, "", "  "])
    def test_blank_name(self, name):
        """Test blank domain names raise MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError):
            DomainRequest(name=name, smtp_password="supersecret")

    def test_malformed_name(self):
        """Test invalid domain names raise MalformedInputError."""
        with pytest.raises(MalformedInputError):
            DomainRequest(name="localhost", smtp_password="supersecret")

    @pytest.mark.parametrize("password", [None, "", " ", SecretStr("  ")])
    def test_blank_smtp_password(self, password):
        """Test blank SMTP passwords raise MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError):
            DomainRequest(name="mg.example.com", smtp_password=password)


class TestDomainCredentialRequest:
    """Tests for DomainCredentialRequest."""

    @pytest.mark.parametrize("length", [5, 6, 16, 31, 32])
    def test_valid_password_lengths(self, length):
        """Test passwords of 5 to 32 characters are accepted."""
        password = "p" * length
        credential = DomainCredentialRequest(username="alice", password=password)

        form = credential.to_form_content()
        data = credential.to_json()

        assert form == [("login", "alice"), ("password", password)]
        assert data == {"login": "alice", "password": password}

    @pytest.mark.parametrize("length", [1, 4, 33, 64])
    def test_invalid_password_lengths(self, length):
        """Test passwords outside [5, 32] raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError) as exc_info:
            DomainCredentialRequest(username="alice", password="p" * length)

        assert exc_info.value.field == "password"

    @pytest.mark.parametrize("username", [None, "", "   "])
    def test_blank_username(self, username):
        """Test blank usernames raise MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError):
            DomainCredentialRequest(username=username, password="secret")

    @pytest.mark.parametrize("password", [None, "", "      "])
    def test_blank_password(self, password):
        """Test blank passwords raise MissingRequiredFieldError, even when long enough."""
        with pytest.raises(MissingRequiredFieldError):
            DomainCredentialRequest(username="alice", password=password)


class TestValidateCredentialPassword:
    """Tests for the shared password rule."""

    def test_unwraps_secret_str(self):
        """Test SecretStr values are unwrapped."""
        assert validate_credential_password(SecretStr("abcde")) == "abcde"

    def test_non_string(self):
        """Test non-string passwords raise MalformedInputError."""
        with pytest.raises(MalformedInputError):
            validate_credential_password(123456)

    def test_custom_field_name(self):
        """Test the offending field is reported."""
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_credential_password("abc", field="new_password")

        assert exc_info.value.field == "new_password"
