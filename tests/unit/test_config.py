"""Unit tests for MailgunConfig.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mailgun_client.config import MailgunConfig
from mailgun_client.core.exceptions import MailgunConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove Mailgun settings inherited from the environment."""
    for name in ("MAILGUN_API_KEY", "MAILGUN_DOMAIN", "MAILGUN_BASE_URL", "MAILGUN_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Tests for default values."""

    def test_defaults(self):
        """Test defaults point at the US API root."""
        config = MailgunConfig(_env_file=None)

        assert config.MAILGUN_BASE_URL == "https://api.mailgun.net/v3/"
        assert config.MAILGUN_TIMEOUT == 30
        assert config.LOG_LEVEL == "INFO"

    def test_environment_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("MAILGUN_API_KEY", "key-env")
        monkeypatch.setenv("MAILGUN_DOMAIN", " mg.example.com ")
        monkeypatch.setenv("MAILGUN_TIMEOUT", "10")

        config = MailgunConfig(_env_file=None)

        assert config.MAILGUN_API_KEY == "key-env"
        assert config.MAILGUN_DOMAIN == "mg.example.com"
        assert config.MAILGUN_TIMEOUT == 10


class TestValidation:
    """Tests for field validation."""

    def test_base_url_gets_trailing_slash(self):
        """Test the base URL is normalized to one trailing slash."""
        config = MailgunConfig(_env_file=None, MAILGUN_BASE_URL="https://api.eu.mailgun.net/v3//")

        assert config.MAILGUN_BASE_URL == "https://api.eu.mailgun.net/v3/"

    def test_base_url_must_be_http(self):
        """Test non-http base URLs are rejected."""
        with pytest.raises(ValidationError):
            MailgunConfig(_env_file=None, MAILGUN_BASE_URL="ftp://api.mailgun.net")

    @pytest.mark.parametrize("timeout", [0, 301])
    def test_timeout_bounds(self, timeout):
        """Test timeouts outside 1..300 are rejected."""
        with pytest.raises(ValidationError):
            MailgunConfig(_env_file=None, MAILGUN_TIMEOUT=timeout)

    def test_log_level_pattern(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            MailgunConfig(_env_file=None, LOG_LEVEL="VERBOSE")


class TestClientConfig:
    """Tests for validate_client_config and get_client_config."""

    def test_missing_settings(self):
        """Test missing key and domain are both reported."""
        config = MailgunConfig(_env_file=None)

        with pytest.raises(MailgunConfigError) as exc_info:
            config.validate_client_config()

        assert "MAILGUN_API_KEY" in str(exc_info.value)
        assert "MAILGUN_DOMAIN" in str(exc_info.value)

    def test_complete_settings(self):
        """Test a complete configuration validates and exports."""
        config = MailgunConfig(
            _env_file=None,
            MAILGUN_API_KEY="key-test",
            MAILGUN_DOMAIN="mg.example.com",
        )

        config.validate_client_config()

        assert config.get_client_config() == {
            "api_key": "key-test",
            "domain": "mg.example.com",
            "base_url": "https://api.mailgun.net/v3/",
            "timeout": 30,
        }
