"""Pytest configuration and fixtures for Mailgun client tests.

Provides reusable fixtures for unit and integration tests including a
pinned clock, sample addresses, attachment files and an httpx mock
transport that records every request.

Author: Odiseo
Version: 1.0.0
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import httpx
import pytest

# Set test environment before importing application modules
os.environ.setdefault("LOG_TO_FILE", "false")

from mailgun_client.core.clock import FixedClock  # noqa: E402
from mailgun_client.models.address import EmailAddress  # noqa: E402

FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# Time Fixtures
# =============================================================================
@pytest.fixture
def fixed_now() -> datetime:
    """The instant reported by ``fixed_clock``."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Create a clock pinned to ``FIXED_NOW``."""
    return FixedClock(FIXED_NOW)


# =============================================================================
# Address Fixtures
# =============================================================================
@pytest.fixture
def sender() -> EmailAddress:
    """Create a sender address with a display name."""
    return EmailAddress(address="support@mg.example.com", display_name="Support")


@pytest.fixture
def recipient_addresses() -> list[str]:
    """Create three distinct recipient addresses."""
    return ["alice@example.com", "bob@example.com", "carol@example.com"]


# =============================================================================
# Attachment Fixtures
# =============================================================================
@pytest.fixture
def attachment_file(tmp_path: Path) -> Path:
    """Create a small file on disk to attach."""
    path = tmp_path / "invoice.pdf"
    path.write_bytes(b"%PDF-1.4 test invoice")
    return path


# =============================================================================
# HTTP Fixtures
# =============================================================================
@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by ``mock_transport``, in order."""
    return []


@pytest.fixture
def mock_transport(recorded_requests: list[httpx.Request]) -> httpx.MockTransport:
    """Create a transport that records requests and answers 200."""

    def handler(request: httpx.Request) -> httpx.Response:
        request.read()
        recorded_requests.append(request)
        return httpx.Response(200, json={"message": "Queued. Thank you."})

    return httpx.MockTransport(handler)


@pytest.fixture
def mailgun_client(mock_transport: httpx.MockTransport) -> Generator:
    """Create a MailgunClient wired to ``mock_transport``."""
    from mailgun_client.clients.mailgun import MailgunClient

    client = MailgunClient(
        api_key="key-test",
        domain="mg.example.com",
        base_url="https://api.mailgun.net/v3/",
        transport=mock_transport,
    )
    yield client
    client.close()
