"""Clients module for the Mailgun client.

Contains the HTTP transport for the Mailgun REST API.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from mailgun_client.clients.mailgun import MailgunClient

__all__ = ["MailgunClient"]
