"""Configuration module for the Mailgun client.

Loads and validates client settings from environment variables or .env file.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from mailgun_client.config.settings import MailgunConfig

__all__ = ["MailgunConfig"]
