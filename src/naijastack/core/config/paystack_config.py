"""
Paystack configuration.
"""

from dataclasses import dataclass


@dataclass
class PaystackConfig:
    """Paystack API and webhook configuration."""

    secret_key: str
    base_url: str = "https://api.paystack.co"
    timeout: float = 30.0


@dataclass
class WebhookConfig:
    """Inbound webhook processing configuration."""

    handler_timeout: float = 10.0
