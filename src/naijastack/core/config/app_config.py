"""
Application-level configuration.
"""

from dataclasses import dataclass


@dataclass
class AppConfig:
    """Public identity of the deployed application."""

    name: str = "naijastack-ai"
    base_url: str = "http://localhost:8000"
    support_email: str = "support@naijastack.ai"

    @property
    def payment_callback_url(self) -> str:
        """Where Paystack sends the customer after checkout."""
        return f"{self.base_url.rstrip('/')}/payment/callback"
