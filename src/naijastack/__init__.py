"""NaijaStack: Paystack webhooks, payments and AI customer support."""

__version__ = "0.1.0"
