"""
Configuration package - unified access point.

This package provides all configuration classes. The composed `Config` is
built once by the application factory; there is no module-level instance.
"""

from naijastack.core.config.app_config import AppConfig
from naijastack.core.config.cors_config import CORSConfig
from naijastack.core.config.logging_config import LoggingConfig
from naijastack.core.config.paystack_config import PaystackConfig, WebhookConfig
from naijastack.core.config.provider_config import ProviderConfig
from naijastack.core.config.settings import Config

__all__ = [
    "AppConfig",
    "CORSConfig",
    "Config",
    "LoggingConfig",
    "PaystackConfig",
    "ProviderConfig",
    "WebhookConfig",
]
