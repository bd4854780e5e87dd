"""
Logging configuration.
"""

from dataclasses import dataclass


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    # "console" for human-readable output, "json" for log shippers
    format: str = "console"
