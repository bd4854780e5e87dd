"""
Structured logging setup.

Application modules log through `structlog.get_logger(__name__)` with
key/value context; the output is rendered once here and handed to the
standard `logging` module so third-party loggers share the same sink.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import Any

import structlog

from naijastack.core.config.logging_config import LoggingConfig

logger = structlog.get_logger(__name__)

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
]


def configure_logging(settings: LoggingConfig) -> None:
    """Configure stdlib logging and structlog from the logging settings."""
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    if settings.format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


@asynccontextmanager
async def log_operation(operation: str, **context: Any) -> Any:  # AsyncGenerator[None, None]
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.

    Example:
        async with log_operation("paystack_verify_transaction", reference=reference):
            result = await client.verify_transaction(reference)
    """
    start_time = time.monotonic()
    logger.debug(f"{operation}_started", **context)

    try:
        yield
    except Exception as e:
        latency_ms = int((time.monotonic() - start_time) * 1000)
        logger.warning(f"{operation}_failed", error=str(e), latency_ms=latency_ms, **context)
        raise
    else:
        latency_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(f"{operation}_completed", latency_ms=latency_ms, **context)
