"""
Timeout utilities for async operations.
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any

logger = logging.getLogger(__name__)


async def execute_with_timeout(
    coro: Awaitable[Any],
    timeout: float = 30.0,
    timeout_message: str | None = None,
) -> Any:
    """
    Execute an awaitable with timeout handling.

    Args:
        coro: The coroutine to execute
        timeout: Timeout in seconds
        timeout_message: Custom message for timeout exception

    Returns:
        The result of the coroutine

    Raises:
        TimeoutError: If the operation times out

    Example:
        result = await execute_with_timeout(
            handler.handle(event.data),
            timeout=10.0
        )
    """
    try:
        return await asyncio.wait_for(coro, timeout=timeout)
    except TimeoutError as err:
        msg = timeout_message or f"Operation timed out after {timeout} seconds"
        logger.error(f"❌ {msg}")
        raise TimeoutError(msg) from err
