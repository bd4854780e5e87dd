from collections.abc import Mapping
from types import MappingProxyType

import structlog

from naijastack.core.errors import HandlerFailure
from naijastack.core.models import EventType, WebhookEvent
from naijastack.core.utils.timeout import execute_with_timeout
from naijastack.webhooks.handlers.base import EventHandler
from naijastack.webhooks.models import HandlerResult, HandlerStatus

logger = structlog.get_logger(__name__)


class WebhookDispatcher:
    """
    Dispatches verified webhook events to EventHandler instances.

    The handler table is fixed when the dispatcher is built. dispatch() never
    raises: every outcome, including handler errors and timeouts, comes back
    as a HandlerResult.
    """

    def __init__(self, handlers: Mapping[EventType, EventHandler], handler_timeout: float = 10.0):
        """
        Args:
            handlers: Mapping from event type to the handler instance for it.
            handler_timeout: Seconds a handler may run before it is abandoned.
        """
        self._handlers: Mapping[EventType, EventHandler] = MappingProxyType(dict(handlers))
        self.handler_timeout = handler_timeout
        for event_type, handler in self._handlers.items():
            logger.debug("webhook_handler_registered", paystack_event=event_type.value, handler=type(handler).__name__)

    @property
    def handlers(self) -> Mapping[EventType, EventHandler]:
        """Read-only view of the handler table."""
        return self._handlers

    async def dispatch(self, event: WebhookEvent) -> HandlerResult:
        """
        Run the handler registered for the event's type.

        Args:
            event: The verified WebhookEvent.

        Returns:
            processed, skipped (no handler for the tag) or failed.
        """
        event_type = event.event_type
        handler = self._handlers.get(event_type) if event_type is not None else None

        if handler is None:
            logger.info("paystack_webhook_unhandled", paystack_event=event.event)
            return HandlerResult(
                status=HandlerStatus.SKIPPED,
                event=event.event,
                detail=f"No handler for event type '{event.event}'",
            )

        handler_name = type(handler).__name__
        try:
            summary = await execute_with_timeout(
                handler.handle(event.data),
                timeout=self.handler_timeout,
                timeout_message=f"{handler_name} timed out after {self.handler_timeout}s",
            )
        except HandlerFailure as e:
            logger.error(
                "paystack_webhook_handler_failed",
                paystack_event=event.event,
                handler=handler_name,
                reference=event.reference,
                error=str(e),
            )
            return HandlerResult(status=HandlerStatus.FAILED, event=event.event, handler=handler_name, detail=str(e))
        except Exception as e:
            logger.exception(
                "paystack_webhook_handler_error",
                paystack_event=event.event,
                handler=handler_name,
                reference=event.reference,
            )
            return HandlerResult(
                status=HandlerStatus.FAILED,
                event=event.event,
                handler=handler_name,
                detail=f"{type(e).__name__}: {e}",
            )

        return HandlerResult(
            status=HandlerStatus.PROCESSED,
            event=event.event,
            handler=handler_name,
            summary=summary if isinstance(summary, dict) else None,
        )
