"""
Paystack event handlers and the default handler table.
"""

from naijastack.core.models import EventType
from naijastack.webhooks.handlers.base import EventHandler
from naijastack.webhooks.handlers.charge import ChargeSuccessEventHandler
from naijastack.webhooks.handlers.invoice import InvoiceCreatedEventHandler
from naijastack.webhooks.handlers.subscription import (
    SubscriptionCancelledEventHandler,
    SubscriptionCreatedEventHandler,
)
from naijastack.webhooks.handlers.transfer import TransferFailedEventHandler, TransferSuccessEventHandler


def default_handlers() -> dict[EventType, EventHandler]:
    """One handler instance per supported event type."""
    handlers: list[EventHandler] = [
        ChargeSuccessEventHandler(),
        SubscriptionCreatedEventHandler(),
        SubscriptionCancelledEventHandler(),
        InvoiceCreatedEventHandler(),
        TransferSuccessEventHandler(),
        TransferFailedEventHandler(),
    ]
    return {handler.event_type: handler for handler in handlers}


__all__ = [
    "ChargeSuccessEventHandler",
    "EventHandler",
    "InvoiceCreatedEventHandler",
    "SubscriptionCancelledEventHandler",
    "SubscriptionCreatedEventHandler",
    "TransferFailedEventHandler",
    "TransferSuccessEventHandler",
    "default_handlers",
]
