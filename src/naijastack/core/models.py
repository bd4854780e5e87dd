from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class EventType(str, Enum):
    """Supported Paystack event types."""

    CHARGE_SUCCESS = "charge.success"
    SUBSCRIPTION_CREATE = "subscription.create"
    SUBSCRIPTION_DISABLE = "subscription.disable"
    INVOICE_CREATE = "invoice.create"
    TRANSFER_SUCCESS = "transfer.success"
    TRANSFER_FAILED = "transfer.failed"

    @classmethod
    def from_tag(cls, tag: str) -> "EventType | None":
        """Exact-match lookup; unknown tags map to None."""
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass(frozen=True)
class WebhookEnvelope:
    """
    The raw, unauthenticated form of an incoming webhook request.

    `payload` must be the exact bytes received; the signature is computed over
    them, so the body is never re-serialized before verification.
    """

    payload: bytes
    signature: str | None


class WebhookEvent(BaseModel):
    """
    An authenticated Paystack event.

    Only the two top-level fields are validated; the shape of `data` depends on
    the event type and is left to the handlers.
    """

    model_config = ConfigDict(frozen=True)

    event: str
    data: Any

    @property
    def event_type(self) -> EventType | None:
        """The recognized event type, or None for tags we do not handle."""
        return EventType.from_tag(self.event)

    @property
    def reference(self) -> str | None:
        """Best-effort provider reference for log correlation."""
        if not isinstance(self.data, dict):
            return None
        for key in ("reference", "subscription_code", "invoice_code", "transfer_code"):
            value = self.data.get(key)
            if value:
                return str(value)
        return None
