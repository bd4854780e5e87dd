from typing import Any

import structlog

from naijastack.core.models import EventType
from naijastack.webhooks.handlers.base import EventHandler

logger = structlog.get_logger(__name__)


class InvoiceCreatedEventHandler(EventHandler):
    """Handler for invoice.create."""

    event_type = EventType.INVOICE_CREATE

    async def handle(self, data: Any) -> dict[str, Any]:
        summary = {
            "invoice_code": self._require(data, "invoice_code"),
            "email": self._require(data, "customer", "email"),
            "amount_naira": self._amount_naira(data),
        }
        logger.info("paystack_invoice_created", **summary)
        return summary
