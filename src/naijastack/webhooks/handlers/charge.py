from typing import Any

import structlog

from naijastack.core.models import EventType
from naijastack.webhooks.handlers.base import EventHandler

logger = structlog.get_logger(__name__)


class ChargeSuccessEventHandler(EventHandler):
    """Handler for charge.success: a customer payment settled."""

    event_type = EventType.CHARGE_SUCCESS

    async def handle(self, data: Any) -> dict[str, Any]:
        summary = {
            "reference": self._require(data, "reference"),
            "amount_naira": self._amount_naira(data),
            "email": self._require(data, "customer", "email"),
            "metadata": data.get("metadata"),
        }
        logger.info("paystack_payment_successful", **summary)
        return summary
