from typing import Any

import structlog

from naijastack.core.models import EventType
from naijastack.webhooks.handlers.base import EventHandler

logger = structlog.get_logger(__name__)


class _TransferEventHandler(EventHandler):
    log_event: str

    async def handle(self, data: Any) -> dict[str, Any]:
        summary = {
            "transfer_code": self._require(data, "transfer_code"),
            "amount_naira": self._amount_naira(data),
            "recipient": data.get("recipient"),
        }
        logger.info(self.log_event, **summary)
        return summary


class TransferSuccessEventHandler(_TransferEventHandler):
    """Handler for transfer.success."""

    event_type = EventType.TRANSFER_SUCCESS
    log_event = "paystack_transfer_successful"


class TransferFailedEventHandler(_TransferEventHandler):
    """Handler for transfer.failed. Refunds and retries belong to a downstream worker."""

    event_type = EventType.TRANSFER_FAILED
    log_event = "paystack_transfer_failed"
