from typing import Any

import structlog

from naijastack.core.models import EventType
from naijastack.webhooks.handlers.base import EventHandler

logger = structlog.get_logger(__name__)


class SubscriptionCreatedEventHandler(EventHandler):
    """Handler for subscription.create."""

    event_type = EventType.SUBSCRIPTION_CREATE

    async def handle(self, data: Any) -> dict[str, Any]:
        summary = {
            "subscription_code": self._require(data, "subscription_code"),
            "email": self._require(data, "customer", "email"),
            "plan": self._require(data, "plan", "name"),
            "plan_code": data["plan"].get("plan_code"),
        }
        logger.info("paystack_subscription_created", **summary)
        return summary


class SubscriptionCancelledEventHandler(EventHandler):
    """Handler for subscription.disable."""

    event_type = EventType.SUBSCRIPTION_DISABLE

    async def handle(self, data: Any) -> dict[str, Any]:
        summary = {
            "subscription_code": self._require(data, "subscription_code"),
            "email": self._require(data, "customer", "email"),
        }
        logger.info("paystack_subscription_cancelled", **summary)
        return summary
