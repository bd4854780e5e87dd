from abc import ABC, abstractmethod
from typing import Any, ClassVar

from naijastack.core.currency import kobo_to_naira
from naijastack.core.errors import HandlerFailure
from naijastack.core.models import EventType


class EventHandler(ABC):
    """
    Abstract base class for all Paystack event handlers.

    A handler performs the side effects for one event type. It reports a
    problem by raising HandlerFailure; the dispatcher turns that (or any other
    exception) into a failed HandlerResult, so nothing reaches the endpoint.
    Paystack delivers at least once, so handle() must be safe to run twice
    for the same event.
    """

    event_type: ClassVar[EventType]

    @abstractmethod
    async def handle(self, data: Any) -> dict[str, Any]:
        """
        Process the `data` object of a verified event.

        Args:
            data: The event-specific payload, exactly as Paystack sent it.

        Returns:
            A summary of what was recorded, used for logging.
        """
        pass

    def _require(self, data: Any, *path: str) -> Any:
        """Walk `path` into `data`, raising HandlerFailure if any step is missing."""
        value = data
        for key in path:
            if not isinstance(value, dict) or value.get(key) is None:
                raise HandlerFailure(self.event_type.value, f"missing field '{'.'.join(path)}'")
            value = value[key]
        return value

    def _amount_naira(self, data: Any) -> str:
        amount = self._require(data, "amount")
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise HandlerFailure(self.event_type.value, f"amount must be an integer number of kobo, got {amount!r}")
        return str(kobo_to_naira(amount))
