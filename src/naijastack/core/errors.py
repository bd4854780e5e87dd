"""
Core error classes for the NaijaStack application.
"""


class NaijaStackError(Exception):
    """Base class for all application errors."""

    pass


class MissingSignatureError(NaijaStackError):
    """Raised when a webhook request carries no signature header."""

    pass


class InvalidSignatureError(NaijaStackError):
    """Raised when a webhook signature does not match the payload."""

    pass


class MalformedPayloadError(NaijaStackError):
    """Raised when an authenticated webhook body is not a valid event envelope."""

    pass


class HandlerFailure(NaijaStackError):
    """Raised by an event handler that could not process its event."""

    def __init__(self, event: str, message: str) -> None:
        self.event = event
        super().__init__(f"{event}: {message}")


class UpstreamAPIError(NaijaStackError):
    """Raised when an outbound call to a third-party API does not succeed."""

    provider = "upstream"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(f"{self.provider} API error ({status_code}): {message}")


class PaystackAPIError(UpstreamAPIError):
    """Raised when the Paystack API returns an error or an unexpected response."""

    provider = "paystack"


class CompletionAPIError(UpstreamAPIError):
    """Raised when the chat completion provider fails."""

    provider = "completion"
