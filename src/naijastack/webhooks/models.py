from enum import Enum

from pydantic import BaseModel, Field


class HandlerStatus(str, Enum):
    PROCESSED = "processed"
    SKIPPED = "skipped"
    FAILED = "failed"


class HandlerResult(BaseModel):
    """Outcome of dispatching one event. Dispatch never raises; it returns one of these."""

    status: HandlerStatus = Field(..., description="processed, skipped or failed")
    event: str = Field(..., description="Raw Paystack event tag")
    handler: str | None = Field(None, description="Handler class that ran, if any")
    detail: str | None = Field(None, description="Skip reason or error message")
    summary: dict | None = Field(None, description="What the handler recorded about the event")

    @property
    def ok(self) -> bool:
        return self.status is not HandlerStatus.FAILED


class WebhookAck(BaseModel):
    """Acknowledgement returned to Paystack for every authenticated delivery."""

    received: bool = True
