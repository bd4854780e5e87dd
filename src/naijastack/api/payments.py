import re
from datetime import UTC, datetime
from typing import Any

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from naijastack.api.dependencies import get_config, get_paystack_client
from naijastack.core.config import Config
from naijastack.integrations.paystack import PaystackClient, PlanInterval, SubscriptionPlan

logger = structlog.get_logger(__name__)
router = APIRouter()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class InitializePaymentRequest(BaseModel):
    email: str
    amount: int = Field(..., gt=0, description="Amount in kobo")
    plan: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email format")
        return value


class InitializePaymentResponse(BaseModel):
    success: bool = True
    authorization_url: str
    access_code: str
    reference: str


class CustomerSummary(BaseModel):
    email: str


class VerifyPaymentResponse(BaseModel):
    success: bool = True
    status: str
    reference: str
    amount: int
    currency: str
    customer: CustomerSummary
    paid_at: str | None = None


class CreatePlanRequest(BaseModel):
    name: str = Field(..., min_length=1)
    amount: int = Field(..., gt=0, description="Amount in kobo per interval")
    interval: PlanInterval
    description: str | None = None


@router.post("/initialize", response_model=InitializePaymentResponse)
async def initialize_payment(
    body: InitializePaymentRequest,
    config: Config = Depends(get_config),
    paystack: PaystackClient = Depends(get_paystack_client),
) -> InitializePaymentResponse:
    """Start a Paystack checkout and return the URL to redirect the customer to."""
    metadata = {
        **body.metadata,
        "initiated_at": datetime.now(UTC).isoformat(),
        "source": config.app.name,
    }
    payment = await paystack.initialize_transaction(
        email=body.email,
        amount_kobo=body.amount,
        plan=body.plan,
        metadata=metadata,
        callback_url=config.app.payment_callback_url,
    )
    logger.info("payment_initialized", reference=payment.reference, amount_kobo=body.amount, plan=body.plan)
    return InitializePaymentResponse(
        authorization_url=payment.authorization_url,
        access_code=payment.access_code,
        reference=payment.reference,
    )


@router.get("/verify/{reference}", response_model=VerifyPaymentResponse)
async def verify_payment(
    reference: str,
    paystack: PaystackClient = Depends(get_paystack_client),
) -> VerifyPaymentResponse:
    """Look up the settlement status of a transaction."""
    verification = await paystack.verify_transaction(reference)
    return VerifyPaymentResponse(
        status=verification.status,
        reference=verification.reference,
        amount=verification.amount,
        currency=verification.currency,
        customer=CustomerSummary(email=verification.customer.email),
        paid_at=verification.paid_at,
    )


@router.post("/plans", response_model=SubscriptionPlan)
async def create_plan(
    body: CreatePlanRequest,
    paystack: PaystackClient = Depends(get_paystack_client),
) -> SubscriptionPlan:
    """Create a recurring subscription plan on Paystack."""
    return await paystack.create_plan(
        name=body.name,
        amount_kobo=body.amount,
        interval=body.interval,
        description=body.description,
    )
