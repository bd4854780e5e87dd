from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PlanInterval = Literal["daily", "weekly", "monthly", "quarterly", "biannually", "annually"]


class PaystackCustomer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str
    customer_code: str | None = None


class PaymentInitialization(BaseModel):
    """`data` of a successful transaction/initialize call."""

    model_config = ConfigDict(extra="ignore")

    authorization_url: str
    access_code: str
    reference: str


class TransactionVerification(BaseModel):
    """`data` of a transaction/verify call."""

    model_config = ConfigDict(extra="ignore")

    status: str = Field(..., description="success, failed, abandoned, ...")
    reference: str
    amount: int = Field(..., description="Amount in kobo")
    currency: str
    customer: PaystackCustomer
    paid_at: str | None = None


class SubscriptionPlan(BaseModel):
    """`data` of a plan creation call."""

    model_config = ConfigDict(extra="allow")

    name: str
    amount: int
    interval: str
    plan_code: str
    description: str | None = None


class PaystackEnvelope(BaseModel):
    """Every Paystack API response is wrapped as {status, message, data}."""

    model_config = ConfigDict(extra="ignore")

    status: bool
    message: str = ""
    data: Any = None
