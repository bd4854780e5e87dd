from naijastack.integrations.paystack.client import PaystackClient
from naijastack.integrations.paystack.schemas import (
    PaymentInitialization,
    PaystackCustomer,
    PlanInterval,
    SubscriptionPlan,
    TransactionVerification,
)

__all__ = [
    "PaymentInitialization",
    "PaystackClient",
    "PaystackCustomer",
    "PlanInterval",
    "SubscriptionPlan",
    "TransactionVerification",
]
