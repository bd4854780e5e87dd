from typing import Any, TypeVar
from urllib.parse import quote

import httpx
import structlog
from pydantic import BaseModel, ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from naijastack.core.config.paystack_config import PaystackConfig
from naijastack.core.errors import PaystackAPIError
from naijastack.core.utils.logging import log_operation
from naijastack.integrations.paystack.schemas import (
    PaymentInitialization,
    PaystackEnvelope,
    PlanInterval,
    SubscriptionPlan,
    TransactionVerification,
)

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class PaystackClient:
    """
    Async wrapper for the Paystack REST API.

    Every failure (HTTP error, `status: false`, unreachable host or an
    unexpected body) is raised as PaystackAPIError carrying the upstream
    status code. Amounts are always in kobo.
    """

    def __init__(self, settings: PaystackConfig):
        if not settings.secret_key:
            logger.warning("paystack_secret_key_not_configured")
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout
        self.headers = {
            "Authorization": f"Bearer {settings.secret_key}",
            "Content-Type": "application/json",
        }

    async def initialize_transaction(
        self,
        email: str,
        amount_kobo: int,
        plan: str | None = None,
        metadata: dict[str, Any] | None = None,
        callback_url: str | None = None,
    ) -> PaymentInitialization:
        """
        Start a checkout and get the URL to redirect the customer to.

        Example:
            payment = await client.initialize_transaction("customer@example.com", 50000)  # ₦500.00
            # Redirect the customer to payment.authorization_url
        """
        payload: dict[str, Any] = {"email": email, "amount": amount_kobo}
        if plan:
            payload["plan"] = plan
        if metadata is not None:
            payload["metadata"] = metadata
        if callback_url:
            payload["callback_url"] = callback_url

        async with log_operation("paystack_initialize_transaction", amount_kobo=amount_kobo, plan=plan):
            data, status_code = await self._request("POST", "transaction/initialize", payload)
            return self._parse(PaymentInitialization, data, status_code)

    async def verify_transaction(self, reference: str) -> TransactionVerification:
        """Fetch the settlement status of a transaction by its reference."""
        async with log_operation("paystack_verify_transaction", reference=reference):
            data, status_code = await self._request(
                "GET", f"transaction/verify/{quote(reference, safe='')}", idempotent=True
            )
            return self._parse(TransactionVerification, data, status_code)

    async def create_plan(
        self,
        name: str,
        amount_kobo: int,
        interval: PlanInterval,
        description: str | None = None,
    ) -> SubscriptionPlan:
        """Create a recurring subscription plan."""
        payload: dict[str, Any] = {"name": name, "amount": amount_kobo, "interval": interval}
        if description:
            payload["description"] = description

        async with log_operation("paystack_create_plan", plan=name, interval=interval):
            data, status_code = await self._request("POST", "plan", payload)
            return self._parse(SubscriptionPlan, data, status_code)

    async def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        *,
        idempotent: bool = False,
    ) -> tuple[Any, int]:
        send = self._send_with_retry if idempotent else self._send
        try:
            response = await send(method, path, payload)
        except httpx.TransportError as e:
            logger.error("paystack_api_unreachable", path=path, error=str(e))
            raise PaystackAPIError(f"Could not reach Paystack: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            message = body.get("message") if isinstance(body, dict) else None
            logger.error("paystack_api_error", path=path, status_code=response.status_code, message=message)
            raise PaystackAPIError(message or response.reason_phrase, status_code=response.status_code)

        try:
            envelope = PaystackEnvelope.model_validate(body)
        except ValidationError as e:
            logger.error("paystack_api_unexpected_response", path=path, status_code=response.status_code)
            raise PaystackAPIError("Unexpected response from Paystack", status_code=response.status_code) from e

        if not envelope.status:
            logger.error("paystack_api_rejected", path=path, status_code=response.status_code, message=envelope.message)
            raise PaystackAPIError(envelope.message or "Request was not successful", status_code=response.status_code)

        return envelope.data, response.status_code

    async def _send(self, method: str, path: str, payload: dict[str, Any] | None) -> httpx.Response:
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout) as client:
            return await client.request(method, path, headers=self.headers, json=payload)

    # Only safe for requests without side effects
    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        reraise=True,
    )
    async def _send_with_retry(self, method: str, path: str, payload: dict[str, Any] | None) -> httpx.Response:
        return await self._send(method, path, payload)

    @staticmethod
    def _parse(model: type[ModelT], data: Any, status_code: int) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error("paystack_api_unexpected_data", model=model.__name__, errors=e.error_count())
            raise PaystackAPIError(f"Unexpected {model.__name__} data from Paystack", status_code=status_code) from e
