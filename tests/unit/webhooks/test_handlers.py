import pytest
from structlog.testing import capture_logs

from naijastack.core.errors import HandlerFailure
from naijastack.webhooks.handlers import (
    ChargeSuccessEventHandler,
    InvoiceCreatedEventHandler,
    SubscriptionCancelledEventHandler,
    SubscriptionCreatedEventHandler,
    TransferFailedEventHandler,
    TransferSuccessEventHandler,
)


@pytest.fixture
def charge_data() -> dict[str, object]:
    return {
        "reference": "T685312322670591",
        "amount": 1500000,
        "currency": "NGN",
        "customer": {"email": "ada@example.ng"},
        "metadata": {"plan": "pro"},
    }


class TestChargeSuccessEventHandler:
    @pytest.mark.asyncio
    async def test_records_payment(self, charge_data: dict[str, object]) -> None:
        with capture_logs() as logs:
            summary = await ChargeSuccessEventHandler().handle(charge_data)

        assert summary == {
            "reference": "T685312322670591",
            "amount_naira": "15000",
            "email": "ada@example.ng",
            "metadata": {"plan": "pro"},
        }
        assert logs[0]["event"] == "paystack_payment_successful"
        assert logs[0]["reference"] == "T685312322670591"

    @pytest.mark.asyncio
    async def test_missing_customer_email(self, charge_data: dict[str, object]) -> None:
        charge_data["customer"] = {}

        with pytest.raises(HandlerFailure, match="customer.email"):
            await ChargeSuccessEventHandler().handle(charge_data)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["1500000", 15000.5, True])
    async def test_non_integer_amount(self, charge_data: dict[str, object], amount: object) -> None:
        charge_data["amount"] = amount

        with pytest.raises(HandlerFailure, match="amount"):
            await ChargeSuccessEventHandler().handle(charge_data)

    @pytest.mark.asyncio
    async def test_non_object_data(self) -> None:
        with pytest.raises(HandlerFailure):
            await ChargeSuccessEventHandler().handle("not an object")

    @pytest.mark.asyncio
    async def test_is_repeatable(self, charge_data: dict[str, object]) -> None:
        """Paystack may deliver the same event twice; both runs must behave the same."""
        handler = ChargeSuccessEventHandler()

        assert await handler.handle(charge_data) == await handler.handle(charge_data)


class TestSubscriptionHandlers:
    @pytest.mark.asyncio
    async def test_subscription_created(self) -> None:
        data = {
            "subscription_code": "SUB_vsyqdmlzble3uii",
            "customer": {"email": "ada@example.ng"},
            "plan": {"name": "Pro", "plan_code": "PLN_gx2wn530m0i3w3m"},
        }

        summary = await SubscriptionCreatedEventHandler().handle(data)

        assert summary["plan"] == "Pro"
        assert summary["plan_code"] == "PLN_gx2wn530m0i3w3m"

    @pytest.mark.asyncio
    async def test_subscription_created_requires_plan(self) -> None:
        data = {"subscription_code": "SUB_1", "customer": {"email": "ada@example.ng"}}

        with pytest.raises(HandlerFailure, match="plan.name"):
            await SubscriptionCreatedEventHandler().handle(data)

    @pytest.mark.asyncio
    async def test_subscription_cancelled(self) -> None:
        data = {"subscription_code": "SUB_1", "customer": {"email": "a@b.com"}}

        with capture_logs() as logs:
            summary = await SubscriptionCancelledEventHandler().handle(data)

        assert summary == {"subscription_code": "SUB_1", "email": "a@b.com"}
        assert logs[0]["event"] == "paystack_subscription_cancelled"


class TestInvoiceCreatedEventHandler:
    @pytest.mark.asyncio
    async def test_invoice_created(self) -> None:
        data = {"invoice_code": "INV_1", "customer": {"email": "a@b.com"}, "amount": 500050}

        summary = await InvoiceCreatedEventHandler().handle(data)

        assert summary["amount_naira"] == "5000.5"


class TestTransferHandlers:
    @pytest.mark.asyncio
    async def test_transfer_success(self) -> None:
        data = {"transfer_code": "TRF_1", "amount": 20000, "recipient": {"name": "Chidi"}}

        with capture_logs() as logs:
            summary = await TransferSuccessEventHandler().handle(data)

        assert summary["amount_naira"] == "200"
        assert logs[0]["event"] == "paystack_transfer_successful"

    @pytest.mark.asyncio
    async def test_transfer_failed(self) -> None:
        data = {"transfer_code": "TRF_2", "amount": 20000}

        with capture_logs() as logs:
            summary = await TransferFailedEventHandler().handle(data)

        assert summary["recipient"] is None
        assert logs[0]["event"] == "paystack_transfer_failed"

    @pytest.mark.asyncio
    async def test_transfer_requires_code(self) -> None:
        with pytest.raises(HandlerFailure, match="transfer.failed"):
            await TransferFailedEventHandler().handle({"amount": 100})
