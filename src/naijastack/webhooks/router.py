import structlog
from fastapi import APIRouter, Depends, HTTPException

from naijastack.api.dependencies import get_config, get_dispatcher
from naijastack.core.config import Config
from naijastack.core.errors import InvalidSignatureError, MalformedPayloadError, MissingSignatureError
from naijastack.core.models import WebhookEnvelope
from naijastack.webhooks.auth import open_envelope, read_envelope
from naijastack.webhooks.dispatcher import WebhookDispatcher
from naijastack.webhooks.models import HandlerStatus, WebhookAck

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/paystack", response_model=WebhookAck, summary="Endpoint for all Paystack webhooks")
async def paystack_webhook_endpoint(
    envelope: WebhookEnvelope = Depends(read_envelope),
    config: Config = Depends(get_config),
    dispatcher: WebhookDispatcher = Depends(get_dispatcher),
) -> WebhookAck:
    """
    This endpoint receives all events from Paystack.

    - It verifies the HMAC-SHA512 signature over the raw body.
    - It parses the verified body into a WebhookEvent.
    - It dispatches the event to its handler.

    Only authentication failures produce an error status. Once a request is
    authenticated it is always acknowledged, because Paystack redelivers on
    any non-2xx response and a downstream bug must not cause a retry storm.
    """
    try:
        event = open_envelope(envelope, config.paystack.secret_key)
    except MissingSignatureError as e:
        logger.warning("paystack_webhook_missing_signature")
        raise HTTPException(status_code=400, detail=str(e)) from e
    except InvalidSignatureError as e:
        provided = (envelope.signature or "")[:8]
        logger.warning("paystack_webhook_invalid_signature", provided_sig=f"{provided}...")
        raise HTTPException(status_code=401, detail=str(e)) from e
    except MalformedPayloadError as e:
        logger.error("paystack_webhook_malformed_payload", error=str(e), payload_len=len(envelope.payload))
        return WebhookAck()

    logger.info("paystack_webhook_received", paystack_event=event.event, reference=event.reference)

    result = await dispatcher.dispatch(event)
    if result.status is HandlerStatus.FAILED:
        # Already logged by the dispatcher; acknowledged anyway
        logger.warning("paystack_webhook_acknowledged_after_failure", paystack_event=event.event, detail=result.detail)
    else:
        logger.info("paystack_webhook_dispatched", paystack_event=event.event, status=result.status.value)

    return WebhookAck()
