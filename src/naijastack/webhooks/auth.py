import hashlib
import hmac

import structlog
from fastapi import Request
from pydantic import ValidationError

from naijastack.core.errors import InvalidSignatureError, MalformedPayloadError, MissingSignatureError
from naijastack.core.models import WebhookEnvelope, WebhookEvent

logger = structlog.get_logger(__name__)

SIGNATURE_HEADER = "x-paystack-signature"
INVALID_SIGNATURE_DETAIL = "Invalid Paystack webhook signature."


def compute_signature(payload: bytes, secret: str) -> str:
    """Hex-encoded HMAC-SHA512 of the raw payload, keyed by the Paystack secret."""
    return hmac.new(secret.encode(), msg=payload, digestmod=hashlib.sha512).hexdigest()


def verify_signature(payload: bytes, signature: str | None, secret: str) -> None:
    """
    Verify a Paystack webhook signature.

    The whole digest is compared in constant time; there is no prefix matching.

    Raises:
        MissingSignatureError: If no signature was supplied.
        InvalidSignatureError: If the signature does not match the payload.
    """
    if not signature:
        raise MissingSignatureError(f"Missing {SIGNATURE_HEADER} header.")

    expected_signature = compute_signature(payload, secret)

    # Compare as bytes so a non-ASCII header cannot make compare_digest raise
    if not hmac.compare_digest(expected_signature.encode(), signature.encode()):
        raise InvalidSignatureError(INVALID_SIGNATURE_DETAIL)


def is_valid_signature(payload: bytes, signature: str | None, secret: str) -> bool:
    """Boolean form of `verify_signature` for callers that only need a yes/no."""
    try:
        verify_signature(payload, signature, secret)
    except (MissingSignatureError, InvalidSignatureError):
        return False
    return True


def open_envelope(envelope: WebhookEnvelope, secret: str) -> WebhookEvent:
    """
    Authenticate an envelope and parse it into a WebhookEvent.

    This is the only place a WebhookEvent is built from request data, so a
    handler can never see a payload whose signature was not checked.

    Raises:
        MissingSignatureError: If the envelope carries no signature.
        InvalidSignatureError: If the secret is unset or the signature does not match.
            Both cases carry the same message.
        MalformedPayloadError: If the verified body is not an {"event", "data"} object.
    """
    if not secret:
        logger.error("paystack_secret_key_not_configured")
        raise InvalidSignatureError(INVALID_SIGNATURE_DETAIL)

    verify_signature(envelope.payload, envelope.signature, secret)
    logger.debug("paystack_webhook_signature_verified")

    try:
        return WebhookEvent.model_validate_json(envelope.payload)
    except ValidationError as e:
        raise MalformedPayloadError(f"Invalid webhook payload structure: {e.error_count()} error(s)") from e


async def read_envelope(request: Request) -> WebhookEnvelope:
    """
    FastAPI dependency that captures the raw body and signature header.

    The body is read as bytes and never re-serialized before verification.
    """
    payload = await request.body()
    return WebhookEnvelope(payload=payload, signature=request.headers.get(SIGNATURE_HEADER))
