import hashlib
import hmac

import pytest
from structlog.testing import capture_logs

from naijastack.core.errors import InvalidSignatureError, MalformedPayloadError, MissingSignatureError
from naijastack.core.models import EventType, WebhookEnvelope
from naijastack.webhooks.auth import (
    INVALID_SIGNATURE_DETAIL,
    compute_signature,
    is_valid_signature,
    open_envelope,
    verify_signature,
)

BODY = b'{"event":"charge.success","data":{"reference":"T123","amount":50000,"customer":{"email":"a@b.com"}}}'
SECRET = "sk_test_secret"


class TestComputeSignature:
    def test_matches_hmac_sha512_hexdigest(self) -> None:
        expected = hmac.new(SECRET.encode(), BODY, hashlib.sha512).hexdigest()
        assert compute_signature(BODY, SECRET) == expected
        assert len(compute_signature(BODY, SECRET)) == 128


class TestVerifySignature:
    @pytest.mark.parametrize("body", [b"", b"{}", BODY, "₦ naira".encode()])
    @pytest.mark.parametrize("secret", ["", "s", SECRET])
    def test_correct_signature_passes(self, body: bytes, secret: str) -> None:
        verify_signature(body, compute_signature(body, secret), secret)

    def test_tampered_body_fails(self) -> None:
        signature = compute_signature(BODY, SECRET)
        tampered = BODY.replace(b"50000", b"90000")

        with pytest.raises(InvalidSignatureError):
            verify_signature(tampered, signature, SECRET)

    def test_whitespace_change_fails(self) -> None:
        """The signature covers the exact bytes, so re-serialized JSON does not verify."""
        signature = compute_signature(BODY, SECRET)

        with pytest.raises(InvalidSignatureError):
            verify_signature(BODY.replace(b":", b": "), signature, SECRET)

    def test_wrong_secret_fails(self) -> None:
        with pytest.raises(InvalidSignatureError):
            verify_signature(BODY, compute_signature(BODY, "sk_test_other"), SECRET)

    @pytest.mark.parametrize("signature", [None, ""])
    def test_missing_signature(self, signature: str | None) -> None:
        with pytest.raises(MissingSignatureError):
            verify_signature(BODY, signature, SECRET)

    def test_prefix_of_digest_is_rejected(self) -> None:
        signature = compute_signature(BODY, SECRET)

        with pytest.raises(InvalidSignatureError):
            verify_signature(BODY, signature[:64], SECRET)

    def test_digest_with_trailing_data_is_rejected(self) -> None:
        signature = compute_signature(BODY, SECRET)

        with pytest.raises(InvalidSignatureError):
            verify_signature(BODY, signature + "00", SECRET)

    def test_uppercase_digest_is_rejected(self) -> None:
        with pytest.raises(InvalidSignatureError):
            verify_signature(BODY, compute_signature(BODY, SECRET).upper(), SECRET)

    def test_non_ascii_signature_is_rejected_not_crashing(self) -> None:
        with pytest.raises(InvalidSignatureError):
            verify_signature(BODY, "é" * 128, SECRET)

    def test_is_valid_signature(self) -> None:
        assert is_valid_signature(BODY, compute_signature(BODY, SECRET), SECRET) is True
        assert is_valid_signature(BODY, "deadbeef", SECRET) is False
        assert is_valid_signature(BODY, None, SECRET) is False


class TestOpenEnvelope:
    def test_returns_parsed_event(self) -> None:
        envelope = WebhookEnvelope(payload=BODY, signature=compute_signature(BODY, SECRET))

        event = open_envelope(envelope, SECRET)

        assert event.event == "charge.success"
        assert event.event_type is EventType.CHARGE_SUCCESS
        assert event.data["reference"] == "T123"

    def test_signature_checked_before_parsing(self) -> None:
        """An unsigned garbage body is an auth failure, not a payload failure."""
        envelope = WebhookEnvelope(payload=b"not json", signature="0" * 128)

        with pytest.raises(InvalidSignatureError):
            open_envelope(envelope, SECRET)

    def test_missing_signature(self) -> None:
        with pytest.raises(MissingSignatureError):
            open_envelope(WebhookEnvelope(payload=BODY, signature=None), SECRET)

    def test_unconfigured_secret_rejects_everything(self) -> None:
        envelope = WebhookEnvelope(payload=BODY, signature=compute_signature(BODY, ""))

        with capture_logs() as logs, pytest.raises(InvalidSignatureError) as exc_info:
            open_envelope(envelope, "")

        assert str(exc_info.value) == INVALID_SIGNATURE_DETAIL
        assert [log["event"] for log in logs] == ["paystack_secret_key_not_configured"]

    def test_unconfigured_secret_reads_like_a_bad_signature(self) -> None:
        envelope = WebhookEnvelope(payload=BODY, signature=compute_signature(BODY, "sk_test_other"))

        with pytest.raises(InvalidSignatureError) as unconfigured:
            open_envelope(envelope, "")
        with pytest.raises(InvalidSignatureError) as mismatched:
            open_envelope(envelope, SECRET)

        assert str(unconfigured.value) == str(mismatched.value)

    @pytest.mark.parametrize(
        "body",
        [
            b"not json",
            b"[]",
            b'{"event":"charge.success"}',
            b'{"data":{}}',
            b'{"event":42,"data":{}}',
        ],
    )
    def test_malformed_payload_after_verification(self, body: bytes) -> None:
        envelope = WebhookEnvelope(payload=body, signature=compute_signature(body, SECRET))

        with pytest.raises(MalformedPayloadError):
            open_envelope(envelope, SECRET)

    def test_data_substructure_is_not_validated(self) -> None:
        body = b'{"event":"foo.bar","data":"anything"}'
        envelope = WebhookEnvelope(payload=body, signature=compute_signature(body, SECRET))

        event = open_envelope(envelope, SECRET)

        assert event.event_type is None
        assert event.data == "anything"
