"""
Pytest configuration: put `src/` on sys.path and provide shared fixtures.
"""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from naijastack.core.config import AppConfig, Config, PaystackConfig, ProviderConfig, WebhookConfig  # noqa: E402
from naijastack.webhooks.auth import compute_signature  # noqa: E402

WEBHOOK_SECRET = "sk_test_3b1f9c2d8e7a6b5c4d3e2f1a"


@pytest.fixture
def webhook_secret() -> str:
    return WEBHOOK_SECRET


@pytest.fixture
def config() -> Config:
    """Configuration with test credentials; never read from the environment."""
    return Config(
        paystack=PaystackConfig(secret_key=WEBHOOK_SECRET, base_url="https://api.paystack.co", timeout=5.0),
        ai=ProviderConfig(api_key="sk-test-openai", model="gpt-4"),
        app=AppConfig(
            name="naijastack-ai",
            base_url="https://app.naijastack.test",
            support_email="help@naijastack.test",
        ),
        webhook=WebhookConfig(handler_timeout=1.0),
    )


@pytest.fixture
def sign() -> Callable[[bytes, str], str]:
    """Sign a raw body the way Paystack does."""

    def _sign(body: bytes, secret: str = WEBHOOK_SECRET) -> str:
        return compute_signature(body, secret)

    return _sign


@pytest.fixture
def encode() -> Callable[[dict], bytes]:
    """Serialize a payload to the exact bytes that will be signed and sent."""

    def _encode(payload: dict) -> bytes:
        return json.dumps(payload, separators=(",", ":")).encode()

    return _encode
