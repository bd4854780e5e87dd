"""
Main configuration class that composes all configs.
"""

import json
import os

from dotenv import load_dotenv

from naijastack.core.config.app_config import AppConfig
from naijastack.core.config.cors_config import CORSConfig
from naijastack.core.config.logging_config import LoggingConfig
from naijastack.core.config.paystack_config import PaystackConfig, WebhookConfig
from naijastack.core.config.provider_config import ProviderConfig

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]
DEFAULT_CORS_HEADERS = ["*"]


def _json_list(raw: str | None, default: list[str]) -> list[str]:
    if not raw:
        return list(default)
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        # Fallback to default values if JSON parsing fails
        return list(default)
    if not isinstance(value, list):
        return list(default)
    return [str(item) for item in value]


class Config:
    """
    Main configuration class.

    Built once at process startup and handed to the components that need it.
    Nothing below the application factory reads the environment directly.
    """

    def __init__(
        self,
        paystack: PaystackConfig,
        ai: ProviderConfig,
        app: AppConfig | None = None,
        webhook: WebhookConfig | None = None,
        cors: CORSConfig | None = None,
        logging: LoggingConfig | None = None,
        debug: bool = False,
        environment: str = "development",
    ) -> None:
        self.paystack = paystack
        self.ai = ai
        self.app = app or AppConfig()
        self.webhook = webhook or WebhookConfig()
        self.cors = cors or CORSConfig(headers=list(DEFAULT_CORS_HEADERS), origins=list(DEFAULT_CORS_ORIGINS))
        self.logging = logging or LoggingConfig()
        self.debug = debug
        self.environment = environment

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Config":
        """Build a configuration from environment variables (and an optional .env file)."""
        load_dotenv(env_file)

        return cls(
            paystack=PaystackConfig(
                secret_key=os.getenv("PAYSTACK_SECRET_KEY", ""),
                base_url=os.getenv("PAYSTACK_BASE_URL", "https://api.paystack.co"),
                timeout=float(os.getenv("PAYSTACK_TIMEOUT", "30")),
            ),
            ai=ProviderConfig(
                api_key=os.getenv("OPENAI_API_KEY", ""),
                provider=os.getenv("AI_PROVIDER", "openai"),
                model=os.getenv("OPENAI_MODEL"),
                max_tokens=int(os.getenv("AI_MAX_TOKENS", "500")),
                temperature=float(os.getenv("AI_TEMPERATURE", "0.7")),
                base_url=os.getenv("OPENAI_BASE_URL"),
            ),
            app=AppConfig(
                name=os.getenv("APP_NAME", "naijastack-ai"),
                base_url=os.getenv("APP_BASE_URL", "http://localhost:8000"),
                support_email=os.getenv("SUPPORT_EMAIL", "support@naijastack.ai"),
            ),
            webhook=WebhookConfig(
                handler_timeout=float(os.getenv("WEBHOOK_HANDLER_TIMEOUT", "10")),
            ),
            cors=CORSConfig(
                headers=_json_list(os.getenv("CORS_HEADERS"), DEFAULT_CORS_HEADERS),
                origins=_json_list(os.getenv("CORS_ORIGINS"), DEFAULT_CORS_ORIGINS),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "console"),
            ),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            environment=os.getenv("ENVIRONMENT", "development"),
        )

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.paystack.secret_key:
            errors.append("PAYSTACK_SECRET_KEY is required")

        if self.ai.provider == "openai" and not self.ai.api_key:
            errors.append("OPENAI_API_KEY is required for OpenAI provider")

        if self.webhook.handler_timeout <= 0:
            errors.append("WEBHOOK_HANDLER_TIMEOUT must be positive")

        if self.logging.format not in ("console", "json"):
            errors.append("LOG_FORMAT must be 'console' or 'json'")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True
