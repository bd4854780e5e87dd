from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from naijastack import __version__
from naijastack.agents.support_agent import SupportAgent
from naijastack.api.errors import upstream_error_handler
from naijastack.api.payments import router as payments_api_router
from naijastack.api.support import router as support_api_router
from naijastack.core.config import Config
from naijastack.core.errors import UpstreamAPIError
from naijastack.core.utils.logging import configure_logging
from naijastack.integrations.paystack import PaystackClient
from naijastack.webhooks.dispatcher import WebhookDispatcher
from naijastack.webhooks.handlers import default_handlers
from naijastack.webhooks.router import router as webhook_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown logic."""
    config: Config = app.state.config
    try:
        config.validate()
    except ValueError as e:
        if config.environment == "production":
            raise
        logger.warning("configuration_incomplete", error=str(e), environment=config.environment)

    logger.info(
        "naijastack_starting",
        environment=config.environment,
        handlers=[event_type.value for event_type in app.state.dispatcher.handlers],
    )
    yield
    logger.info("naijastack_shutting_down")


def create_app(config: Config | None = None) -> FastAPI:
    """
    Build the application.

    The configuration is read once here and every long-lived component is
    constructed from it and stored on `app.state`.
    """
    config = config or Config.from_env()
    configure_logging(config.logging)

    app = FastAPI(
        title="NaijaStack",
        description="Paystack payments, webhooks and AI customer support.",
        version=__version__,
        debug=config.debug,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.dispatcher = WebhookDispatcher(default_handlers(), handler_timeout=config.webhook.handler_timeout)
    app.state.paystack = PaystackClient(config.paystack)
    app.state.support_agent = SupportAgent(config.ai, config.app)

    # --- CORS Configuration ---

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=config.cors.headers,
    )

    # --- Error Mapping ---

    app.add_exception_handler(UpstreamAPIError, upstream_error_handler)

    # --- Include Routers ---

    app.include_router(webhook_router, prefix="/webhooks", tags=["Paystack Webhooks"])
    app.include_router(payments_api_router, prefix="/api/v1/payments", tags=["Payments API"])
    app.include_router(support_api_router, prefix="/api/v1/support", tags=["Support API"])

    # --- Root Endpoint ---

    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the service is running."""
        return {"status": "ok", "message": "NaijaStack is running.", "version": __version__}

    return app


app = create_app()
