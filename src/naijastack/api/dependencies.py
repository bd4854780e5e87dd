"""
FastAPI dependencies.

Everything is built once by the application factory and kept on
`app.state`; these functions hand it to routes and can be overridden in tests.
"""

from fastapi import Request

from naijastack.agents.support_agent import SupportAgent
from naijastack.core.config import Config
from naijastack.integrations.paystack import PaystackClient
from naijastack.webhooks.dispatcher import WebhookDispatcher


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_dispatcher(request: Request) -> WebhookDispatcher:
    return request.app.state.dispatcher


def get_paystack_client(request: Request) -> PaystackClient:
    return request.app.state.paystack


def get_support_agent(request: Request) -> SupportAgent:
    return request.app.state.support_agent
