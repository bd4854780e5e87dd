"""
Customer Support Agent Module.

Answers product, pricing and Paystack payment questions through a chat
completion model, and flags conversations that need a human.
"""

from naijastack.agents.support_agent.agent import SupportAgent
from naijastack.agents.support_agent.models import (
    ChatContext,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    SentimentRequest,
    SentimentResponse,
)

__all__ = [
    "ChatContext",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "SentimentRequest",
    "SentimentResponse",
    "SupportAgent",
]
