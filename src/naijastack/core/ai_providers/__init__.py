"""
AI providers package.
"""

from .base import BaseAIProvider
from .factory import get_ai_provider, get_chat_model
from .openai_provider import OpenAIProvider

__all__ = [
    "BaseAIProvider",
    "OpenAIProvider",
    "get_ai_provider",
    "get_chat_model",
]
