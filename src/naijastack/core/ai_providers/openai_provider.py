"""
OpenAI AI Provider implementation.
"""

from typing import Any

from langchain_openai import ChatOpenAI

from .base import BaseAIProvider


class OpenAIProvider(BaseAIProvider):
    """OpenAI AI Provider."""

    def get_chat_model(self) -> Any:
        """Get OpenAI chat model."""
        return ChatOpenAI(model=self.model, max_tokens=self.max_tokens, temperature=self.temperature, **self.kwargs)

    def get_provider_name(self) -> str:
        """Get provider name."""
        return "openai"
