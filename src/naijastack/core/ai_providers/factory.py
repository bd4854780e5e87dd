"""
AI Provider Factory.

This module provides a factory function to create the appropriate
AI provider based on configuration.
"""

from typing import Any

from naijastack.core.config.provider_config import ProviderConfig

from .base import BaseAIProvider
from .openai_provider import OpenAIProvider


def get_ai_provider(
    settings: ProviderConfig,
    model: str | None = None,
    max_tokens: int | None = None,
    temperature: float | None = None,
) -> BaseAIProvider:
    """
    Get the appropriate AI provider based on configuration.

    Args:
        settings: Provider section of the application config
        model: Model name overriding the configured one
        max_tokens: Maximum tokens to generate
        temperature: Sampling temperature

    Returns:
        Configured AI provider instance
    """
    provider = (settings.provider or "openai").lower()
    model = model or settings.get_model_for_provider(provider)
    tokens = max_tokens if max_tokens is not None else settings.max_tokens
    temp = temperature if temperature is not None else settings.temperature

    if provider == "openai":
        provider_kwargs: dict[str, Any] = {"api_key": settings.api_key}
        if settings.base_url:
            provider_kwargs["base_url"] = settings.base_url
        return OpenAIProvider(model=model, max_tokens=tokens, temperature=temp, **provider_kwargs)

    raise ValueError(f"Unsupported AI provider: {provider}")


def get_chat_model(
    settings: ProviderConfig,
    model: str | None = None,
    max_tokens: int | None = None,
    temperature: float | None = None,
) -> Any:
    """
    Get a chat model instance using the appropriate provider.

    This is a convenience function that creates a provider and returns its chat model.
    """
    return get_ai_provider(settings, model=model, max_tokens=max_tokens, temperature=temperature).get_chat_model()
