"""
Provider configuration.
"""

from dataclasses import dataclass

DEFAULT_MODELS = {
    "openai": "gpt-4",
}


@dataclass
class ProviderConfig:
    """Chat completion provider configuration."""

    api_key: str
    provider: str = "openai"
    model: str | None = None
    max_tokens: int = 500
    temperature: float = 0.7
    base_url: str | None = None

    def get_model_for_provider(self, provider: str | None = None) -> str:
        """Get the configured model, falling back to the provider default."""
        provider = (provider or self.provider).lower()
        return self.model or DEFAULT_MODELS.get(provider, "gpt-4")
