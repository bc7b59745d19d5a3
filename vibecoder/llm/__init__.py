"""
LLM module - Abstractions for remote text-generation providers.

Provides a unified interface for:
- Hugging Face Inference API
- OpenAI chat completions
- Mock (for testing)
"""

from .base import (
    BaseLLMClient,
    LLMResponse,
)
from .huggingface_client import HuggingFaceClient
from .openai_client import OpenAIClient
from .mock_client import MockLLMClient

__all__ = [
    # Base classes
    'BaseLLMClient',
    'LLMResponse',
    # Implementations
    'HuggingFaceClient',
    'OpenAIClient',
    'MockLLMClient',
    'create_client',
]


def create_client(provider: str = "huggingface", **kwargs) -> BaseLLMClient:
    """
    Factory function to create an LLM client.

    Args:
        provider: Provider name ("huggingface", "openai", "mock")
        **kwargs: Provider-specific configuration

    Returns:
        Configured LLM client instance

    Raises:
        ValueError: If provider is not supported
    """
    providers = {
        "huggingface": HuggingFaceClient,
        "openai": OpenAIClient,
        "mock": MockLLMClient,
    }

    if provider not in providers:
        raise ValueError(f"Unsupported provider: {provider}. Available: {list(providers.keys())}")

    return providers[provider](**kwargs)
