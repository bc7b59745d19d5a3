"""
Abstract base class for LLM clients.

Defines the interface every remote provider implements so the provider
chain can try them one after another without knowing their wire format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Any


@dataclass
class LLMResponse:
    """Response from an LLM call."""
    content: str
    success: bool = True
    error_message: Optional[str] = None

    # Model info
    model_id: Optional[str] = None

    # Raw response for debugging
    raw_response: Optional[Any] = None

    @classmethod
    def error(cls, message: str) -> 'LLMResponse':
        """Create an error response."""
        return cls(content="", success=False, error_message=message)


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM clients.

    `generate` must never raise: transport and parsing problems are
    reported through `LLMResponse.error` so callers can fall through
    to the next provider.
    """

    @abstractmethod
    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> LLMResponse:
        """
        Generate a response from the LLM.

        Args:
            prompt: The user prompt/message
            system_prompt: Optional system instructions
            **kwargs: Additional provider-specific options

        Returns:
            LLMResponse with generated content or error
        """
        pass

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when the credential needed to call the provider is present."""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get the provider name (e.g., 'huggingface', 'openai')."""
        pass

    @property
    def model_id(self) -> str:
        """Get the configured model ID."""
        return "default"

    def close(self) -> None:
        """Release network resources held by the client."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model_id})"
