"""
Mock LLM Client for testing.

Provides configurable mock responses without making actual API calls.
"""

from typing import Optional, List, Dict, Callable, Any

from .base import BaseLLMClient, LLMResponse


class MockLLMClient(BaseLLMClient):
    """
    Mock LLM client for testing.

    Can be configured with:
    - Static responses
    - Response sequences
    - Custom response functions
    - Error simulation
    - A missing credential
    """

    def __init__(
        self,
        default_response: str = "This is a mock response.",
        provider_name: str = "mock",
        configured: bool = True,
    ):
        """
        Initialize the mock client.

        Args:
            default_response: Default response when no specific response is set
            provider_name: Identifier reported to the provider chain
            configured: Whether the client pretends to have a credential
        """
        self.default_response = default_response
        self._provider_name = provider_name
        self._configured = configured

        self._responses: List[str] = []
        self._response_index = 0
        self._response_function: Optional[Callable[[str], str]] = None
        self._error_message: Optional[str] = None
        self._exception: Optional[Exception] = None

        # Call tracking
        self.calls: List[Dict[str, Any]] = []

    @property
    def provider_name(self) -> str:
        return self._provider_name

    @property
    def model_id(self) -> str:
        return "mock-model"

    @property
    def is_configured(self) -> bool:
        return self._configured

    def set_responses(self, responses: List[str]) -> None:
        """
        Set a sequence of responses to return.

        Responses are returned in order, then cycle back to the beginning.
        """
        self._responses = responses
        self._response_index = 0

    def set_response_function(self, func: Callable[[str], str]) -> None:
        """Set a function that receives the prompt and returns the response."""
        self._response_function = func

    def set_error(self, message: str) -> None:
        """Make every call return an error response."""
        self._error_message = message

    def set_exception(self, exc: Exception) -> None:
        """Make every call raise, simulating a defect inside a client."""
        self._exception = exc

    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> LLMResponse:
        """Return the configured mock response or simulated error."""
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "kwargs": kwargs,
        })

        if self._exception is not None:
            raise self._exception

        if self._error_message is not None:
            return LLMResponse.error(self._error_message)

        if self._response_function:
            content = self._response_function(prompt)
        elif self._responses:
            content = self._responses[self._response_index % len(self._responses)]
            self._response_index += 1
        else:
            content = self.default_response

        return LLMResponse(content=content, success=True, model_id=self.model_id)

    @property
    def last_call(self) -> Optional[Dict[str, Any]]:
        """Get the most recent call."""
        return self.calls[-1] if self.calls else None

    @property
    def call_count(self) -> int:
        """Get total number of calls."""
        return len(self.calls)
