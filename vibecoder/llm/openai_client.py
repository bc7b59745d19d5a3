"""
OpenAI chat-completion client.
"""

from typing import Optional, Any

from openai import OpenAI, APIStatusError, OpenAIError

from .base import BaseLLMClient, LLMResponse
from ..core.config import OpenAIConfig
from ..utils.logger import get_logger

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that transforms short project ideas into "
    "concise project briefs with recommended tech stacks and features."
)


def extract_message_content(completion: Any) -> str:
    """First choice's message content, or an empty string if missing."""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


class OpenAIClient(BaseLLMClient):
    """
    Client for OpenAI chat completions.

    Only attempted when OPENAI_API_KEY is configured. SDK retries are
    disabled: a failed call falls through to the next step of the chain.
    """

    def __init__(
        self,
        config: Optional[OpenAIConfig] = None,
        client: Optional[OpenAI] = None,
    ):
        """
        Initialize the client.

        The SDK client is only built when a key is configured; the SDK
        refuses to construct without one.
        """
        self.config = config or OpenAIConfig()
        self.client = client
        if self.client is None and self.config.is_configured:
            self.client = OpenAI(
                api_key=self.config.api_key,
                timeout=self.config.timeout,
                max_retries=0,
            )

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model_id(self) -> str:
        return self.config.model

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> LLMResponse:
        """
        Run one chat completion.

        Args:
            prompt: User message
            system_prompt: System instruction (defaults to SYSTEM_PROMPT)
            **kwargs: temperature / max_tokens overrides

        Returns:
            LLMResponse with the message content or error
        """
        if not self.is_configured:
            return LLMResponse.error("OpenAI API key is not configured")

        try:
            logger.debug(f"Requesting chat completion from {self.model_id}")
            completion = self.client.chat.completions.create(
                model=self.model_id,
                messages=[
                    {"role": "system", "content": system_prompt or SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=kwargs.get("max_tokens", self.config.max_tokens),
                temperature=kwargs.get("temperature", self.config.temperature),
            )
        except APIStatusError as e:
            return LLMResponse.error(f"OpenAI error: {e.status_code} {e.response.text}")
        except OpenAIError as e:
            return LLMResponse.error(f"OpenAI error: {type(e).__name__}: {e}")

        return LLMResponse(
            content=extract_message_content(completion),
            success=True,
            model_id=self.model_id,
            raw_response=completion,
        )

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
