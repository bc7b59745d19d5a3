"""
Hugging Face Inference API client.

Sends the instruction to a hosted text-generation model and accepts the
handful of response shapes the inference API is known to return.
"""

from typing import Optional, Any

import httpx

from .base import BaseLLMClient, LLMResponse
from ..core.config import HuggingFaceConfig
from ..utils.logger import get_logger

logger = get_logger(__name__)


def extract_generated_text(payload: Any) -> str:
    """
    Pull the generated text out of an inference response.

    Accepted shapes:
    - [{"generated_text": "..."}] or ["..."]
    - {"generated_text": "..."}
    - "..."

    Returns an empty string for anything else.
    """
    if isinstance(payload, list):
        first = payload[0] if payload else None
        if isinstance(first, dict) and first.get("generated_text"):
            return first["generated_text"]
        if isinstance(first, str):
            return first
        return ""

    if isinstance(payload, dict):
        return payload.get("generated_text") or ""

    if isinstance(payload, str):
        return payload

    return ""


class HuggingFaceClient(BaseLLMClient):
    """
    Client for the Hugging Face Inference API.

    Authentication uses a bearer token (HUGGINGFACE_API_KEY). The client
    is only attempted when that token is configured.
    """

    def __init__(
        self,
        config: Optional[HuggingFaceConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Provider configuration (defaults read from environment)
            http_client: Optional preconfigured httpx client
        """
        self.config = config or HuggingFaceConfig()
        self.http_client = http_client or httpx.Client(timeout=self.config.timeout)

    @property
    def provider_name(self) -> str:
        return "huggingface"

    @property
    def model_id(self) -> str:
        return self.config.model

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/{self.config.model}"

    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> LLMResponse:
        """
        Run one inference call.

        The inference API has no separate system channel, so
        `system_prompt` is ignored.
        """
        if not self.is_configured:
            return LLMResponse.error("Hugging Face API key is not configured")

        payload = {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": kwargs.get("max_new_tokens", self.config.max_new_tokens),
            },
        }
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

        try:
            logger.debug(f"Invoking Hugging Face model {self.model_id}")
            response = self.http_client.post(self.endpoint, json=payload, headers=headers)
        except httpx.HTTPError as e:
            return LLMResponse.error(f"HuggingFace connection error: {type(e).__name__}: {e}")

        if not response.is_success:
            return LLMResponse.error(
                f"HuggingFace inference error: {response.status_code} {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:  # bad JSON or bad encoding
            return LLMResponse.error(f"Failed to parse HuggingFace response: {e}")

        if isinstance(data, dict) and not data.get("generated_text") and data.get("error"):
            return LLMResponse.error(f"HF error: {data['error']}")

        return LLMResponse(
            content=extract_generated_text(data),
            success=True,
            model_id=self.model_id,
            raw_response=data,
        )

    def close(self) -> None:
        self.http_client.close()
