"""
Provider Chain - Remote generation with ordered fallthrough.

Tries each configured provider in turn. The first usable answer wins;
failures are logged and never raised. When nothing is usable the chain
answers with a QuotaExceeded result instead of a brief.
"""

import dataclasses
from typing import List, Optional, Sequence, Union

from ..core.config import AppConfig
from ..llm.base import BaseLLMClient
from ..llm.huggingface_client import HuggingFaceClient
from ..llm.openai_client import OpenAIClient
from ..models import Brief, OutcomeStatus, ProviderOutcome, QuotaExceeded
from ..synthesizer import BriefSynthesizer
from ..utils.logger import get_logger, log_exception, provider_attempt
from ..utils.text import build_instruction

logger = get_logger(__name__)

ChainResult = Union[Brief, QuotaExceeded]


class ProviderChain:
    """
    Ordered list of provider attempts.

    Each step is independent: an unconfigured provider is skipped
    without a network call, a failing one is logged and skipped.
    Steps run strictly one after another and each provider is called
    at most once per idea.

    Classification (project type, features, stack) always comes from
    the local synthesizer; providers only contribute the brief text.
    """

    def __init__(
        self,
        clients: Sequence[BaseLLMClient],
        synthesizer: Optional[BriefSynthesizer] = None,
        local_fallback_on_failure: bool = False,
    ):
        """
        Initialize the chain.

        Args:
            clients: Providers in the order they are tried
            synthesizer: Local brief generator (default catalog if None)
            local_fallback_on_failure: Answer with the local brief, rather
                than QuotaExceeded, when configured providers all failed
        """
        self.clients = list(clients)
        self.synthesizer = synthesizer or BriefSynthesizer()
        self.local_fallback_on_failure = local_fallback_on_failure

    def attempt(self, client: BaseLLMClient, idea: str) -> ProviderOutcome:
        """
        Try a single provider.

        Returns:
            ProviderOutcome tagged success, failure or unconfigured
        """
        provider = client.provider_name

        if not client.is_configured:
            logger.debug(f"Skipping {provider}: credential not configured")
            return ProviderOutcome.unconfigured(provider)

        try:
            with provider_attempt(logger, provider, client.model_id):
                response = client.generate(build_instruction(idea))
        except Exception as e:
            log_exception(logger, f"{provider} call failed", e)
            return ProviderOutcome.failure(provider, f"{type(e).__name__}: {e}")

        if not response.success:
            logger.error(f"{provider} call failed: {response.error_message}")
            return ProviderOutcome.failure(provider, response.error_message or "Unknown error")

        return ProviderOutcome.success(provider, response.content)

    def run(self, idea: str) -> List[ProviderOutcome]:
        """
        Walk the chain until a provider succeeds.

        Returns:
            Outcomes of every step attempted, the last one being the
            success if there was one
        """
        outcomes = []
        for client in self.clients:
            outcome = self.attempt(client, idea)
            outcomes.append(outcome)
            if outcome.succeeded:
                break
        return outcomes

    def close(self) -> None:
        """Close every client in the chain."""
        for client in self.clients:
            client.close()

    def ai_improve(self, idea: str) -> ChainResult:
        """
        Generate a brief through the remote providers.

        Args:
            idea: Idea text, already validated and trimmed

        Returns:
            Brief with `provider` set, or QuotaExceeded when no provider
            was configured or every configured one failed
        """
        outcomes = self.run(idea)

        if outcomes and outcomes[-1].succeeded:
            winner = outcomes[-1]
            local = self.synthesizer.synthesize(idea)
            if not winner.text:
                logger.warning(f"{winner.provider} returned no text, using local brief")
            logger.info(f"Brief generated by {winner.provider}")
            return dataclasses.replace(
                local,
                improved=winner.text or local.improved,
                provider=winner.provider,
            )

        any_failed = any(o.status is OutcomeStatus.FAILURE for o in outcomes)
        if any_failed and self.local_fallback_on_failure:
            logger.warning("All configured providers failed, using local brief")
            return self.synthesizer.synthesize(idea)

        if any_failed:
            logger.warning("All configured providers failed")
        else:
            logger.warning("No provider configured")
        return QuotaExceeded()


def build_default_chain(config: Optional[AppConfig] = None) -> ProviderChain:
    """
    Chain of Hugging Face then OpenAI built from configuration.

    Args:
        config: Application configuration (defaults/environment if None)

    Returns:
        ProviderChain ready to use
    """
    config = config or AppConfig()

    clients = [
        HuggingFaceClient(config=config.providers.huggingface),
        OpenAIClient(config=config.providers.openai),
    ]
    configured = [c.provider_name for c in clients if c.is_configured]
    logger.info(f"Provider chain: {configured or 'no provider configured'}")

    return ProviderChain(
        clients,
        local_fallback_on_failure=config.chain.local_fallback_on_failure,
    )
