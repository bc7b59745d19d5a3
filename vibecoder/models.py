"""
Brief Data Models - Structured results produced by the classifier,
the synthesizer and the provider chain.

Everything here is request-scoped: a fresh object per call, never shared.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum

from .catalog import ProjectType, TechStack


@dataclass
class DetectionResult:
    """Category and supplementary features detected in an idea."""
    project_type: ProjectType
    detected_features: List[str] = field(default_factory=list)


@dataclass
class Brief:
    """
    Final structured output for one idea.

    `provider` is set only when a remote provider produced the result.
    """
    original: str
    improved: str
    project_type: ProjectType
    detected_features: List[str]
    suggested_stack: TechStack
    provider: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape returned by the API."""
        data = {
            "original": self.original,
            "improved": self.improved,
            "projectType": self.project_type.value,
            "detectedFeatures": list(self.detected_features),
            "suggestedStack": self.suggested_stack.to_dict(),
        }
        if self.provider:
            data["provider"] = self.provider
        return data


class OutcomeStatus(Enum):
    """Result of a single provider attempt."""
    SUCCESS = "success"
    FAILURE = "failure"
    UNCONFIGURED = "unconfigured"


@dataclass
class ProviderOutcome:
    """Tagged outcome of one step of the provider chain."""
    status: OutcomeStatus
    provider: str
    text: str = ""
    reason: Optional[str] = None

    @classmethod
    def success(cls, provider: str, text: str) -> 'ProviderOutcome':
        return cls(status=OutcomeStatus.SUCCESS, provider=provider, text=text)

    @classmethod
    def failure(cls, provider: str, reason: str) -> 'ProviderOutcome':
        return cls(status=OutcomeStatus.FAILURE, provider=provider, reason=reason)

    @classmethod
    def unconfigured(cls, provider: str) -> 'ProviderOutcome':
        return cls(
            status=OutcomeStatus.UNCONFIGURED,
            provider=provider,
            reason="credential not configured",
        )

    @property
    def succeeded(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS


@dataclass
class QuotaExceeded:
    """Returned by the provider chain when no generation path was usable."""
    error: str = "Quota exceeded"
    message: str = "Your usage quota has been exceeded. Please try again later."

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message}
