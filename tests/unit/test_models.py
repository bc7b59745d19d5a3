"""Unit tests for brief models."""

import pytest
from vibecoder.catalog import ProjectType, TechStack
from vibecoder.models import (
    Brief,
    DetectionResult,
    OutcomeStatus,
    ProviderOutcome,
    QuotaExceeded,
)


class TestBrief:
    """Tests for Brief."""

    @pytest.fixture
    def stack(self):
        return TechStack(frontend=("React",), backend=("Express",), features=("Cart",))

    def test_to_dict_without_provider(self, stack):
        brief = Brief(
            original="An online store",
            improved="# Brief",
            project_type=ProjectType.ECOMMERCE,
            detected_features=["search"],
            suggested_stack=stack,
        )
        assert brief.to_dict() == {
            "original": "An online store",
            "improved": "# Brief",
            "projectType": "ecommerce",
            "detectedFeatures": ["search"],
            "suggestedStack": {
                "frontend": ["React"],
                "backend": ["Express"],
                "features": ["Cart"],
            },
        }

    def test_to_dict_with_provider(self, stack):
        brief = Brief(
            original="x",
            improved="y",
            project_type=ProjectType.GENERAL,
            detected_features=[],
            suggested_stack=stack,
            provider="openai",
        )
        data = brief.to_dict()
        assert data["provider"] == "openai"
        assert data["projectType"] == "general"


class TestDetectionResult:
    """Tests for DetectionResult."""

    def test_defaults(self):
        result = DetectionResult(project_type=ProjectType.BLOG)
        assert result.detected_features == []


class TestProviderOutcome:
    """Tests for ProviderOutcome."""

    def test_success(self):
        outcome = ProviderOutcome.success("huggingface", "text")
        assert outcome.status == OutcomeStatus.SUCCESS
        assert outcome.succeeded
        assert outcome.text == "text"

    def test_failure(self):
        outcome = ProviderOutcome.failure("openai", "500")
        assert outcome.status == OutcomeStatus.FAILURE
        assert not outcome.succeeded
        assert outcome.reason == "500"

    def test_unconfigured(self):
        outcome = ProviderOutcome.unconfigured("openai")
        assert outcome.status == OutcomeStatus.UNCONFIGURED
        assert not outcome.succeeded


class TestQuotaExceeded:
    """Tests for QuotaExceeded."""

    def test_to_dict(self):
        assert QuotaExceeded().to_dict() == {
            "error": "Quota exceeded",
            "message": "Your usage quota has been exceeded. Please try again later.",
        }
