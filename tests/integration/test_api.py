"""Integration tests for the HTTP API."""

from unittest.mock import MagicMock

import pytest
from vibecoder.api import create_app
from vibecoder.core.config import AppConfig, HuggingFaceConfig, OpenAIConfig, ProvidersConfig, ServerConfig
from vibecoder.llm import MockLLMClient
from vibecoder.providers import ProviderChain

IDEA = "I want to build an online store to sell shoes"


@pytest.fixture
def config():
    return AppConfig(providers=ProvidersConfig(
        huggingface=HuggingFaceConfig(api_key=None),
        openai=OpenAIConfig(api_key=None),
    ))


@pytest.fixture
def client(config):
    app = create_app(config=config)
    app.config["TESTING"] = True
    return app.test_client()


def make_client(config, **kwargs):
    app = create_app(config=config, **kwargs)
    app.config["TESTING"] = True
    return app.test_client()


class TestImproveEndpoint:
    """Tests for POST /api/v1/improve."""

    def test_returns_brief(self, client):
        response = client.post("/api/v1/improve", json={"idea": IDEA})

        assert response.status_code == 200
        body = response.get_json()
        assert body["success"] is True
        assert body["data"]["projectType"] == "ecommerce"
        assert body["data"]["suggestedStack"]["features"] == [
            "Product catalog", "Shopping cart", "Payment integration", "Order management",
        ]
        assert "## Project Type\nEcommerce application" in body["data"]["improved"]
        assert "provider" not in body["data"]

    def test_trims_idea(self, client):
        response = client.post("/api/v1/improve", json={"idea": "   Build me a simple app   "})

        data = response.get_json()["data"]
        assert data["original"] == "Build me a simple app"
        assert data["projectType"] == "general"
        assert data["suggestedStack"]["frontend"][-1] == "Shadcn UI"

    def test_rejects_short_idea(self, client):
        response = client.post("/api/v1/improve", json={"idea": "too short"})

        assert response.status_code == 400
        errors = response.get_json()["errors"]
        assert errors[0]["msg"] == "Idea must be between 10 and 1000 characters"
        assert errors[0]["param"] == "idea"

    def test_rejects_long_idea(self, client):
        response = client.post("/api/v1/improve", json={"idea": "x" * 1001})
        assert response.status_code == 400

    def test_rejects_missing_body(self, client):
        response = client.post("/api/v1/improve", data="not json")
        assert response.status_code == 400

    def test_rejects_non_object_body(self, client):
        response = client.post("/api/v1/improve", json=["an idea in a list"])
        assert response.status_code == 400

    def test_internal_failure(self, config):
        synthesizer = MagicMock()
        synthesizer.synthesize.side_effect = RuntimeError("defect")
        client = make_client(config, synthesizer=synthesizer)

        response = client.post("/api/v1/improve", json={"idea": IDEA})

        assert response.status_code == 500
        assert response.get_json() == {"success": False, "error": "Failed to improve prompt"}


class TestImproveAIEndpoint:
    """Tests for POST /api/v1/improve/ai."""

    def test_quota_exceeded_without_providers(self, client):
        response = client.post("/api/v1/improve/ai", json={"idea": IDEA})

        assert response.status_code == 429
        assert response.get_json() == {
            "success": False,
            "error": "Quota exceeded",
            "message": "Your usage quota has been exceeded. Please try again later.",
        }

    def test_provider_result(self, config):
        chain = ProviderChain([MockLLMClient(default_response="Remote brief", provider_name="openai")])
        client = make_client(config, chain=chain)

        response = client.post("/api/v1/improve/ai", json={"idea": IDEA})

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["provider"] == "openai"
        assert data["improved"] == "Remote brief"
        assert data["projectType"] == "ecommerce"

    def test_validation_runs_first(self, config):
        chain = MagicMock()
        client = make_client(config, chain=chain)

        response = client.post("/api/v1/improve/ai", json={"idea": "short"})

        assert response.status_code == 400
        chain.ai_improve.assert_not_called()

    def test_internal_failure(self, config):
        chain = MagicMock()
        chain.ai_improve.side_effect = RuntimeError("defect")
        client = make_client(config, chain=chain)

        response = client.post("/api/v1/improve/ai", json={"idea": IDEA})

        assert response.status_code == 500
        assert response.get_json() == {"success": False, "error": "Failed to improve prompt (AI)"}


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok", "message": "Vibe Coder API is running"}

    def test_unknown_route_is_404(self, client):
        assert client.get("/api/v1/nope").status_code == 404

    def test_cors_header(self, client):
        response = client.get("/api/v1/health", headers={"Origin": "http://localhost:3000"})
        assert response.headers.get("Access-Control-Allow-Origin") == "*"

    def test_cors_wildcard_on_preflight(self, client):
        response = client.options(
            "/api/v1/improve",
            headers={
                "Origin": "https://app.example.com",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.headers.get("Access-Control-Allow-Origin") == "*"


class TestCorsAllowList:
    """Tests for an explicit CORS_ORIGINS list."""

    @pytest.fixture
    def client(self, config):
        config.server = ServerConfig(cors_origins="http://localhost:3000, https://app.example.com")
        return make_client(config)

    def test_listed_origin_is_echoed(self, client):
        response = client.get("/api/v1/health", headers={"Origin": "https://app.example.com"})
        assert response.headers.get("Access-Control-Allow-Origin") == "https://app.example.com"

    def test_unlisted_origin_gets_no_header(self, client):
        response = client.get("/api/v1/health", headers={"Origin": "https://evil.example.com"})
        assert "Access-Control-Allow-Origin" not in response.headers
