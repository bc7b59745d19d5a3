"""Integration tests for the command-line interface."""

import json

import pytest
from vibecoder.cli import main

IDEA = "I want to build an online store to sell shoes"


@pytest.fixture(autouse=True)
def no_provider_keys(monkeypatch, tmp_path):
    monkeypatch.delenv("HUGGINGFACE_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    # keep load_config and load_dotenv away from files in the repository
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


class TestImproveCommand:
    """Tests for `vibecoder improve`."""

    def test_prints_brief(self, capsys):
        assert main(["improve", IDEA]) == 0
        out = capsys.readouterr().out
        assert out.startswith("# Website Project Brief")
        assert "## Project Type\nEcommerce application" in out

    def test_json_output(self, capsys):
        assert main(["improve", IDEA, "--json"]) == 0
        body = json.loads(capsys.readouterr().out)
        assert body["success"] is True
        assert body["data"]["projectType"] == "ecommerce"

    def test_invalid_idea(self, capsys):
        assert main(["improve", "short"]) == 1
        assert capsys.readouterr().out == ""

    def test_ai_without_providers(self, capsys):
        assert main(["improve", IDEA, "--ai", "--json"]) == 1
        body = json.loads(capsys.readouterr().out)
        assert body == {
            "success": False,
            "error": "Quota exceeded",
            "message": "Your usage quota has been exceeded. Please try again later.",
        }

    def test_ai_with_mock_provider(self, capsys):
        assert main(["improve", IDEA, "--ai", "--mock-llm", "--json"]) == 0
        body = json.loads(capsys.readouterr().out)
        assert body["data"]["provider"] == "mock"


class TestMain:
    """Tests for argument handling."""

    def test_no_command(self):
        assert main([]) == 1

    def test_missing_config_file(self, tmp_path):
        assert main(["-c", str(tmp_path / "missing.yaml"), "improve", IDEA]) == 1

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: WARNING\n")
        assert main(["-c", str(path), "improve", IDEA]) == 0
