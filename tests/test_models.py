"""Tests for Pydantic models and settings."""

from text_summarizer.core.config import Settings
from text_summarizer.models.summary import SummarizeRequest, SummaryResult


class TestSummaryModels:
    """Tests for request/result models."""

    def test_result_serializes_camel_case(self):
        """Test key points serialize under the keyPoints alias."""
        result = SummaryResult(summary="A summary.", key_points=["A key point here."])

        assert result.model_dump(by_alias=True) == {
            "summary": "A summary.",
            "keyPoints": ["A key point here."],
        }

    def test_result_accepts_alias(self):
        """Test the result can be built from the wire format."""
        result = SummaryResult.model_validate(
            {"summary": "A summary.", "keyPoints": ["A key point here."]}
        )

        assert result.key_points == ["A key point here."]

    def test_request_text_optional(self):
        assert SummarizeRequest().text is None
        assert SummarizeRequest(text="hello").text == "hello"


class TestSettings:
    """Tests for Settings defaults and parsing."""

    def test_defaults(self):
        """Test defaults match the gateway contract."""
        settings = Settings(_env_file=None, ai_gateway_api_key="k")

        assert settings.max_input_chars == 8000
        assert settings.summary_model == "google/gemini-2.5-flash"
        assert settings.ai_gateway_base_url == "https://ai.gateway.lovable.dev/v1"
        assert settings.require_api_key is False

    def test_cors_headers(self):
        settings = Settings(_env_file=None)

        assert settings.cors_headers == {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
        }

    def test_api_keys_parsed(self):
        """Test comma-separated API keys are split and trimmed."""
        settings = Settings(_env_file=None, api_keys="one, two,,three ")

        assert settings.api_keys == ["one", "two", "three"]

    def test_no_api_keys_by_default(self, monkeypatch):
        """Test no client key is accepted unless one is configured."""
        monkeypatch.delenv("API_KEYS", raising=False)

        assert Settings(_env_file=None).api_keys == []

    def test_legacy_key_name(self, monkeypatch):
        """Test the gateway key is also read from LOVABLE_API_KEY."""
        monkeypatch.delenv("AI_GATEWAY_API_KEY", raising=False)
        monkeypatch.setenv("LOVABLE_API_KEY", "legacy-key")

        settings = Settings(_env_file=None)

        assert settings.ai_gateway_api_key == "legacy-key"
