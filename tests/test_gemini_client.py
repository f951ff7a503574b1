"""Tests for the Gemini LLM client."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from nova_pos.clients.gemini import GeminiClient, GeminiResponse
from nova_pos.errors import GeminiConfigurationError


def _mock_response(parts, finish_reason="STOP", prompt_tokens=12, output_tokens=8):
    candidate = MagicMock()
    candidate.content.parts = [MagicMock(text=text) for text in parts]
    candidate.finish_reason = finish_reason

    response = MagicMock()
    response.candidates = [candidate]
    response.usage_metadata = MagicMock(
        prompt_token_count=prompt_tokens, candidates_token_count=output_tokens
    )
    return response


class TestGeminiClient:
    """Tests for GeminiClient."""

    def test_client_initialization_with_defaults(self):
        """Test client initializes with settings defaults."""
        client = GeminiClient()

        assert client._api_key == "test-key"
        assert client.model == "gemini-3-flash-preview"
        assert client._max_tokens > 0

    def test_client_initialization_with_custom_params(self):
        """Test client accepts custom parameters."""
        client = GeminiClient(
            api_key="other-key",
            model="gemini-2.5-flash",
            max_tokens=256,
            temperature=0.2,
        )

        assert client._api_key == "other-key"
        assert client.model == "gemini-2.5-flash"
        assert client._max_tokens == 256
        assert client._temperature == 0.2

    def test_zero_temperature_is_kept(self):
        """Test an explicit zero temperature is not replaced by the default."""
        client = GeminiClient(temperature=0.0)

        assert client._temperature == 0.0

    def test_missing_api_key_raises(self, monkeypatch):
        """Test the client refuses to start without a key."""
        from nova_pos.config import get_settings

        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        get_settings.cache_clear()

        with pytest.raises(GeminiConfigurationError):
            GeminiClient()

    def test_parse_text_response(self):
        """Test parsing a text response."""
        client = GeminiClient()

        parsed = client._parse_response(_mock_response(["Collect ", "dues first."]))

        assert parsed.content == "Collect dues first."
        assert parsed.stop_reason == "end_turn"
        assert parsed.usage == {"input_tokens": 12, "output_tokens": 8}

    @pytest.mark.parametrize(
        ("finish_reason", "expected"),
        [
            ("MAX_TOKENS", "max_tokens"),
            ("SAFETY", "content_filter"),
            ("RECITATION", "content_filter"),
            ("SOMETHING_NEW", "end_turn"),
        ],
    )
    def test_parse_finish_reasons(self, finish_reason, expected):
        """Test finish reason mapping."""
        client = GeminiClient()

        parsed = client._parse_response(_mock_response(["x"], finish_reason=finish_reason))

        assert parsed.stop_reason == expected

    def test_parse_enum_finish_reason(self):
        """Test SDK enum finish reasons are mapped by value."""
        client = GeminiClient()
        reason = MagicMock(value="MAX_TOKENS")

        parsed = client._parse_response(_mock_response(["x"], finish_reason=reason))

        assert parsed.stop_reason == "max_tokens"

    def test_parse_response_without_candidates(self):
        """Test an empty candidate list yields empty content."""
        client = GeminiClient()
        response = MagicMock(candidates=[], usage_metadata=None)

        parsed = client._parse_response(response)

        assert parsed.content == ""
        assert parsed.usage == {"input_tokens": 0, "output_tokens": 0}

    @pytest.mark.asyncio
    async def test_generate_calls_async_sdk(self):
        """Test generate sends the prompt to the async models API."""
        client = GeminiClient()
        sdk = MagicMock()
        sdk.aio.models.generate_content = AsyncMock(return_value=_mock_response(["Hi"]))
        client._client = sdk

        result = await client.generate("Analyze these POS stats")

        assert result.content == "Hi"
        kwargs = sdk.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-3-flash-preview"
        assert kwargs["contents"] == "Analyze these POS stats"
        assert kwargs["config"].max_output_tokens == client._max_tokens

    @pytest.mark.asyncio
    async def test_generate_reraises_sdk_errors(self):
        """Test SDK errors propagate to the caller."""
        client = GeminiClient()
        sdk = MagicMock()
        sdk.aio.models.generate_content = AsyncMock(side_effect=RuntimeError("403"))
        client._client = sdk

        with pytest.raises(RuntimeError, match="403"):
            await client.generate("prompt")


class TestGeminiResponse:
    """Tests for GeminiResponse dataclass."""

    def test_response_creation(self):
        response = GeminiResponse(
            content="Hello",
            stop_reason="end_turn",
            usage={"input_tokens": 10, "output_tokens": 5},
        )

        assert response.content == "Hello"
        assert response.usage["output_tokens"] == 5
